from werkzeug.security import generate_password_hash, check_password_hash
from wikiapp.extensions import db
from wikiapp.constants import ROLE_SUBSCRIBER
from .base import BaseModel

class User(BaseModel):
    __tablename__ = 'users'

    email = db.Column(db.String(120), unique=True, nullable=False)
    name = db.Column(db.String(100), nullable=False, default="")
    password_hash = db.Column(db.String(256), nullable=False)

    role = db.Column(db.Integer, nullable=False, default=ROLE_SUBSCRIBER)
    is_active = db.Column(db.Boolean, default=True)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)
