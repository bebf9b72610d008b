from wikiapp.extensions import db
from .base import BaseModel

class Attachment(BaseModel):
    __tablename__ = "attachments"

    ref_id = db.Column(db.String(36), nullable=False, index=True)
    user_id = db.Column(db.String(36), nullable=True)

    name = db.Column(db.String(100), nullable=False)
    filename = db.Column(db.String(200), nullable=False)
    mime = db.Column(db.String(100), nullable=False)
    size = db.Column(db.Integer, nullable=False, default=0)
    url = db.Column(db.String(512), nullable=False)
