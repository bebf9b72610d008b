from wikiapp.extensions import db
from .base import BaseModel

class Wiki(BaseModel):
    __tablename__ = "wikis"

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.String(1000), nullable=False, default="")
    tags = db.Column(db.String(1000), nullable=False, default="")

    # References are plain ids: the blob and cover are repointed, never edited.
    content_id = db.Column(db.String(36), nullable=False)
    cover_id = db.Column(db.String(36), nullable=False, default="")
