from wikiapp.extensions import db
from wikiapp.constants import ROOT_PARENT_ID
from .base import BaseModel

class WikiPage(BaseModel):
    __tablename__ = "wikipages"

    wiki_id = db.Column(db.String(36), db.ForeignKey("wikis.id"), nullable=False, index=True)

    # Empty string marks a top-level page, so this cannot be a foreign key.
    parent_id = db.Column(db.String(36), nullable=False, default=ROOT_PARENT_ID)

    name = db.Column(db.String(100), nullable=False)
    content_id = db.Column(db.String(36), nullable=False)
    display_order = db.Column(db.Integer, nullable=False, default=0)
    version = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.Index("idx_wikipage_siblings", "wiki_id", "parent_id", "display_order"),
    )