from wikiapp.extensions import db
from .base import BaseModel
from sqlalchemy import event

class Text(BaseModel):
    __tablename__ = "texts"

    # id of the wiki or wiki page that owns this blob
    ref_id = db.Column(db.String(36), nullable=False, index=True)
    value = db.Column(db.Text, nullable=False)

@event.listens_for(Text, "before_update")
def prevent_text_mutation(mapper, connection, target):
    raise RuntimeError("Texts are immutable, create a new one instead")
