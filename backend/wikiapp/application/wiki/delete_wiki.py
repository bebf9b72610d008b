from typing import Dict, Optional
from flask import current_app
from sqlalchemy import func, select
from wikiapp.extensions import db
from wikiapp.models.text import Text
from wikiapp.models.wiki_page import WikiPage
from wikiapp.domain.exceptions import ResourceConflict
from wikiapp.utils.audit import log_action
from wikiapp.utils.transaction import transactional
from .queries import get_wiki


def delete_wiki(
    *,
    wiki_id: str,
    actor_id: Optional[str] = None,
) -> Dict[str, str]:
    """
    Delete an empty wiki together with every Text it owns.

    The page count is read under the wiki row lock, so a page created
    concurrently either lands before the check or fails on the missing wiki.
    """
    with transactional():
        wiki = get_wiki(wiki_id, lock=True)

        num_pages = db.session.execute(
            select(func.count(WikiPage.id)).where(WikiPage.wiki_id == wiki.id)
        ).scalar_one()

        if num_pages > 0:
            raise ResourceConflict(wiki.id, "Wiki is not empty.")

        db.session.delete(wiki)

        # Every content revision of the wiki, not just the current one.
        Text.query.filter_by(ref_id=wiki_id).delete(synchronize_session=False)

        log_action(
            action="wiki.delete",
            entity_type="wiki",
            entity_id=wiki_id,
            actor_id=actor_id,
            payload={"name": wiki.name},
        )

    current_app.logger.info("Deleted wiki %s", wiki_id)
    return {"id": wiki_id}
