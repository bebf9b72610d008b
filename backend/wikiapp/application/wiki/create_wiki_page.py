from typing import Callable, Optional
from flask import current_app
from wikiapp.constants import ROOT_ALIAS, ROOT_PARENT_ID
from wikiapp.extensions import db
from wikiapp.models.base import next_id as default_next_id
from wikiapp.models.text import Text
from wikiapp.models.wiki_page import WikiPage
from wikiapp.domain.exceptions import InvalidParam
from wikiapp.utils.audit import log_action
from wikiapp.utils.order import next_display_order
from wikiapp.utils.transaction import transactional
from .queries import get_wiki


def normalize_parent_id(parent_id: Optional[str]) -> str:
    if parent_id is None or parent_id == ROOT_ALIAS:
        return ROOT_PARENT_ID
    return parent_id


def create_wiki_page(
    *,
    wiki_id: str,
    parent_id: Optional[str],
    name: str,
    content: str,
    actor_id: Optional[str] = None,
    next_id: Callable[[], str] = default_next_id,
) -> tuple[WikiPage, str]:
    """
    Append a page as the last child of `parent_id` (root when empty).

    Edge cases handled:
    - Missing wiki -> NotFound
    - Parent missing or in another wiki -> InvalidParam("parent_id")
    - Rank counted under the wiki lock, in the insert's transaction
    """
    if not name:
        raise InvalidParam("name")
    if not content:
        raise InvalidParam("content")

    parent_id = normalize_parent_id(parent_id)

    with transactional():
        wiki = get_wiki(wiki_id, lock=True)

        if parent_id != ROOT_PARENT_ID:
            parent = db.session.get(WikiPage, parent_id)
            if parent is None or parent.wiki_id != wiki.id:
                raise InvalidParam("parent_id")

        page_id = next_id()
        content_id = next_id()

        text = Text()
        text.id = content_id
        text.ref_id = page_id
        text.value = content
        db.session.add(text)

        page = WikiPage()
        page.id = page_id
        page.wiki_id = wiki.id
        page.parent_id = parent_id
        page.name = name
        page.content_id = content_id
        page.display_order = next_display_order(wiki.id, parent_id)
        page.version = 0
        db.session.add(page)
        db.session.flush()

        log_action(
            action="wikipage.create",
            entity_type="wikipage",
            entity_id=page.id,
            actor_id=actor_id,
            payload={
                "wiki_id": wiki.id,
                "parent_id": parent_id,
                "display_order": page.display_order,
            },
        )

    current_app.logger.info(
        "Created page %s in wiki %s under %r at %d",
        page.id, page.wiki_id, page.parent_id, page.display_order,
    )
    return page, content
