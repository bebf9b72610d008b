from typing import Callable, Optional
from sqlalchemy import select
from wikiapp.extensions import db
from wikiapp.models.base import next_id as default_next_id
from wikiapp.models.text import Text
from wikiapp.models.wiki_page import WikiPage
from wikiapp.domain.exceptions import InvalidParam, NotFound
from wikiapp.utils.audit import log_action
from wikiapp.utils.optimistic_lock import enforce_version
from wikiapp.utils.transaction import transactional
from .queries import get_text_value


def update_wiki_page(
    *,
    page_id: str,
    name: Optional[str] = None,
    content: Optional[str] = None,
    expected_version: Optional[int] = None,
    actor_id: Optional[str] = None,
    next_id: Callable[[], str] = default_next_id,
    check_lock: Optional[Callable[[WikiPage], None]] = None,
) -> tuple[WikiPage, str]:
    """
    Rename a page and/or give it new content. Position is left untouched.

    `expected_version` is the version the caller read; a mismatch means
    someone else changed the page in between.
    """
    if name is not None and name == "":
        raise InvalidParam("name")
    if content is not None and content == "":
        raise InvalidParam("content")
    if name is None and content is None:
        raise InvalidParam("name", "Nothing to update.")

    with transactional():
        page = db.session.execute(
            select(WikiPage).where(WikiPage.id == page_id).with_for_update()
        ).scalar_one_or_none()

        if page is None:
            raise NotFound("WikiPage")

        if check_lock is not None:
            check_lock(page)
        enforce_version(page, expected_version)

        changed_fields: list[str] = []

        if content is not None:
            text = Text()
            text.id = next_id()
            text.ref_id = page.id
            text.value = content
            db.session.add(text)
            page.content_id = text.id
            changed_fields.append("content")

        if name is not None and page.name != name:
            page.name = name
            changed_fields.append("name")

        if changed_fields:
            page.version = page.version + 1
            log_action(
                action="wikipage.update",
                entity_type="wikipage",
                entity_id=page.id,
                actor_id=actor_id,
                payload={"fields": changed_fields, "version": page.version},
            )

    if content is None:
        content = get_text_value(page.content_id, "WikiPage")
    return page, content
