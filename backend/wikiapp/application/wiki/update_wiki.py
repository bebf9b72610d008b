from typing import Callable, List, Optional
from wikiapp.extensions import db
from wikiapp.models.base import next_id as default_next_id
from wikiapp.models.wiki import Wiki
from wikiapp.models.text import Text
from wikiapp.domain.exceptions import InvalidParam
from wikiapp.utils.attachments import check_attachment, create_attachment_in_tx
from wikiapp.utils.audit import log_action
from wikiapp.utils.media import delete_file
from wikiapp.utils.tags import format_tags
from wikiapp.utils.transaction import transactional
from .queries import get_text_value, get_wiki


def update_wiki(
    *,
    wiki_id: str,
    name: Optional[str] = None,
    description: Optional[str] = None,
    tags=None,
    content: Optional[str] = None,
    file=None,
    actor_id: Optional[str] = None,
    next_id: Callable[[], str] = default_next_id,
) -> tuple[Wiki, str]:
    """
    Update any of name, description, tags, content and cover of a wiki.

    Design rules:
    - None means "not supplied"; an empty string is rejected
    - New content is a new Text, the wiki is repointed to it
    - A new cover replaces the reference, the old attachment is kept
    """
    for field, value in (("name", name), ("description", description), ("content", content)):
        if value is not None and value == "":
            raise InvalidParam(field)

    if tags is not None:
        tags = format_tags(tags)

    descriptor = check_attachment(file, require_one=False)
    media_to_cleanup: List[str] = []
    changed_fields: list[str] = []

    try:
        with transactional():
            wiki = get_wiki(wiki_id, lock=True)

            if content is not None:
                text = Text()
                text.id = next_id()
                text.ref_id = wiki.id
                text.value = content
                db.session.add(text)
                wiki.content_id = text.id
                changed_fields.append("content")

            if descriptor is not None:
                descriptor.name = name or wiki.name
                atta = create_attachment_in_tx(descriptor, owner_id=wiki.id, user_id=actor_id)
                media_to_cleanup.append(atta.url)
                wiki.cover_id = atta.id
                changed_fields.append("cover")

            for field, value in (("name", name), ("description", description), ("tags", tags)):
                if value is not None and getattr(wiki, field) != value:
                    setattr(wiki, field, value)
                    changed_fields.append(field)

            if changed_fields:
                log_action(
                    action="wiki.update",
                    entity_type="wiki",
                    entity_id=wiki.id,
                    actor_id=actor_id,
                    payload={"fields": changed_fields},
                )
    except Exception:
        for media_url in media_to_cleanup:
            delete_file(media_url)
        raise

    if content is None:
        content = get_text_value(wiki.content_id)
    return wiki, content
