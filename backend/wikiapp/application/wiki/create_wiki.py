from typing import Callable, List, Optional
from flask import current_app
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


def create_wiki(
    *,
    name: str,
    description: str,
    content: str,
    tags=None,
    file=None,
    actor_id: Optional[str] = None,
    next_id: Callable[[], str] = default_next_id,
) -> tuple[Wiki, str]:
    """
    Create a wiki with its initial content and optional cover image.

    Responsibilities:
    - Validate input and the cover file before opening a transaction
    - Text, Attachment and Wiki written in one transaction
    - Audit logging
    """
    for field, value in (("name", name), ("description", description), ("content", content)):
        if not value:
            raise InvalidParam(field)

    tags = format_tags(tags)
    descriptor = check_attachment(file, require_one=False)
    if descriptor is not None:
        # The cover is named after the wiki, not the uploaded file.
        descriptor.name = name

    wiki_id = next_id()
    content_id = next_id()
    media_to_cleanup: List[str] = []

    try:
        with transactional():
            text = Text()
            text.id = content_id
            text.ref_id = wiki_id
            text.value = content
            db.session.add(text)

            cover_id = ""
            if descriptor is not None:
                atta = create_attachment_in_tx(descriptor, owner_id=wiki_id, user_id=actor_id)
                media_to_cleanup.append(atta.url)
                cover_id = atta.id

            wiki = Wiki()
            wiki.id = wiki_id
            wiki.name = name
            wiki.description = description
            wiki.tags = tags
            wiki.content_id = content_id
            wiki.cover_id = cover_id
            db.session.add(wiki)
            db.session.flush()

            log_action(
                action="wiki.create",
                entity_type="wiki",
                entity_id=wiki.id,
                actor_id=actor_id,
                payload={"name": name, "tags": tags, "cover_id": cover_id},
            )
    except Exception:
        for media_url in media_to_cleanup:
            delete_file(media_url)
        raise

    current_app.logger.info("Created wiki %s (%s)", wiki.id, wiki.name)
    return wiki, content
