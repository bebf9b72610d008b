import os
from dataclasses import dataclass
from typing import Any, Optional

from flask import current_app
from wikiapp.extensions import db
from wikiapp.models.attachment import Attachment
from wikiapp.domain.exceptions import InvalidParam
from .media import allowed_file, save_file


@dataclass
class AttachmentDescriptor:
    name: str
    filename: str
    mime: str
    size: int
    file: Any


def _stream_size(file) -> int:
    stream = file.stream
    stream.seek(0, os.SEEK_END)
    size = stream.tell()
    stream.seek(0)
    return size


def check_attachment(file, require_one: bool = True) -> Optional[AttachmentDescriptor]:
    """
    Validate an uploaded file before any transaction is opened.

    Returns None when no file was sent and `require_one` is False.
    """
    if file is None or not file.filename:
        if require_one:
            raise InvalidParam("file", "An image file is required.")
        return None

    if not allowed_file(file.filename):
        raise InvalidParam("file", "File type not allowed.")

    size = _stream_size(file)
    if size == 0:
        raise InvalidParam("file", "File is empty.")

    return AttachmentDescriptor(
        name=file.filename,
        filename=file.filename,
        mime=file.mimetype or "application/octet-stream",
        size=size,
        file=file,
    )


def create_attachment_in_tx(descriptor: AttachmentDescriptor, *, owner_id: str, user_id: Optional[str]) -> Attachment:
    """
    Store the file and add its Attachment row to the open transaction.

    The stored file outlives a rollback; callers remove it with
    `media.delete_file` when the transaction fails.
    """
    url = save_file(descriptor.file)

    atta = Attachment()
    atta.ref_id = owner_id
    atta.user_id = user_id
    atta.name = descriptor.name
    atta.filename = descriptor.filename
    atta.mime = descriptor.mime
    atta.size = descriptor.size
    atta.url = url

    db.session.add(atta)
    db.session.flush()

    current_app.logger.info("Stored attachment %s for %s at %s", atta.id, owner_id, url)
    return atta
