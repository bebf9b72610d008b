from flask import request
from datetime import timezone
from dateutil.parser import parse, ParserError
from wikiapp.domain.exceptions import InvalidParam, ResourceConflict


def normalize_ts(ts):
    """
    Ensure datetime is timezone-aware.
    Defaults to UTC if naive.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts


def enforce_optimistic_lock(entity):
    """
    Enforces optimistic locking using the If-Unmodified-Since header.
    Raises ResourceConflict if the entity has been modified since.
    """
    client_ts = request.headers.get("If-Unmodified-Since")
    if not client_ts:
        return  # No optimistic lock requested

    try:
        client_ts = normalize_ts(parse(client_ts))
    except (ParserError, OverflowError):
        raise InvalidParam("If-Unmodified-Since", "Invalid If-Unmodified-Since header")

    # HTTP dates carry whole seconds only
    server_ts = normalize_ts(entity.updated_at).replace(microsecond=0)

    if server_ts > client_ts:
        raise ResourceConflict(
            entity.id,
            "Conflict detected. Resource has been modified."
        )


def enforce_version(entity, expected_version):
    """Compare the version a client read against the stored counter."""
    if expected_version is None:
        return

    if entity.version != expected_version:
        raise ResourceConflict(
            entity.id,
            f"Conflict detected. Expected version {expected_version}, found {entity.version}."
        )
