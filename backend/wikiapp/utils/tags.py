from wikiapp.constants import MAX_TAGS, MAX_TAG_LENGTH
from wikiapp.domain.exceptions import InvalidParam

def format_tags(raw):
    """
    Normalize tags into a comma separated string.

    Accepts "a, b,a" or ["a", "b"]. Blank tags are dropped and duplicates
    are removed case-insensitively, keeping the first spelling.
    """
    if raw is None:
        return ""

    if isinstance(raw, str):
        candidates = raw.split(",")
    elif isinstance(raw, (list, tuple)):
        candidates = raw
    else:
        raise InvalidParam("tags")

    tags = []
    seen = set()
    for tag in candidates:
        if not isinstance(tag, str):
            raise InvalidParam("tags")
        tag = tag.strip()
        if not tag:
            continue
        if len(tag) > MAX_TAG_LENGTH:
            raise InvalidParam("tags", f"Tag longer than {MAX_TAG_LENGTH} characters: {tag[:20]}...")
        key = tag.lower()
        if key in seen:
            continue
        seen.add(key)
        tags.append(tag)

    if len(tags) > MAX_TAGS:
        raise InvalidParam("tags", f"At most {MAX_TAGS} tags are allowed.")

    return ",".join(tags)
