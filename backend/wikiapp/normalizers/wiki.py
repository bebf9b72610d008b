def split_tags(tags):
    return [t for t in (tags or "").split(",") if t]

def normalize_wiki(wiki, content=None):
    data = {
        "id": wiki.id,
        "name": wiki.name,
        "description": wiki.description,
        "tags": split_tags(wiki.tags),
        "content_id": wiki.content_id,
        "cover_id": wiki.cover_id or None,
        "created_at": wiki.created_at.isoformat() if wiki.created_at else None,
        "updated_at": wiki.updated_at.isoformat() if wiki.updated_at else None,
    }

    if content is not None:
        data["content"] = content

    return data
