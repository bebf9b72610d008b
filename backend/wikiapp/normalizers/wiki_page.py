def normalize_wiki_page(page, content=None):
    data = {
        "id": page.id,
        "wiki_id": page.wiki_id,
        "parent_id": page.parent_id,
        "name": page.name,
        "content_id": page.content_id,
        "display_order": page.display_order,
        "version": page.version,
        "created_at": page.created_at.isoformat() if page.created_at else None,
        "updated_at": page.updated_at.isoformat() if page.updated_at else None,
    }

    if content is not None:
        data["content"] = content

    return data


def normalize_tree(nodes):
    """Nested JSON for an ordered forest of TreeNodes."""
    result = []
    stack = [(node, result) for node in reversed(nodes)]
    while stack:
        node, siblings = stack.pop()
        data = normalize_wiki_page(node.page)
        data["children"] = []
        siblings.append(data)
        stack.extend((child, data["children"]) for child in reversed(node.children))
    return result
