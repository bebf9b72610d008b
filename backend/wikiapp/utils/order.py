from sqlalchemy import func, select
from wikiapp.extensions import db
from wikiapp.models.wiki_page import WikiPage

def compact_order(items, order_field="display_order"):
    """
    Re-assigns sequential order values (0..N-1) following list position.

    Returns the items whose value actually changed.
    """
    changed = []
    for index, item in enumerate(items):
        if getattr(item, order_field) != index:
            setattr(item, order_field, index)
            changed.append(item)
    return changed


def next_display_order(wiki_id, parent_id):
    """
    Rank for a page appended under `parent_id`: the current sibling count.

    Must run in the same transaction as the insert that uses it.
    """
    return db.session.execute(
        select(func.count(WikiPage.id))
        .where(WikiPage.wiki_id == wiki_id, WikiPage.parent_id == parent_id)
    ).scalar_one()
