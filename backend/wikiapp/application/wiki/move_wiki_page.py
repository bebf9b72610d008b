from typing import Optional
from flask import current_app
from wikiapp.constants import ROOT_PARENT_ID
from wikiapp.extensions import db
from wikiapp.models.wiki_page import WikiPage
from wikiapp.domain.exceptions import InvalidParam, NotFound
from wikiapp.domain.hierarchy.cycle import assert_can_attach
from wikiapp.domain.hierarchy.reorder import plan_move, sibling_list
from wikiapp.domain.invariants.wiki_page import assert_sibling_order
from wikiapp.utils.audit import log_action
from wikiapp.utils.order import compact_order
from wikiapp.utils.transaction import transactional
from .create_wiki_page import normalize_parent_id
from .queries import get_wiki, get_wiki_page, get_wiki_pages_map


def move_wiki_page(
    *,
    page_id: str,
    target_id: Optional[str],
    index: int,
    actor_id: Optional[str] = None,
) -> WikiPage:
    """
    Move a page (and so its subtree) under `target_id` at sibling `index`.

    Responsibilities:
    - Lock the wiki and read all of its pages as one snapshot
    - Reject cross-wiki targets and moves that would create a cycle
    - Re-rank the target group densely, and the group the page left
    - Bump the page version
    - Commit everything or nothing
    """
    if isinstance(index, bool) or not isinstance(index, int) or index < 0:
        raise InvalidParam("index")

    target_parent_id = normalize_parent_id(target_id)

    with transactional():
        page = get_wiki_page(page_id)
        get_wiki(page.wiki_id, lock=True)

        # Re-read under the lock; the identity map hands back `page` itself.
        pages_by_id = get_wiki_pages_map(page.wiki_id, refresh=True)
        moving_page = pages_by_id[page.id]

        target_parent = None
        if target_parent_id != ROOT_PARENT_ID:
            target_parent = pages_by_id.get(target_parent_id)
            if target_parent is None:
                if db.session.get(WikiPage, target_parent_id) is None:
                    raise NotFound("WikiPage")
                raise InvalidParam("target_id", "Target page belongs to another wiki.")

        assert_can_attach(pages_by_id, moving_page, target_parent)

        source_parent_id = moving_page.parent_id
        from_order = moving_page.display_order
        ordered = plan_move(pages_by_id, moving_page, target_parent_id, index)

        moving_page.parent_id = target_parent_id
        changed = compact_order(ordered)
        affected_groups = [target_parent_id]

        if source_parent_id != target_parent_id:
            changed += compact_order(sibling_list(pages_by_id, source_parent_id))
            affected_groups.append(source_parent_id)

        moving_page.version = moving_page.version + 1

        for parent_id in affected_groups:
            assert_sibling_order(sibling_list(pages_by_id, parent_id))

        log_action(
            action="wikipage.move",
            entity_type="wikipage",
            entity_id=moving_page.id,
            actor_id=actor_id,
            payload={
                "from_parent_id": source_parent_id,
                "from_order": from_order,
                "to_parent_id": target_parent_id,
                "to_order": moving_page.display_order,
                "reranked": len(changed),
            },
        )

    current_app.logger.info(
        "Moved page %s from %r to %r at %d (%d pages re-ranked)",
        moving_page.id, source_parent_id, target_parent_id,
        moving_page.display_order, len(changed),
    )
    return moving_page
