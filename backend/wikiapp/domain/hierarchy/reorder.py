from typing import Any, Dict, List

from wikiapp.domain.exceptions import InvalidParam


def sibling_list(pages_by_id: Dict[str, Any], parent_id: str, exclude_id: str = None) -> List[Any]:
    """Pages under `parent_id` in rank order, optionally leaving one page out."""
    siblings = [
        p for p in pages_by_id.values()
        if p.parent_id == parent_id and p.id != exclude_id
    ]
    siblings.sort(key=lambda p: p.display_order)
    return siblings


def plan_move(
    pages_by_id: Dict[str, Any],
    moving_page: Any,
    target_parent_id: str,
    index: int,
) -> List[Any]:
    """
    Returns the target sibling group in its new order with the moving
    page inserted at `index`.

    The bound is checked against the siblings without the moving page, so
    moving a page to the end of its own group uses index len(group) - 1.
    """
    siblings = sibling_list(pages_by_id, target_parent_id, exclude_id=moving_page.id)

    if index < 0 or index > len(siblings):
        raise InvalidParam("index", f"Index must be between 0 and {len(siblings)}.")

    siblings.insert(index, moving_page)
    return siblings
