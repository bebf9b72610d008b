from typing import Any, Dict, Optional

from wikiapp.constants import ROOT_PARENT_ID
from wikiapp.domain.exceptions import InvalidParam, RecursiveMoveError


def assert_can_attach(
    pages_by_id: Dict[str, Any],
    moving_page: Any,
    target_parent: Optional[Any],
) -> None:
    """
    Guards a parent reassignment against ancestor cycles.

    Walks upward from the proposed parent through one snapshot of the
    wiki's pages. Reaching the moving page means it would become its own
    ancestor. `target_parent=None` attaches to the root and always passes.
    """
    if target_parent is None:
        return

    if target_parent.wiki_id != moving_page.wiki_id:
        raise InvalidParam("target_id", "Target page belongs to another wiki.")

    seen = set()
    current = target_parent
    # Bounded by the snapshot size even if stored data already loops.
    for _ in range(len(pages_by_id) + 1):
        if current.id == moving_page.id:
            raise RecursiveMoveError(moving_page.id)
        if current.id in seen:
            raise RecursiveMoveError(current.id, "Existing parent chain is cyclic.")
        seen.add(current.id)

        if current.parent_id == ROOT_PARENT_ID:
            return
        current = pages_by_id.get(current.parent_id)
        if current is None:
            return

    raise RecursiveMoveError(moving_page.id, "Parent chain does not reach the root.")
