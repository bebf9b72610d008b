"""
Ordered page trees built from a flat snapshot of a wiki's pages.

Pages are only read here. The builder indexes them once by parent id
(the arena) and then attaches children with an explicit stack, so it is
safe to call concurrently on the same snapshot.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List

from wikiapp.constants import ROOT_PARENT_ID

logger = logging.getLogger(__name__)


@dataclass
class TreeNode:
    page: Any
    children: List["TreeNode"] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.page.id


def page_map(pages: Iterable[Any]) -> Dict[str, Any]:
    """Flat id -> page view used for ancestor walks."""
    return {page.id: page for page in pages}


def children_index(pages: Iterable[Any]) -> Dict[str, List[Any]]:
    """
    Group pages by parent id, each group sorted by display_order.

    The sort is stable: pages sharing a rank keep their input order.
    """
    index: Dict[str, List[Any]] = defaultdict(list)
    for page in pages:
        index[page.parent_id or ROOT_PARENT_ID].append(page)

    for parent_id, siblings in index.items():
        siblings.sort(key=lambda p: p.display_order)
        ranks = [p.display_order for p in siblings]
        if len(set(ranks)) != len(ranks):
            logger.warning(
                "Duplicate display_order under parent %r: %s",
                parent_id, ranks,
            )
    return index


def build_tree(pages: Iterable[Any]) -> List[TreeNode]:
    """
    Build the ordered forest hanging off the root sentinel.

    Every page is attached at most once. Pages whose parent chain never
    reaches the root (dangling parent or a corrupt cycle) are left out.
    """
    pages = list(pages)
    index = children_index(pages)

    roots = [TreeNode(p) for p in index.get(ROOT_PARENT_ID, [])]
    attached = {node.id for node in roots}
    stack = list(roots)

    while stack:
        node = stack.pop()
        for child in index.get(node.id, []):
            if child.id in attached:
                continue
            attached.add(child.id)
            child_node = TreeNode(child)
            node.children.append(child_node)
            stack.append(child_node)

    if len(attached) != len(pages):
        orphans = sorted(p.id for p in pages if p.id not in attached)
        logger.warning("Pages unreachable from root: %s", orphans)

    return roots
