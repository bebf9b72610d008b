"""Assertion helpers reading ranks straight from the database."""

from collections import defaultdict

from wikiapp.constants import ROOT_PARENT_ID
from wikiapp.models.wiki_page import WikiPage


def sibling_names(wiki_id, parent_id=ROOT_PARENT_ID):
    """Names under a parent in rank order."""
    pages = (
        WikiPage.query
        .filter_by(wiki_id=wiki_id, parent_id=parent_id)
        .order_by(WikiPage.display_order.asc())
        .all()
    )
    return [p.name for p in pages]


def assert_dense_ranks(wiki_id):
    """Every sibling group of the wiki is ranked 0..n-1 exactly once."""
    groups = defaultdict(list)
    for page in WikiPage.query.filter_by(wiki_id=wiki_id).all():
        groups[page.parent_id].append(page.display_order)

    for parent_id, ranks in groups.items():
        assert sorted(ranks) == list(range(len(ranks))), (parent_id, ranks)


def assert_acyclic(wiki_id):
    """Parent links reach the root within page-count steps."""
    pages = {p.id: p for p in WikiPage.query.filter_by(wiki_id=wiki_id).all()}
    for page in pages.values():
        current = page
        for _ in range(len(pages) + 1):
            if current.parent_id == ROOT_PARENT_ID:
                break
            current = pages[current.parent_id]
            assert current.wiki_id == wiki_id
        else:
            raise AssertionError(f"cycle through {page.id}")
