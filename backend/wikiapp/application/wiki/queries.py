from typing import Dict, List, Optional
from sqlalchemy import select
from wikiapp.extensions import db
from wikiapp.models.wiki import Wiki
from wikiapp.models.wiki_page import WikiPage
from wikiapp.models.text import Text
from wikiapp.domain.exceptions import NotFound
from wikiapp.domain.hierarchy.tree import TreeNode, build_tree, page_map
from wikiapp.utils.pagination import CursorMeta, paginate_cursor


def get_wikis(*, limit: int, cursor: Optional[str] = None) -> tuple[List[Wiki], CursorMeta]:
    return paginate_cursor(Wiki.query, model=Wiki, limit=limit, cursor=cursor)


def get_wiki(wiki_id: str, *, lock: bool = False) -> Wiki:
    """
    Fetch a wiki or raise NotFound.

    With `lock=True` the row is selected FOR UPDATE, which serializes every
    order-changing operation on the wiki's pages.
    """
    stmt = select(Wiki).where(Wiki.id == wiki_id)
    if lock:
        stmt = stmt.with_for_update()

    wiki = db.session.execute(stmt).scalar_one_or_none()
    if wiki is None:
        raise NotFound("Wiki")
    return wiki


def get_wiki_page(page_id: str) -> WikiPage:
    page = db.session.get(WikiPage, page_id)
    if page is None:
        raise NotFound("WikiPage")
    return page


def get_text_value(content_id: str, entity: str = "Text") -> str:
    text = db.session.get(Text, content_id)
    if text is None:
        raise NotFound(entity)
    return text.value


def get_wiki_with_content(wiki_id: str) -> tuple[Wiki, str]:
    wiki = get_wiki(wiki_id)
    return wiki, get_text_value(wiki.content_id)


def get_wiki_page_with_content(page_id: str) -> tuple[WikiPage, str]:
    page = get_wiki_page(page_id)
    return page, get_text_value(page.content_id, "WikiPage")


def get_wiki_pages(wiki_id: str, *, refresh: bool = False) -> List[WikiPage]:
    """
    All pages of a wiki as one snapshot.

    `refresh=True` overwrites identity-map state with freshly read rows so
    the snapshot matches what the current transaction sees.
    """
    stmt = (
        select(WikiPage)
        .where(WikiPage.wiki_id == wiki_id)
        .order_by(WikiPage.display_order, WikiPage.created_at, WikiPage.id)
    )
    if refresh:
        stmt = stmt.execution_options(populate_existing=True)
    return list(db.session.execute(stmt).scalars())


def get_wiki_pages_map(wiki_id: str, *, refresh: bool = False) -> Dict[str, WikiPage]:
    return page_map(get_wiki_pages(wiki_id, refresh=refresh))


def get_wiki_tree(wiki_id: str) -> List[TreeNode]:
    """Ordered page forest of a wiki."""
    get_wiki(wiki_id)
    return build_tree(get_wiki_pages(wiki_id))
