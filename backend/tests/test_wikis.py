"""Tests for wiki create/update/delete and listing."""

import io

import pytest

from wikiapp.extensions import db
from wikiapp.models.attachment import Attachment
from wikiapp.models.text import Text
from wikiapp.models.wiki import Wiki
from wikiapp.domain.exceptions import InvalidParam, NotFound, ResourceConflict
from wikiapp.application.wiki.create_wiki import create_wiki
from wikiapp.application.wiki.update_wiki import update_wiki
from wikiapp.application.wiki.delete_wiki import delete_wiki
from wikiapp.application.wiki.queries import get_wikis, get_wiki_with_content
from wikiapp.utils.tags import format_tags
from werkzeug.datastructures import FileStorage


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


def png_upload(filename="cover.png"):
    return FileStorage(stream=io.BytesIO(PNG_BYTES), filename=filename, content_type="image/png")


class TestCreateWiki:

    def test_creates_wiki_and_content(self, app):
        wiki, content = create_wiki(name="Docs", description="All docs", content="# Docs", tags="a, b")

        assert content == "# Docs"
        assert wiki.cover_id == ""
        assert wiki.tags == "a,b"
        text = db.session.get(Text, wiki.content_id)
        assert text.ref_id == wiki.id
        assert get_wiki_with_content(wiki.id)[1] == "# Docs"

    @pytest.mark.parametrize("field", ["name", "description", "content"])
    def test_required_fields(self, app, field):
        kwargs = {"name": "n", "description": "d", "content": "c", field: ""}

        with pytest.raises(InvalidParam) as exc:
            create_wiki(**kwargs)

        assert exc.value.data == field
        assert Wiki.query.count() == 0

    def test_cover_upload(self, app, tmp_path):
        wiki, _ = create_wiki(name="Docs", description="d", content="c", file=png_upload(), actor_id="u1")

        atta = db.session.get(Attachment, wiki.cover_id)
        assert atta.ref_id == wiki.id
        assert atta.name == "Docs"
        assert atta.size == len(PNG_BYTES)
        assert (tmp_path / atta.url.lstrip("/")).exists()

    def test_rejected_cover_writes_nothing(self, app):
        bad = FileStorage(stream=io.BytesIO(b"MZ"), filename="tool.exe")

        with pytest.raises(InvalidParam) as exc:
            create_wiki(name="Docs", description="d", content="c", file=bad)

        assert exc.value.data == "file"
        assert Wiki.query.count() == 0
        assert Text.query.count() == 0

    def test_failed_transaction_removes_stored_cover(self, app, tmp_path, monkeypatch):
        def boom(**kwargs):
            raise RuntimeError("audit store down")

        monkeypatch.setattr("wikiapp.application.wiki.create_wiki.log_action", boom)

        with pytest.raises(RuntimeError):
            create_wiki(name="Docs", description="d", content="c", file=png_upload())

        assert Wiki.query.count() == 0
        assert Attachment.query.count() == 0
        assert list((tmp_path / "uploads").iterdir()) == []


class TestUpdateWiki:

    def test_partial_update(self, make_wiki):
        wiki = make_wiki(tags="one")

        updated, content = update_wiki(wiki_id=wiki.id, description="New description")

        assert updated.description == "New description"
        assert updated.name == "Handbook"
        assert updated.tags == "one"
        assert content == "# Handbook"

    def test_content_update_repoints_to_new_blob(self, make_wiki):
        wiki = make_wiki()
        old_content_id = wiki.content_id

        updated, content = update_wiki(wiki_id=wiki.id, content="v2")

        assert content == "v2"
        assert updated.content_id != old_content_id
        assert db.session.get(Text, old_content_id).value == "# Handbook"
        assert db.session.get(Text, updated.content_id).value == "v2"

    @pytest.mark.parametrize("field", ["name", "description", "content"])
    def test_empty_string_rejected(self, make_wiki, field):
        wiki = make_wiki()

        with pytest.raises(InvalidParam) as exc:
            update_wiki(wiki_id=wiki.id, **{field: ""})

        assert exc.value.data == field

    def test_tags_normalized(self, make_wiki):
        wiki = make_wiki()

        updated, _ = update_wiki(wiki_id=wiki.id, tags=["Python", " python ", "", "Flask"])

        assert updated.tags == "Python,Flask"

    def test_cover_replaced(self, make_wiki):
        wiki = make_wiki()

        updated, _ = update_wiki(wiki_id=wiki.id, file=png_upload())

        assert updated.cover_id
        assert db.session.get(Attachment, updated.cover_id).name == "Handbook"

    def test_missing_wiki(self, app):
        with pytest.raises(NotFound):
            update_wiki(wiki_id="nope", name="x")


class TestDeleteWiki:

    def test_non_empty_wiki_conflicts(self, make_wiki, make_page):
        wiki = make_wiki()
        make_page(wiki, "A")

        with pytest.raises(ResourceConflict):
            delete_wiki(wiki_id=wiki.id)

        assert db.session.get(Wiki, wiki.id) is not None

    def test_empty_wiki_deleted_with_all_texts(self, make_wiki):
        wiki = make_wiki()
        update_wiki(wiki_id=wiki.id, content="second revision")
        wiki_id = wiki.id

        assert delete_wiki(wiki_id=wiki_id) == {"id": wiki_id}

        assert db.session.get(Wiki, wiki_id) is None
        assert Text.query.filter_by(ref_id=wiki_id).count() == 0

    def test_missing_wiki(self, app):
        with pytest.raises(NotFound):
            delete_wiki(wiki_id="nope")


class TestListWikis:

    def test_cursor_pagination_covers_all(self, make_wiki):
        ids = {make_wiki(name=f"W{i}").id for i in range(3)}

        first, meta = get_wikis(limit=2)
        assert len(first) == 2
        assert meta["has_more"] is True

        second, meta2 = get_wikis(limit=2, cursor=meta["next_cursor"])
        assert meta2["has_more"] is False
        assert meta2["next_cursor"] is None

        assert {w.id for w in first + second} == ids

    def test_bad_cursor(self, app):
        with pytest.raises(InvalidParam):
            get_wikis(limit=2, cursor="garbage")


class TestFormatTags:

    def test_string_input(self):
        assert format_tags(" a ,b,, A ") == "a,b"

    def test_none(self):
        assert format_tags(None) == ""

    def test_too_long_tag(self):
        with pytest.raises(InvalidParam):
            format_tags("x" * 51)

    def test_too_many_tags(self):
        with pytest.raises(InvalidParam):
            format_tags([f"t{i}" for i in range(21)])

    def test_wrong_type(self):
        with pytest.raises(InvalidParam):
            format_tags(42)
