"""Shared fixtures: an app on in-memory SQLite plus wiki/page factories."""

import pytest
from flask_jwt_extended import create_access_token

from wikiapp import create_app
from wikiapp.constants import ROLE_EDITOR, ROLE_SUBSCRIBER, ROOT_PARENT_ID
from wikiapp.extensions import db
from wikiapp.application.wiki.create_wiki import create_wiki
from wikiapp.application.wiki.create_wiki_page import create_wiki_page


@pytest.fixture
def app(tmp_path, monkeypatch):
    """App bound to a fresh database; uploads land under tmp_path."""
    monkeypatch.chdir(tmp_path)
    app = create_app("testing")
    app.config["UPLOAD_FOLDER"] = "uploads"

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def _auth_headers(role):
    token = create_access_token(identity=f"user-{role}", additional_claims={"role": role})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def editor_headers(app):
    return _auth_headers(ROLE_EDITOR)


@pytest.fixture
def subscriber_headers(app):
    return _auth_headers(ROLE_SUBSCRIBER)


@pytest.fixture
def make_wiki(app):
    def _make(name="Handbook", description="Team handbook", content="# Handbook", **kwargs):
        wiki, _ = create_wiki(name=name, description=description, content=content, **kwargs)
        return wiki
    return _make


@pytest.fixture
def make_page(app):
    def _make(wiki, name, parent=None, content=None):
        page, _ = create_wiki_page(
            wiki_id=wiki.id,
            parent_id=parent.id if parent is not None else ROOT_PARENT_ID,
            name=name,
            content=content or f"content of {name}",
        )
        return page
    return _make

