# wikiapp/api/v1/wikis.py
from flask import current_app, request, jsonify
from flask_jwt_extended import jwt_required, get_jwt_identity
from wikiapp.constants import ROLE_EDITOR
from wikiapp.utils.decorators import roles_required
from wikiapp.utils.optimistic_lock import enforce_optimistic_lock
from wikiapp.application.wiki.queries import (
    get_wikis,
    get_wiki_with_content,
    get_wiki_page_with_content,
    get_wiki_tree,
)
from wikiapp.application.wiki.create_wiki import create_wiki
from wikiapp.application.wiki.update_wiki import update_wiki
from wikiapp.application.wiki.delete_wiki import delete_wiki
from wikiapp.application.wiki.create_wiki_page import create_wiki_page
from wikiapp.application.wiki.update_wiki_page import update_wiki_page
from wikiapp.application.wiki.move_wiki_page import move_wiki_page
from wikiapp.normalizers.wiki import normalize_wiki
from wikiapp.normalizers.wiki_page import normalize_wiki_page, normalize_tree
from wikiapp.normalizers.pagination import normalize_pagination
from .params import (
    request_data,
    get_param,
    get_required_param,
    get_int_param,
    get_tags_param,
)
from . import v1_bp


# ------------------------
# Wikis
# ------------------------

@v1_bp.route("/wikis", methods=["GET"])
def list_wikis():
    default_limit = current_app.config.get("WIKIS_PAGE_SIZE", 20)
    limit = max(1, min(request.args.get("limit", default_limit, type=int), 100))
    cursor = request.args.get("cursor")

    wikis, meta = get_wikis(limit=limit, cursor=cursor)

    return jsonify(normalize_pagination(wikis, normalize_wiki, cursor=meta))


@v1_bp.route("/wikis/<wiki_id>", methods=["GET"])
def get_wiki(wiki_id):
    wiki, content = get_wiki_with_content(wiki_id)
    return jsonify(normalize_wiki(wiki, content))


@v1_bp.route("/wikis", methods=["POST"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def create_wiki_route():
    data = request_data()

    wiki, content = create_wiki(
        name=get_required_param(data, "name"),
        description=get_required_param(data, "description"),
        content=get_required_param(data, "content"),
        tags=get_tags_param(data),
        file=request.files.get("file"),
        actor_id=get_jwt_identity(),
    )

    return jsonify(normalize_wiki(wiki, content)), 201


@v1_bp.route("/wikis/<wiki_id>", methods=["PUT"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def update_wiki_route(wiki_id):
    data = request_data()

    wiki, content = update_wiki(
        wiki_id=wiki_id,
        name=get_param(data, "name"),
        description=get_param(data, "description"),
        tags=get_tags_param(data),
        content=get_param(data, "content"),
        file=request.files.get("file"),
        actor_id=get_jwt_identity(),
    )

    return jsonify(normalize_wiki(wiki, content)), 200


@v1_bp.route("/wikis/<wiki_id>", methods=["DELETE"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def delete_wiki_route(wiki_id):
    return jsonify(delete_wiki(wiki_id=wiki_id, actor_id=get_jwt_identity())), 200


# ------------------------
# Wiki pages
# ------------------------

@v1_bp.route("/wikis/<wiki_id>/wikipages", methods=["GET"])
def get_wiki_page_tree(wiki_id):
    return jsonify(normalize_tree(get_wiki_tree(wiki_id)))


@v1_bp.route("/wikis/<wiki_id>/wikipages", methods=["POST"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def create_wiki_page_route(wiki_id):
    data = request_data()

    page, content = create_wiki_page(
        wiki_id=wiki_id,
        parent_id=get_required_param(data, "parent_id"),
        name=get_required_param(data, "name"),
        content=get_required_param(data, "content"),
        actor_id=get_jwt_identity(),
    )

    return jsonify(normalize_wiki_page(page, content)), 201


@v1_bp.route("/wikipages/<page_id>", methods=["GET"])
def get_wiki_page(page_id):
    page, content = get_wiki_page_with_content(page_id)
    return jsonify(normalize_wiki_page(page, content))


@v1_bp.route("/wikipages/<page_id>", methods=["PUT"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def update_wiki_page_route(page_id):
    data = request_data()

    page, content = update_wiki_page(
        page_id=page_id,
        name=get_param(data, "name"),
        content=get_param(data, "content"),
        expected_version=get_int_param(data, "version", required=False),
        actor_id=get_jwt_identity(),
        check_lock=enforce_optimistic_lock,
    )

    return jsonify(normalize_wiki_page(page, content)), 200


@v1_bp.route("/wikipages/<page_id>/move/<target_id>", methods=["POST"])
@jwt_required()
@roles_required(ROLE_EDITOR)
def move_wiki_page_route(page_id, target_id):
    data = request_data()

    page = move_wiki_page(
        page_id=page_id,
        target_id=target_id,
        index=get_int_param(data, "index"),
        actor_id=get_jwt_identity(),
    )

    return jsonify(normalize_wiki_page(page)), 200
