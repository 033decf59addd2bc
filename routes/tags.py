"""Tag endpoints, including the site's one mutating action."""

from flask import Blueprint, jsonify, request

from auth import require_admin
from services.tags import DATABASE_ERROR_MESSAGE, create_tag, list_tags

bp = Blueprint("tags", __name__)


@bp.route("/api/tags", methods=["GET"])
def tags_list():
    return jsonify(list_tags())


@bp.route("/api/tags", methods=["POST"])
@require_admin
def tags_create():
    """Create a tag from JSON or form data. 201 with the tag, or 400 with a message."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    if not isinstance(data, dict):
        return jsonify({"message": "Tag name is required"}), 400

    result = create_tag(data)
    if "tag" in result:
        return jsonify(result), 201
    if result["message"] == DATABASE_ERROR_MESSAGE:
        return jsonify(result), 500
    return jsonify(result), 400
