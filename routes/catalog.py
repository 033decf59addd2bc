"""Read-only project and artifact endpoints."""

from flask import Blueprint, jsonify

from services.catalog import get_project, list_artifacts, list_projects

bp = Blueprint("catalog", __name__)


@bp.route("/api/projects")
def projects_list():
    return jsonify(list_projects())


@bp.route("/api/projects/<project_id>")
def project_detail(project_id):
    """Project with its artifacts and reactions."""
    project = get_project(project_id)
    if project is None:
        return jsonify({"error": "Project not found"}), 404
    return jsonify(project)


@bp.route("/api/artifacts")
def artifacts_list():
    return jsonify(list_artifacts())
