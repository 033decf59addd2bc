"""Content endpoints: parsed files and the file-vs-database reconciliation report."""

from flask import Blueprint, jsonify

from services.content import check_content, load_content
from services.schema import validate_frontmatter

bp = Blueprint("content", __name__)


@bp.route("/api/content")
def content_list():
    """Every content file with its frontmatter (or parse error) and validation issues."""
    items = []
    for entry in load_content():
        if "error" in entry:
            items.append(entry)
            continue
        result = validate_frontmatter(entry["frontmatter"])
        items.append(
            {
                "path": entry["path"],
                "filename": entry["filename"],
                "frontmatter": entry["frontmatter"],
                "valid": result.success,
                "issues": result.issues,
                "modified": entry["modified"],
                "size": entry["size"],
            }
        )
    return jsonify(items)


@bp.route("/api/content/check")
def content_check():
    """Reconciliation report. 409 when anything needs attention."""
    report = check_content()
    return jsonify(report), 200 if report["ok"] else 409
