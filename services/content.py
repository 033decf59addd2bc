"""Content directory pipeline: load, validate and reconcile files against the database."""

import logging
import os
import sqlite3

from config import CONTENT_DIR, CONTENT_EXTENSIONS
from services.frontmatter import FrontmatterError, content_path_for, read_content_file
from services.references import validate_project_references, validate_tag_references
from services.schema import parse_iso_datetime, validate_frontmatter
from services.sync import check_content_sync, fetch_artifacts

log = logging.getLogger(__name__)


def list_content_files(content_dir: str = None) -> list[str]:
    """Sorted content filenames in the top level of *content_dir*."""
    content_dir = content_dir or CONTENT_DIR
    if not os.path.isdir(content_dir):
        return []
    return sorted(
        fname
        for fname in os.listdir(content_dir)
        if fname.endswith(CONTENT_EXTENSIONS) and os.path.isfile(os.path.join(content_dir, fname))
    )


def load_content(content_dir: str = None) -> list[dict]:
    """Parse every content file. Unparseable files carry ``error`` instead of frontmatter."""
    content_dir = content_dir or CONTENT_DIR
    entries = []
    for fname in list_content_files(content_dir):
        try:
            entries.append(read_content_file(fname, content_dir))
        except (FrontmatterError, OSError, UnicodeDecodeError) as e:
            log.warning("Skipping %s: %s", fname, e)
            entries.append({"path": content_path_for(fname), "filename": fname, "error": str(e)})
    return entries


def slug_for(filename: str) -> str:
    return os.path.splitext(filename)[0]


def published_posts(content_dir: str = None) -> list[dict]:
    """Valid posts for page rendering: featured first, then newest first."""
    posts = []
    for entry in load_content(content_dir):
        if "error" in entry:
            continue
        result = validate_frontmatter(entry["frontmatter"])
        if not result.success:
            log.warning("Hiding %s: %s", entry["filename"], "; ".join(result.messages))
            continue
        posts.append({**entry, "slug": slug_for(entry["filename"])})

    posts.sort(
        key=lambda p: parse_iso_datetime(p["frontmatter"]["publish_date"]).timestamp(),
        reverse=True,
    )
    posts.sort(key=lambda p: not p["frontmatter"]["is_featured"])
    return posts


def find_post(slug: str, content_dir: str = None) -> dict | None:
    for post in published_posts(content_dir):
        if post["slug"] == slug:
            return post
    return None


def check_content(content_dir: str = None, con: sqlite3.Connection = None) -> dict:
    """Validate every content file and reconcile it against stored records.

    Returns a report with a per-file breakdown plus the drift summary.
    ``ok`` is true only when every file parses, validates, references
    existing projects and tags, and no stored title has drifted.
    """
    files = []
    parsed = []
    for entry in load_content(content_dir):
        report = {
            "path": entry["path"],
            "valid": False,
            "issues": [],
            "invalid_project_ids": [],
            "invalid_tag_ids": [],
        }
        files.append(report)

        if "error" in entry:
            report["issues"].append({"field": "", "message": entry["error"]})
            continue

        parsed.append({"path": entry["path"], "frontmatter": entry["frontmatter"]})
        result = validate_frontmatter(entry["frontmatter"])
        if not result.success:
            report["issues"] = result.issues
            continue

        projects = validate_project_references(result.data["project_ids"], con)
        tags = validate_tag_references(result.data["tag_ids"], con)
        report["invalid_project_ids"] = projects.invalid_ids
        report["invalid_tag_ids"] = tags.invalid_ids
        report["valid"] = projects.is_valid and tags.is_valid

    sync = check_content_sync(fetch_artifacts(con), parsed)
    ok = all(f["valid"] for f in files) and not sync.needs_update
    return {
        "ok": ok,
        "files": files,
        "needs_update": sync.needs_update,
        "out_of_sync_files": sync.out_of_sync_files,
        "untracked_files": sync.untracked_files,
        "orphaned_records": sync.orphaned_records,
    }
