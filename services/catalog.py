"""Read models for projects and artifacts, used by pages and the JSON API."""

import sqlite3

from services.db import get_db


def _artifact_dict(row: sqlite3.Row) -> dict:
    artifact = dict(row)
    artifact["is_featured"] = bool(artifact["is_featured"])
    return artifact


def list_projects(con: sqlite3.Connection = None) -> list[dict]:
    """All projects, newest idea first, with an artifact count."""
    con = con or get_db()
    rows = con.execute(
        """
        SELECT p.*, COUNT(pa.artifact_id) AS artifact_count
        FROM projects p
        LEFT JOIN project_artifacts pa ON pa.project_id = p.id
        GROUP BY p.id
        ORDER BY p.ideation_date DESC, p.name
        """
    ).fetchall()
    return [dict(row) for row in rows]


def get_project(project_id: str, con: sqlite3.Connection = None) -> dict | None:
    """One project with its artifacts and reactions, or None."""
    con = con or get_db()
    row = con.execute("SELECT * FROM projects WHERE id = ?", (project_id,)).fetchone()
    if row is None:
        return None

    project = dict(row)
    artifacts = con.execute(
        """
        SELECT a.* FROM artifacts a
        JOIN project_artifacts pa ON pa.artifact_id = a.id
        WHERE pa.project_id = ?
        ORDER BY a.publish_date DESC
        """,
        (project_id,),
    ).fetchall()
    reactions = con.execute(
        "SELECT id, emoji, review_text, user_id, created_at FROM reactions "
        "WHERE project_id = ? ORDER BY created_at",
        (project_id,),
    ).fetchall()
    project["artifacts"] = [_artifact_dict(a) for a in artifacts]
    project["reactions"] = [dict(r) for r in reactions]
    return project


def _join_ids(con: sqlite3.Connection, sql: str) -> dict[str, list[str]]:
    index: dict[str, list[str]] = {}
    for owner, other in con.execute(sql).fetchall():
        index.setdefault(owner, []).append(other)
    return index


def list_artifacts(con: sqlite3.Connection = None) -> list[dict]:
    """All artifacts, newest first, with their project and tag IDs."""
    con = con or get_db()
    rows = con.execute("SELECT * FROM artifacts ORDER BY publish_date DESC").fetchall()
    projects = _join_ids(
        con, "SELECT artifact_id, project_id FROM project_artifacts ORDER BY project_id"
    )
    tags = _join_ids(con, "SELECT artifact_id, tag_id FROM artifact_tags ORDER BY tag_id")

    artifacts = []
    for row in rows:
        artifact = _artifact_dict(row)
        artifact["project_ids"] = projects.get(artifact["id"], [])
        artifact["tag_ids"] = tags.get(artifact["id"], [])
        artifacts.append(artifact)
    return artifacts


def get_artifact_by_path(content_path: str, con: sqlite3.Connection = None) -> dict | None:
    con = con or get_db()
    row = con.execute("SELECT * FROM artifacts WHERE content_path = ?", (content_path,)).fetchone()
    return _artifact_dict(row) if row else None
