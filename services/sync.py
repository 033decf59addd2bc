"""Map frontmatter onto artifact records and detect drift between files and the database."""

import sqlite3
from dataclasses import dataclass, field

from services.db import get_db
from services.schema import DEFAULT_ARTIFACT_TYPE, parse_iso_datetime


@dataclass
class SyncStatus:
    needs_update: bool
    out_of_sync_files: list[str] = field(default_factory=list)
    untracked_files: list[str] = field(default_factory=list)
    orphaned_records: list[str] = field(default_factory=list)


def map_frontmatter_to_artifact(fm: dict, content_path: str) -> dict:
    """Shape validated frontmatter as an artifact record."""
    return {
        "title": fm["title"],
        "publish_date": parse_iso_datetime(fm["publish_date"]),
        "is_featured": fm["is_featured"],
        "content_path": content_path,
        "type": fm.get("type") or DEFAULT_ARTIFACT_TYPE,
        "project_ids": list(fm.get("project_ids") or []),
        "tag_ids": list(fm.get("tag_ids") or []),
    }


def fetch_artifacts(con: sqlite3.Connection = None) -> list[dict]:
    """Stored artifacts with the columns the sync check needs."""
    con = con or get_db()
    rows = con.execute(
        "SELECT id, title, content_path, updated_at FROM artifacts ORDER BY content_path"
    ).fetchall()
    return [dict(row) for row in rows]


def check_content_sync(db_artifacts: list[dict], file_contents: list[dict]) -> SyncStatus:
    """Compare stored artifacts against parsed files.

    Each file is ``{"path": ..., "frontmatter": {...}}``. A file is out of
    sync when a stored artifact shares its content_path and the titles differ.
    """
    by_path = {a["content_path"]: a for a in db_artifacts}
    out_of_sync = []
    untracked = []
    seen = set()

    for fc in file_contents:
        path = fc["path"]
        seen.add(path)
        stored = by_path.get(path)
        if stored is None:
            untracked.append(path)
            continue
        if stored["title"] != (fc.get("frontmatter") or {}).get("title"):
            out_of_sync.append(path)

    orphaned = [p for p in by_path if p not in seen]
    return SyncStatus(
        needs_update=bool(out_of_sync),
        out_of_sync_files=out_of_sync,
        untracked_files=untracked,
        orphaned_records=orphaned,
    )
