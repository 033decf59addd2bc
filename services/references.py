"""Check that project/tag IDs named in frontmatter exist in the database."""

import sqlite3
from dataclasses import dataclass, field

from services.db import get_db, placeholders


@dataclass
class ReferenceResult:
    is_valid: bool
    valid: list[dict] = field(default_factory=list)
    invalid_ids: list[str] = field(default_factory=list)


def _validate_references(
    table: str, ids: list[str], con: sqlite3.Connection = None
) -> ReferenceResult:
    """Split *ids* into records found in *table* and IDs missing from it.

    IDs match case-insensitively. Both lists follow request order; missing IDs
    are reported as written.
    """
    requested = {}
    for i in ids:
        requested.setdefault(i.lower(), i)
    if not requested:
        return ReferenceResult(is_valid=True)

    con = con or get_db()
    keys = list(requested)
    rows = con.execute(
        f"SELECT id, name FROM {table} WHERE lower(id) IN ({placeholders(keys)})",
        keys,
    ).fetchall()
    found = {row["id"].lower(): dict(row) for row in rows}
    valid = [found[k] for k in keys if k in found]
    invalid_ids = [requested[k] for k in keys if k not in found]
    return ReferenceResult(is_valid=not invalid_ids, valid=valid, invalid_ids=invalid_ids)


def validate_project_references(
    project_ids: list[str], con: sqlite3.Connection = None
) -> ReferenceResult:
    return _validate_references("projects", project_ids, con)


def validate_tag_references(tag_ids: list[str], con: sqlite3.Connection = None) -> ReferenceResult:
    return _validate_references("tags", tag_ids, con)
