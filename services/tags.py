"""Tag listing and the create-tag action."""

import logging
import sqlite3

from services.db import get_db, new_id, now_iso, tag_key
from services.schema import validate_tag_input

log = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Tag with this name already exists."
DATABASE_ERROR_MESSAGE = "Database Error: Failed to create tag."


def list_tags(con: sqlite3.Connection = None) -> list[dict]:
    con = con or get_db()
    rows = con.execute(
        "SELECT id, name, created_at FROM tags ORDER BY name_key, name"
    ).fetchall()
    return [dict(row) for row in rows]


def create_tag(data: dict, con: sqlite3.Connection = None) -> dict:
    """Create a tag. Returns {"tag": {...}} or {"message": <reason>}; never raises."""
    result = validate_tag_input(data)
    if not result.success:
        return {"message": result.messages[0]}
    name = result.data["name"]

    try:
        con = con or get_db()
        existing = con.execute(
            "SELECT id FROM tags WHERE name_key = ?", (tag_key(name),)
        ).fetchone()
        if existing:
            return {"message": DUPLICATE_MESSAGE}

        tag = {"id": new_id(), "name": name, "created_at": now_iso()}
        with con:
            con.execute(
                "INSERT INTO tags (id, name, name_key, created_at) VALUES (?, ?, ?, ?)",
                (tag["id"], tag["name"], tag_key(name), tag["created_at"]),
            )
        log.info("Created tag %r (%s)", name, tag["id"])
        return {"tag": tag}
    except sqlite3.IntegrityError:
        # Lost a race with another insert of the same name.
        return {"message": DUPLICATE_MESSAGE}
    except sqlite3.Error:
        log.exception(DATABASE_ERROR_MESSAGE)
        return {"message": DATABASE_ERROR_MESSAGE}
