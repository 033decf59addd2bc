"""SQLite database client for projects, tags, artifacts and their join rows.

A single connection is opened lazily and reused for the life of the process
(``get_db``). Service functions accept an explicit ``con`` so tests and
scripts can run against their own database.
"""

import os
import sqlite3
import uuid
from datetime import UTC, datetime

from config import DB_PATH

_DB_PATH = DB_PATH

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id          TEXT PRIMARY KEY,
    name        TEXT,
    email       TEXT UNIQUE,
    role        TEXT NOT NULL DEFAULT 'User' CHECK (role IN ('Admin', 'User')),
    created_at  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS accounts (
    id                   TEXT PRIMARY KEY,
    user_id              TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    provider             TEXT NOT NULL,
    provider_account_id  TEXT NOT NULL,
    UNIQUE (provider, provider_account_id)
);

CREATE TABLE IF NOT EXISTS sessions (
    id             TEXT PRIMARY KEY,
    session_token  TEXT NOT NULL UNIQUE,
    user_id        TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    expires        TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS tags (
    id          TEXT PRIMARY KEY,
    name        TEXT NOT NULL,
    name_key    TEXT NOT NULL UNIQUE,
    created_at  TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS projects (
    id                    TEXT PRIMARY KEY,
    name                  TEXT NOT NULL,
    description           TEXT NOT NULL DEFAULT '',
    status                TEXT NOT NULL DEFAULT 'Ideation'
                          CHECK (status IN ('Ideation', 'InProgress', 'Shipped')),
    ideation_date         TEXT,
    llm_summary           TEXT,
    llm_sentiment_phrase  TEXT,
    created_at            TEXT NOT NULL,
    updated_at            TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS artifacts (
    id            TEXT PRIMARY KEY,
    title         TEXT NOT NULL,
    publish_date  TEXT NOT NULL,
    is_featured   INTEGER NOT NULL DEFAULT 0,
    content_path  TEXT NOT NULL UNIQUE,
    type          TEXT NOT NULL DEFAULT 'Dev Log'
                  CHECK (type IN ('Dev Log', 'Blog Post', 'Link', 'Image')),
    created_at    TEXT NOT NULL,
    updated_at    TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS project_artifacts (
    project_id   TEXT NOT NULL REFERENCES projects(id) ON DELETE CASCADE,
    artifact_id  TEXT NOT NULL REFERENCES artifacts(id) ON DELETE CASCADE,
    PRIMARY KEY (project_id, artifact_id)
);

CREATE TABLE IF NOT EXISTS artifact_tags (
    artifact_id  TEXT NOT NULL REFERENCES artifacts(id) ON DELETE CASCADE,
    tag_id       TEXT NOT NULL REFERENCES tags(id) ON DELETE CASCADE,
    PRIMARY KEY (artifact_id, tag_id)
);

CREATE TABLE IF NOT EXISTS reactions (
    id           TEXT PRIMARY KEY,
    emoji        TEXT NOT NULL,
    review_text  TEXT,
    user_id      TEXT NOT NULL REFERENCES users(id) ON DELETE CASCADE,
    project_id   TEXT REFERENCES projects(id) ON DELETE CASCADE,
    artifact_id  TEXT REFERENCES artifacts(id) ON DELETE CASCADE,
    created_at   TEXT NOT NULL,
    CHECK ((project_id IS NULL) != (artifact_id IS NULL))
);
"""

_CONN: sqlite3.Connection | None = None


def new_id() -> str:
    return str(uuid.uuid4())


def now_iso() -> str:
    return datetime.now(UTC).isoformat()


def tag_key(name: str) -> str:
    """Uniqueness key for a tag name: Unicode case-folded, so 'Économie' == 'économie'."""
    return name.casefold()


def connect(path: str) -> sqlite3.Connection:
    """Open (and if needed initialise) a notebook database at *path*."""
    if path != ":memory:":
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    con = sqlite3.connect(str(path), check_same_thread=False)
    con.row_factory = sqlite3.Row
    con.execute("PRAGMA foreign_keys = ON")
    con.executescript(_SCHEMA)
    con.commit()
    return con


def get_db() -> sqlite3.Connection:
    """Return the process-wide connection, opening it on first use."""
    global _CONN
    if _CONN is None:
        _CONN = connect(_DB_PATH)
    return _CONN


def close_db() -> None:
    global _CONN
    if _CONN is not None:
        _CONN.close()
        _CONN = None


def placeholders(values) -> str:
    """'?,?,?' for an IN clause over *values*."""
    return ",".join("?" * len(values))
