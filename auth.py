"""Session-token authentication for the site's mutating endpoints.

Sessions live in the ``sessions`` table. When auth is enabled, protected
routes require ``Authorization: Bearer <session_token>`` belonging to an
Admin user. Read-only pages and API routes are never protected.
"""

import secrets
import sqlite3
from datetime import UTC, datetime, timedelta
from functools import wraps

from flask import jsonify, request

import config
from services.db import get_db, new_id

# 24 bytes = 32 base64 chars
_TOKEN_BYTES = 24


def _generate_token() -> str:
    return secrets.token_urlsafe(_TOKEN_BYTES)


def create_session(
    user_id: str, con: sqlite3.Connection = None, ttl_days: int = config.SESSION_TTL_DAYS
) -> str:
    """Open a session for *user_id* and return its token."""
    con = con or get_db()
    token = _generate_token()
    expires = (datetime.now(UTC) + timedelta(days=ttl_days)).isoformat()
    with con:
        con.execute(
            "INSERT INTO sessions (id, session_token, user_id, expires) VALUES (?, ?, ?, ?)",
            (new_id(), token, user_id, expires),
        )
    return token


def find_user_by_email(email: str, con: sqlite3.Connection = None) -> dict | None:
    con = con or get_db()
    row = con.execute("SELECT * FROM users WHERE email = ?", (email,)).fetchone()
    return dict(row) if row else None


def find_session_user(token: str, con: sqlite3.Connection = None) -> dict | None:
    """Return the user for an unexpired session token, or None."""
    if not token:
        return None
    con = con or get_db()
    row = con.execute(
        "SELECT u.*, s.expires FROM sessions s JOIN users u ON u.id = s.user_id "
        "WHERE s.session_token = ?",
        (token,),
    ).fetchone()
    if row is None:
        return None
    if datetime.fromisoformat(row["expires"]) <= datetime.now(UTC):
        return None
    return dict(row)


def is_auth_enabled() -> bool:
    return config.AUTH_ENABLED


def require_admin(f):
    """Flask route decorator. Requires an Admin session token when auth is enabled."""

    @wraps(f)
    def decorated(*args, **kwargs):
        if not is_auth_enabled():
            return f(*args, **kwargs)

        auth_header = request.headers.get("Authorization", "")
        if not auth_header.startswith("Bearer "):
            return jsonify({"error": "Missing or malformed Authorization header"}), 401

        user = find_session_user(auth_header[7:])
        if user is None:
            return jsonify({"error": "Invalid or expired session"}), 401
        if user["role"] != "Admin":
            return jsonify({"error": "Admin role required"}), 403

        return f(*args, **kwargs)

    return decorated
