"""Shared constants and path configuration for the notebook site."""

import json
import os

_SETTINGS_FILE = os.path.expanduser("~/.config/generalist-notebook/settings.json")
_ROOT_DIR = os.path.dirname(os.path.abspath(__file__))


def _read_setting(*keys, default=None):
    """Read a nested setting from the global settings file."""
    try:
        with open(_SETTINGS_FILE) as f:
            data = json.load(f)
        for k in keys:
            data = data[k]
        return data
    except (FileNotFoundError, json.JSONDecodeError, KeyError, TypeError):
        return default


def _env_flag(name: str, default: bool) -> bool:
    """Interpret an environment variable as a boolean flag."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Environment variables win over the settings file.
CONTENT_DIR = os.environ.get("NOTEBOOK_CONTENT_DIR") or _read_setting(
    "content_dir", default=os.path.join(_ROOT_DIR, "content")
)
DB_PATH = os.environ.get("NOTEBOOK_DB_PATH") or _read_setting(
    "db_path", default=os.path.join(_ROOT_DIR, "data", "notebook.db")
)
AUTH_ENABLED = _env_flag(
    "NOTEBOOK_AUTH_ENABLED", bool(_read_setting("auth_enabled", default=False))
)
PORT = int(os.environ.get("NOTEBOOK_PORT") or _read_setting("port", default=4250))

CONTENT_EXTENSIONS = (".mdx", ".md")
CONTENT_URL_PREFIX = "/content/"
SESSION_TTL_DAYS = 30

SITE_TITLE = "Dark Horse Kelly"
SITE_TAGLINE = "A Generalist Notebook"
