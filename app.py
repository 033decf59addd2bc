#!/usr/bin/env python3
"""Notebook server: rendered pages + JSON API over the content directory and database."""

import argparse
import logging

from flask import Flask

from config import CONTENT_DIR, DB_PATH, PORT, SITE_TITLE

app = Flask(__name__)

from routes.catalog import bp as catalog_bp  # noqa: E402
from routes.content import bp as content_bp  # noqa: E402
from routes.pages import bp as pages_bp  # noqa: E402
from routes.tags import bp as tags_bp  # noqa: E402

app.register_blueprint(pages_bp)
app.register_blueprint(content_bp)
app.register_blueprint(tags_bp)
app.register_blueprint(catalog_bp)


@app.route("/healthz")
def healthz():
    return {"ok": True}


def main():
    """Entry point for `notebook-server` CLI command."""
    from auth import is_auth_enabled

    parser = argparse.ArgumentParser(description=f"{SITE_TITLE} server")
    parser.add_argument(
        "--port", type=int, default=PORT, help=f"Port to listen on (default: {PORT})"
    )
    cli_args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    print(f"\n  {SITE_TITLE}")
    print(f"  Port: {cli_args.port}")
    print(f"  Content: {CONTENT_DIR}")
    print(f"  Database: {DB_PATH}")
    print(f"  Auth: {'enabled' if is_auth_enabled() else 'disabled'}\n")

    app.run(port=cli_args.port, threaded=True)


if __name__ == "__main__":
    main()
