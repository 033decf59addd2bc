#!/usr/bin/env python3
"""Maintenance commands: seed the database, check content, issue admin sessions."""

import argparse
import json
import logging
import sys

from auth import create_session, find_user_by_email
from services.content import check_content
from services.db import close_db
from services.seed import seed


def _cmd_seed(args) -> int:
    counts = seed()
    print("Created:")
    for table, n in counts.items():
        print(f"  - {n} {table}")
    return 0


def _cmd_check(args) -> int:
    report = check_content(args.content_dir)
    if args.json:
        print(json.dumps(report, indent=2))
        return 0 if report["ok"] else 1

    for f in report["files"]:
        mark = "ok" if f["valid"] else "FAIL"
        print(f"[{mark}] {f['path']}")
        for issue in f["issues"]:
            field = f" {issue['field']}:" if issue["field"] else ""
            print(f"    -{field} {issue['message']}")
        for pid in f["invalid_project_ids"]:
            print(f"    - unknown project id {pid}")
        for tid in f["invalid_tag_ids"]:
            print(f"    - unknown tag id {tid}")

    for path in report["out_of_sync_files"]:
        print(f"[drift] {path}: title differs from the stored artifact")
    for path in report["untracked_files"]:
        print(f"[untracked] {path}")
    for path in report["orphaned_records"]:
        print(f"[orphaned] {path}")

    print("\nContent is in sync." if report["ok"] else "\nContent needs attention.")
    return 0 if report["ok"] else 1


def _cmd_session(args) -> int:
    user = find_user_by_email(args.email)
    if user is None:
        print(f"No user with email {args.email!r}", file=sys.stderr)
        return 1
    print(create_session(user["id"]))
    return 0


def main(argv=None) -> int:
    """Entry point for `notebook` CLI command."""
    parser = argparse.ArgumentParser(description="Notebook maintenance commands")
    sub = parser.add_subparsers(dest="command", required=True)

    p_seed = sub.add_parser("seed", help="Replace database contents with the starter data")
    p_seed.set_defaults(func=_cmd_seed)

    p_check = sub.add_parser("check", help="Validate content files against the database")
    p_check.add_argument("--content-dir", default=None, help="Content directory to check")
    p_check.add_argument("--json", action="store_true", help="Print the raw report as JSON")
    p_check.set_defaults(func=_cmd_check)

    p_session = sub.add_parser("session", help="Open a session and print its token")
    p_session.add_argument("--email", required=True, help="Email of the user to sign in")
    p_session.set_defaults(func=_cmd_session)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    try:
        return args.func(args)
    finally:
        close_db()


if __name__ == "__main__":
    sys.exit(main())
