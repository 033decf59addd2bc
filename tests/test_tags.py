"""Tests for the create-tag action."""

import sqlite3
from unittest.mock import MagicMock

import pytest

from services.db import tag_key
from services.tags import DATABASE_ERROR_MESSAGE, DUPLICATE_MESSAGE, create_tag, list_tags


def test_create_tag(con):
    result = create_tag({"name": "Rust"}, con)
    assert "tag" in result
    assert result["tag"]["name"] == "Rust"
    assert [t["name"] for t in list_tags(con)] == ["Rust"]


def test_create_tag_strips_name(con):
    result = create_tag({"name": "  Flask "}, con)
    assert result["tag"]["name"] == "Flask"


def test_duplicate_rejected(con):
    create_tag({"name": "Next.js"}, con)
    assert create_tag({"name": "Next.js"}, con) == {"message": DUPLICATE_MESSAGE}
    assert len(list_tags(con)) == 1


def test_duplicate_rejected_ignoring_case(con):
    create_tag({"name": "Game Design"}, con)
    assert create_tag({"name": "game design"}, con) == {"message": DUPLICATE_MESSAGE}
    assert create_tag({"name": "GAME DESIGN"}, con) == {"message": DUPLICATE_MESSAGE}
    assert len(list_tags(con)) == 1


def test_empty_name_rejected(con):
    assert create_tag({"name": ""}, con) == {"message": "Tag name is required"}
    assert list_tags(con) == []


def test_over_length_name_rejected(con):
    result = create_tag({"name": "x" * 51}, con)
    assert result == {"message": "Tag name must be less than 50 characters"}


def test_unique_constraint_is_case_insensitive(con):
    sql = "INSERT INTO tags (id, name, name_key, created_at) VALUES (?, ?, ?, '')"
    con.execute(sql, ("t1", "Prisma", tag_key("Prisma")))
    with pytest.raises(sqlite3.IntegrityError):
        con.execute(sql, ("t2", "PRISMA", tag_key("PRISMA")))


def test_duplicate_rejected_ignoring_non_ascii_case(con):
    assert "tag" in create_tag({"name": "Économie"}, con)
    assert create_tag({"name": "économie"}, con) == {"message": DUPLICATE_MESSAGE}
    assert create_tag({"name": "STRASSE"}, con)["tag"]["name"] == "STRASSE"
    assert create_tag({"name": "Straße"}, con) == {"message": DUPLICATE_MESSAGE}
    assert {t["name"] for t in list_tags(con)} == {"Économie", "STRASSE"}


def test_database_error_returns_message():
    broken = MagicMock()
    broken.execute.side_effect = sqlite3.OperationalError("disk I/O error")
    assert create_tag({"name": "Rust"}, broken) == {"message": DATABASE_ERROR_MESSAGE}


def test_list_tags_sorted_case_insensitively(con):
    for name in ("b-tag", "A-tag", "c-tag"):
        create_tag({"name": name}, con)
    assert [t["name"] for t in list_tags(con)] == ["A-tag", "b-tag", "c-tag"]
