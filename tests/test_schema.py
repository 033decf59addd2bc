"""Unit tests for frontmatter and tag input validation."""

import copy

import pytest

from services.schema import ARTIFACT_TYPES, is_uuid, validate_frontmatter, validate_tag_input

VALID = {
    "title": "Test Dev Log",
    "publish_date": "2025-01-15T10:00:00Z",
    "is_featured": True,
    "project_ids": ["550e8400-e29b-41d4-a716-446655440000"],
    "tag_ids": ["550e8400-e29b-41d4-a716-446655440001", "550e8400-e29b-41d4-a716-446655440002"],
}


def _fields(result):
    return [i["field"] for i in result.issues]


# ---------------------------------------------------------------------------
# validate_frontmatter: success
# ---------------------------------------------------------------------------


def test_valid_frontmatter_round_trips_unchanged():
    original = copy.deepcopy(VALID)
    result = validate_frontmatter(VALID)
    assert result.success is True
    assert result.data == original
    assert result.issues == []
    assert VALID == original


def test_unknown_fields_pass_through():
    fm = {**VALID, "summary": "extra"}
    result = validate_frontmatter(fm)
    assert result.success is True
    assert result.data["summary"] == "extra"


def test_date_only_publish_date():
    result = validate_frontmatter({**VALID, "publish_date": "2024-12-10"})
    assert result.success is True


@pytest.mark.parametrize("artifact_type", ARTIFACT_TYPES)
def test_valid_types(artifact_type):
    assert validate_frontmatter({**VALID, "type": artifact_type}).success is True


def test_empty_id_lists():
    result = validate_frontmatter({**VALID, "project_ids": [], "tag_ids": []})
    assert result.success is True


# ---------------------------------------------------------------------------
# validate_frontmatter: failures
# ---------------------------------------------------------------------------


def test_missing_fields_one_issue_each():
    result = validate_frontmatter({"title": "Test", "publish_date": "2025-01-15T10:00:00Z"})
    assert result.success is False
    assert result.data is None
    assert len(result.issues) == 3
    assert sorted(_fields(result)) == ["is_featured", "project_ids", "tag_ids"]


def test_empty_input_reports_every_required_field():
    result = validate_frontmatter({})
    assert sorted(_fields(result)) == ["is_featured", "project_ids", "publish_date", "tag_ids", "title"]


def test_invalid_types_and_values():
    result = validate_frontmatter(
        {
            "title": "",
            "publish_date": "invalid-date",
            "is_featured": "yes",
            "project_ids": "not-an-array",
            "tag_ids": ["invalid-uuid"],
        }
    )
    assert result.success is False
    assert set(_fields(result)) == {"title", "publish_date", "is_featured", "project_ids", "tag_ids[0]"}


def test_invalid_uuids_reported_per_element():
    result = validate_frontmatter(
        {**VALID, "project_ids": ["invalid-uuid-format"], "tag_ids": [VALID["tag_ids"][0], "also-invalid"]}
    )
    assert result.success is False
    assert _fields(result) == ["project_ids[0]", "tag_ids[1]"]


def test_invalid_date():
    result = validate_frontmatter({**VALID, "publish_date": "not-a-date"})
    assert result.success is False
    assert _fields(result) == ["publish_date"]


def test_invalid_type_enum():
    result = validate_frontmatter({**VALID, "type": "Invalid Type"})
    assert result.success is False
    assert _fields(result) == ["type"]


def test_non_array_id_fields():
    result = validate_frontmatter({**VALID, "project_ids": "not-an-array", "tag_ids": 123})
    assert result.success is False
    assert _fields(result) == ["project_ids", "tag_ids"]


def test_featured_must_be_boolean():
    result = validate_frontmatter({**VALID, "is_featured": 1})
    assert _fields(result) == ["is_featured"]


def test_non_mapping_input():
    result = validate_frontmatter(["title"])
    assert result.success is False
    assert len(result.issues) == 1


def test_is_uuid():
    assert is_uuid("550e8400-e29b-41d4-a716-446655440000")
    assert is_uuid("550E8400-E29B-41D4-A716-446655440000")
    assert not is_uuid("550e8400-e29b-61d4-a716-446655440000")  # version 6 not accepted
    assert not is_uuid(42)


# ---------------------------------------------------------------------------
# validate_tag_input
# ---------------------------------------------------------------------------


def test_tag_input_ok_strips_whitespace():
    result = validate_tag_input({"name": "  Rust  "})
    assert result.success is True
    assert result.data == {"name": "Rust"}


@pytest.mark.parametrize("data", [{}, {"name": ""}, {"name": "   "}, None])
def test_tag_input_requires_name(data):
    result = validate_tag_input(data)
    assert result.success is False
    assert result.messages == ["Tag name is required"]


def test_tag_input_max_length():
    assert validate_tag_input({"name": "x" * 50}).success is True
    result = validate_tag_input({"name": "x" * 51})
    assert result.messages == ["Tag name must be less than 50 characters"]


def test_tag_input_rejects_non_string():
    assert validate_tag_input({"name": 7}).success is False
