"""Tests for frontmatter-to-artifact mapping and drift detection."""

from datetime import datetime

from services.sync import check_content_sync, fetch_artifacts, map_frontmatter_to_artifact

FRONTMATTER = {
    "title": "Test Dev Log",
    "publish_date": "2025-01-15T10:00:00Z",
    "is_featured": True,
    "project_ids": ["550e8400-e29b-41d4-a716-446655440000"],
    "tag_ids": ["550e8400-e29b-41d4-a716-446655440002"],
}


def _file(path, title):
    return {"path": path, "frontmatter": {**FRONTMATTER, "title": title}}


# ---------------------------------------------------------------------------
# map_frontmatter_to_artifact
# ---------------------------------------------------------------------------


def test_map_defaults_type_to_dev_log():
    artifact = map_frontmatter_to_artifact(FRONTMATTER, "/content/test-dev-log.mdx")
    assert artifact["title"] == "Test Dev Log"
    assert artifact["publish_date"] == datetime.fromisoformat("2025-01-15T10:00:00+00:00")
    assert artifact["is_featured"] is True
    assert artifact["content_path"] == "/content/test-dev-log.mdx"
    assert artifact["type"] == "Dev Log"


def test_map_keeps_explicit_type():
    fm = {**FRONTMATTER, "is_featured": False, "project_ids": [], "type": "Blog Post"}
    artifact = map_frontmatter_to_artifact(fm, "/content/test-blog-post.mdx")
    assert artifact["type"] == "Blog Post"
    assert artifact["project_ids"] == []


# ---------------------------------------------------------------------------
# check_content_sync
# ---------------------------------------------------------------------------


def test_title_change_is_out_of_sync():
    db_artifacts = [{"id": "1", "content_path": "/content/dev-log-001.mdx", "title": "Old Title"}]
    status = check_content_sync(db_artifacts, [_file("/content/dev-log-001.mdx", "New Title")])
    assert status.needs_update is True
    assert status.out_of_sync_files == ["/content/dev-log-001.mdx"]


def test_matching_title_is_in_sync():
    db_artifacts = [{"id": "1", "content_path": "/content/a.mdx", "title": "Same"}]
    status = check_content_sync(db_artifacts, [_file("/content/a.mdx", "Same")])
    assert status.needs_update is False
    assert status.out_of_sync_files == []


def test_only_drifted_paths_flagged():
    db_artifacts = [
        {"content_path": "/content/a.mdx", "title": "A"},
        {"content_path": "/content/b.mdx", "title": "B"},
        {"content_path": "/content/c.mdx", "title": "C"},
    ]
    files = [_file("/content/a.mdx", "A"), _file("/content/b.mdx", "B2"), _file("/content/c.mdx", "c")]
    status = check_content_sync(db_artifacts, files)
    assert status.out_of_sync_files == ["/content/b.mdx", "/content/c.mdx"]


def test_untracked_and_orphaned_do_not_need_update():
    db_artifacts = [{"content_path": "/content/stored-only.mdx", "title": "Stored"}]
    status = check_content_sync(db_artifacts, [_file("/content/file-only.mdx", "File")])
    assert status.needs_update is False
    assert status.out_of_sync_files == []
    assert status.untracked_files == ["/content/file-only.mdx"]
    assert status.orphaned_records == ["/content/stored-only.mdx"]


def test_file_without_title_is_out_of_sync():
    db_artifacts = [{"content_path": "/content/a.mdx", "title": "A"}]
    status = check_content_sync(db_artifacts, [{"path": "/content/a.mdx", "frontmatter": {}}])
    assert status.out_of_sync_files == ["/content/a.mdx"]


# ---------------------------------------------------------------------------
# fetch_artifacts
# ---------------------------------------------------------------------------


def test_fetch_artifacts(con):
    con.execute(
        "INSERT INTO artifacts (id, title, publish_date, content_path, created_at, updated_at) "
        "VALUES ('a1', 'Stored', '2024-12-10', '/content/a.mdx', 't', 't')"
    )
    con.commit()
    assert fetch_artifacts(con) == [
        {"id": "a1", "title": "Stored", "content_path": "/content/a.mdx", "updated_at": "t"}
    ]
