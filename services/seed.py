"""Seed the database with the site's starter users, projects, tags, artifacts and reactions.

Projects and tags use fixed IDs because the files under content/ reference
them in their frontmatter.
"""

import logging
import sqlite3

from services.db import get_db, new_id, now_iso, tag_key

log = logging.getLogger(__name__)

# Children before parents so foreign keys never dangle mid-clear.
_CLEAR_ORDER = (
    "reactions",
    "project_artifacts",
    "artifact_tags",
    "artifacts",
    "projects",
    "tags",
    "sessions",
    "accounts",
    "users",
)

PROJECT_IDS = {
    "notebook": "550e8400-e29b-41d4-a716-446655440000",
    "island": "550e8400-e29b-41d4-a716-446655440001",
    "automation": "550e8400-e29b-41d4-a716-446655440002",
}

TAG_IDS = {
    "Next.js": "7c9e6679-7425-40de-944b-e07fc1f90001",
    "Game Design": "7c9e6679-7425-40de-944b-e07fc1f90002",
    "Prisma": "7c9e6679-7425-40de-944b-e07fc1f90003",
    "TypeScript": "7c9e6679-7425-40de-944b-e07fc1f90004",
    "Web Development": "7c9e6679-7425-40de-944b-e07fc1f90005",
}

USERS = [
    {"key": "admin", "name": "AWK", "email": "fake@fake.com", "role": "Admin"},
    {"key": "guest", "name": "Guest User", "email": "guest@example.com", "role": "User"},
]

PROJECTS = [
    {
        "key": "notebook",
        "name": "Generalist's Notebook",
        "description": (
            "A personal website to showcase and organize creative projects and technical artifacts."
        ),
        "status": "InProgress",
        "ideation_date": "2024-12-01",
        "llm_summary": (
            "A personal portfolio site with project tracking, artifact management, and "
            "AI-powered features for content discovery and sentiment analysis."
        ),
        "llm_sentiment_phrase": "Excited and productive momentum",
    },
    {
        "key": "island",
        "name": "Codename Island",
        "description": (
            "An experimental island survival game prototype exploring procedural "
            "generation and emergent gameplay."
        ),
        "status": "Ideation",
        "ideation_date": "2024-11-15",
        "llm_summary": (
            "Early-stage game concept focusing on survival mechanics, procedural world "
            "generation, and player-driven narrative emergence."
        ),
        "llm_sentiment_phrase": "Curious exploration phase",
    },
    {
        "key": "automation",
        "name": "Development Automation Suite",
        "description": (
            "Collection of scripts and tools to streamline development workflow and "
            "project management."
        ),
        "status": "Shipped",
        "ideation_date": "2024-10-01",
        "llm_summary": (
            "Completed toolkit featuring GitHub automation, testing frameworks, and deployment "
            "scripts that significantly improved development velocity."
        ),
        "llm_sentiment_phrase": "Satisfied and accomplished",
    },
]

ARTIFACTS = [
    {
        "key": "devlog1",
        "title": "Dev Log #1: Setting up the Foundation",
        "publish_date": "2024-12-10",
        "is_featured": True,
        "content_path": "/content/devlog-001-foundation.mdx",
        "type": "Dev Log",
        "projects": ["notebook"],
        "tags": ["Next.js", "TypeScript", "Web Development"],
    },
    {
        "key": "devlog2",
        "title": "Dev Log #2: Database Schema Design",
        "publish_date": "2024-12-15",
        "is_featured": False,
        "content_path": "/content/devlog-002-database.mdx",
        "type": "Dev Log",
        "projects": ["notebook"],
        "tags": ["Prisma", "TypeScript", "Web Development"],
    },
    {
        "key": "blog1",
        "title": "Lessons from Building My First Personal Site",
        "publish_date": "2024-12-01",
        "is_featured": False,
        "content_path": "/content/blog-personal-site-lessons.mdx",
        "type": "Blog Post",
        "projects": ["notebook"],
        "tags": ["Web Development", "Next.js"],
    },
    {
        "key": "island",
        "title": "Game Design Doc: Island Survival Mechanics",
        "publish_date": "2024-11-20",
        "is_featured": False,
        "content_path": "/content/island-game-design.mdx",
        "type": "Dev Log",
        "projects": ["island"],
        "tags": ["Game Design"],
    },
    {
        "key": "automation",
        "title": "Automation Scripts Collection",
        "publish_date": "2024-10-15",
        "is_featured": False,
        "content_path": "/content/automation-scripts.mdx",
        "type": "Link",
        "projects": ["automation"],
        "tags": ["TypeScript", "Web Development"],
    },
]

# (emoji, review_text, user key, "project"|"artifact", target key)
REACTIONS = [
    ("🚀", "Love the direction this project is taking!", "guest", "project", "notebook"),
    ("💡", "Interesting game concept, excited to see how it develops.", "guest", "project",
     "island"),
    ("✅", "These automation tools saved me hours of work.", "admin", "project", "automation"),
    ("📚", "Great technical deep-dive, very helpful setup guide.", "guest", "artifact",
     "devlog1"),
    ("🧠", "Solid database design patterns here.", "guest", "artifact", "devlog2"),
    ("🎯", "Relatable insights about building personal projects.", "admin", "artifact", "blog1"),
]


def count_rows(con: sqlite3.Connection = None) -> dict[str, int]:
    con = con or get_db()
    return {
        table: con.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        for table in reversed(_CLEAR_ORDER)
    }


def seed(con: sqlite3.Connection = None) -> dict[str, int]:
    """Replace all data with the starter set. Returns row counts per table."""
    con = con or get_db()
    now = now_iso()

    with con:
        log.info("Cleaning existing data")
        for table in _CLEAR_ORDER:
            con.execute(f"DELETE FROM {table}")

        user_ids = {}
        for u in USERS:
            user_ids[u["key"]] = new_id()
            con.execute(
                "INSERT INTO users (id, name, email, role, created_at) VALUES (?, ?, ?, ?, ?)",
                (user_ids[u["key"]], u["name"], u["email"], u["role"], now),
            )

        for name, tag_id in TAG_IDS.items():
            con.execute(
                "INSERT INTO tags (id, name, name_key, created_at) VALUES (?, ?, ?, ?)",
                (tag_id, name, tag_key(name), now),
            )

        for p in PROJECTS:
            con.execute(
                "INSERT INTO projects (id, name, description, status, ideation_date, "
                "llm_summary, llm_sentiment_phrase, created_at, updated_at) "
                "VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    PROJECT_IDS[p["key"]],
                    p["name"],
                    p["description"],
                    p["status"],
                    p["ideation_date"],
                    p["llm_summary"],
                    p["llm_sentiment_phrase"],
                    now,
                    now,
                ),
            )

        artifact_ids = {}
        for a in ARTIFACTS:
            artifact_ids[a["key"]] = new_id()
            con.execute(
                "INSERT INTO artifacts (id, title, publish_date, is_featured, content_path, "
                "type, created_at, updated_at) VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
                (
                    artifact_ids[a["key"]],
                    a["title"],
                    a["publish_date"],
                    int(a["is_featured"]),
                    a["content_path"],
                    a["type"],
                    now,
                    now,
                ),
            )
            con.executemany(
                "INSERT INTO project_artifacts (project_id, artifact_id) VALUES (?, ?)",
                [(PROJECT_IDS[p], artifact_ids[a["key"]]) for p in a["projects"]],
            )
            con.executemany(
                "INSERT INTO artifact_tags (artifact_id, tag_id) VALUES (?, ?)",
                [(artifact_ids[a["key"]], TAG_IDS[t]) for t in a["tags"]],
            )

        for emoji, text, user_key, kind, target in REACTIONS:
            project_id = PROJECT_IDS[target] if kind == "project" else None
            artifact_id = artifact_ids[target] if kind == "artifact" else None
            con.execute(
                "INSERT INTO reactions (id, emoji, review_text, user_id, project_id, "
                "artifact_id, created_at) VALUES (?, ?, ?, ?, ?, ?, ?)",
                (new_id(), emoji, text, user_ids[user_key], project_id, artifact_id, now),
            )

    counts = count_rows(con)
    log.info("Database seeded: %s", counts)
    return counts
