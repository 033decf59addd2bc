"""Content frontmatter schema and validation."""

import re
from dataclasses import dataclass, field
from datetime import datetime

ARTIFACT_TYPES = ("Dev Log", "Blog Post", "Link", "Image")
DEFAULT_ARTIFACT_TYPE = "Dev Log"
PROJECT_STATUSES = ("Ideation", "InProgress", "Shipped")

TAG_NAME_MAX_LENGTH = 50

UUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

FRONTMATTER_SCHEMA = {
    "title":        {"type": str,  "required": True, "non_empty": True},
    "publish_date": {"type": str,  "required": True, "format": "datetime"},  # ISO 8601
    "is_featured":  {"type": bool, "required": True},
    "project_ids":  {"type": list, "required": True, "items": "uuid"},
    "tag_ids":      {"type": list, "required": True, "items": "uuid"},
    "type":         {"type": str,  "required": False, "choices": ARTIFACT_TYPES},
}


@dataclass
class ValidationResult:
    success: bool
    data: dict | None = None
    issues: list[dict] = field(default_factory=list)

    @property
    def messages(self) -> list[str]:
        return [i["message"] for i in self.issues]


def _issue(path: str, message: str) -> dict:
    return {"field": path, "message": message}


def is_uuid(value) -> bool:
    return isinstance(value, str) and UUID_RE.match(value) is not None


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 date or datetime. Raises ValueError."""
    return datetime.fromisoformat(value.strip())


def _check_field(name: str, value, rule: dict) -> list[dict]:
    """Return issues for a single present field."""
    expected = rule["type"]
    if not isinstance(value, expected):
        got = type(value).__name__
        return [_issue(name, f"Field {name!r} must be {expected.__name__}, got {got}")]

    if rule.get("non_empty") and not value.strip():
        return [_issue(name, f"Field {name!r} must not be empty")]

    if rule.get("format") == "datetime":
        try:
            parse_iso_datetime(value)
        except ValueError:
            return [_issue(name, f"Field {name!r} must be an ISO 8601 date, got {value!r}")]

    choices = rule.get("choices")
    if choices and value not in choices:
        return [_issue(name, f"Field {name!r} must be one of {list(choices)}, got {value!r}")]

    issues = []
    if rule.get("items") == "uuid":
        for i, item in enumerate(value):
            if not is_uuid(item):
                issues.append(_issue(f"{name}[{i}]", f"Invalid UUID in {name!r}: {item!r}"))
    return issues


def validate_frontmatter(fm) -> ValidationResult:
    """Validate a frontmatter mapping. The input is returned unchanged on success."""
    if not isinstance(fm, dict):
        return ValidationResult(
            success=False,
            issues=[_issue("", f"Frontmatter must be a mapping, got {type(fm).__name__}")],
        )

    issues = []
    for name, rule in FRONTMATTER_SCHEMA.items():
        value = fm.get(name)
        if value is None:
            if rule.get("required"):
                issues.append(_issue(name, f"Missing required field: {name!r}"))
            continue
        issues.extend(_check_field(name, value, rule))

    if issues:
        return ValidationResult(success=False, issues=issues)
    return ValidationResult(success=True, data=fm)


def validate_tag_input(data) -> ValidationResult:
    """Validate create-tag input. On success ``data`` carries the stripped name."""
    name = data.get("name") if isinstance(data, dict) else None
    if name is not None and not isinstance(name, str):
        return ValidationResult(success=False, issues=[_issue("name", "Tag name must be a string")])

    name = (name or "").strip()
    if not name:
        return ValidationResult(success=False, issues=[_issue("name", "Tag name is required")])
    if len(name) > TAG_NAME_MAX_LENGTH:
        return ValidationResult(
            success=False,
            issues=[_issue("name", f"Tag name must be less than {TAG_NAME_MAX_LENGTH} characters")],
        )
    return ValidationResult(success=True, data={"name": name})
