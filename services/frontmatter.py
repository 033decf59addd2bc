"""Content file parsing: split an MDX/markdown file into frontmatter and body."""

import os
from datetime import datetime

import yaml

from config import CONTENT_DIR, CONTENT_URL_PREFIX

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class FrontmatterError(ValueError):
    """Raised when a frontmatter block exists but cannot be parsed."""


class _FrontmatterLoader(yaml.SafeLoader):
    """SafeLoader that leaves dates and timestamps as the strings the author wrote."""


_FrontmatterLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}

_SCALAR_TYPES = (str, int, float, bool, type(None))


def _check_json_value(value, where: str):
    """Reject YAML values with no JSON form, such as !!set or !!binary."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise FrontmatterError(f"Frontmatter key {key!r} in {where} is not a string")
            _check_json_value(item, f"{where}.{key}")
    elif isinstance(value, list):
        for i, item in enumerate(value):
            _check_json_value(item, f"{where}[{i}]")
    elif not isinstance(value, _SCALAR_TYPES):
        raise FrontmatterError(
            f"Unsupported frontmatter value at {where}: {type(value).__name__}"
        )


def parse_content_file(content: str) -> tuple[dict, str]:
    """Extract YAML frontmatter and body from file content.

    Content without an opening ``---`` line, or without a closing one, has no
    frontmatter and is returned whole as the body. A block that is present but
    is not valid YAML, is not a mapping, or holds values with no JSON form (sets,
    binary) raises FrontmatterError.
    """
    if not content.startswith("---"):
        return {}, content

    lines = content.split("\n")
    if lines[0].strip() != "---":
        return {}, content

    end_idx = None
    for i, line in enumerate(lines[1:], 1):
        if line.strip() == "---":
            end_idx = i
            break

    if end_idx is None:
        return {}, content

    block = "\n".join(lines[1:end_idx])
    try:
        raw = yaml.load(block, Loader=_FrontmatterLoader)
    except yaml.YAMLError as e:
        raise FrontmatterError(f"Malformed frontmatter: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise FrontmatterError(f"Frontmatter must be a mapping, got {type(raw).__name__}")
    _check_json_value(raw, "frontmatter")

    body = "\n".join(lines[end_idx + 1 :]).lstrip("\n")
    return raw, body


def content_path_for(filename: str) -> str:
    """Public content path stored on artifacts, e.g. /content/devlog-001.mdx."""
    return CONTENT_URL_PREFIX + filename.replace(os.sep, "/")


def read_content_file(filename: str, content_dir: str = None) -> dict:
    """Read and parse one content file. Raises FrontmatterError or OSError."""
    content_dir = content_dir or CONTENT_DIR
    abs_path = os.path.join(content_dir, filename)
    with open(abs_path, encoding="utf-8-sig") as f:
        content = f.read()
    stat = os.stat(abs_path)
    fm, body = parse_content_file(content)
    return {
        "path": content_path_for(filename),
        "filename": filename,
        "frontmatter": fm,
        "body": body,
        "modified": datetime.fromtimestamp(stat.st_mtime).isoformat(),
        "size": stat.st_size,
    }
