"""YAML frontmatter codec for Markdown files.

A document is::

    ---
    title: Hello
    tags: [a, b]
    ---
    Markdown body...

The body is kept byte-for-byte so that reading and rewriting a post does
not alter its content.
"""

import logging
import re
from datetime import date, datetime
from typing import Any

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)


def split(text: str) -> tuple[dict[str, Any], str]:
    """Split YAML frontmatter from a Markdown body.

    Returns (metadata_dict, body_text). If there is no frontmatter, or it is
    not a YAML mapping, returns ({}, full_text).
    """
    match = FRONTMATTER_PATTERN.match(text)
    if match is None:
        return {}, text

    try:
        meta = yaml.safe_load(match.group(1)) or {}
    except yaml.YAMLError:
        logger.warning("Invalid YAML frontmatter, ignoring")
        return {}, text

    if not isinstance(meta, dict):
        return {}, text

    return meta, text[match.end() :]


def dump(meta: dict[str, Any], body: str) -> str:
    """Render frontmatter and body as one document."""
    header = yaml.safe_dump(
        meta, allow_unicode=True, sort_keys=False, default_flow_style=False
    )
    return f"---\n{header}---\n{body}"


def as_iso_date(value: Any, fallback: date) -> str:
    """Normalize a frontmatter ``date`` value to ISO text.

    YAML turns unquoted ``2024-01-15`` into a date object; quoted values
    stay text and are kept as written.
    """
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if value:
        return str(value)
    return fallback.isoformat()
