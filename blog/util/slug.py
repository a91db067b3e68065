"""URL slug helpers.

Titles and file names may be Chinese or otherwise non-ASCII. No
transliteration is attempted: such input keeps whatever ASCII it has and
gets a short time-based suffix so the result is always URL-safe.
"""

import re
import time

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")

_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"


def _base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _time_suffix() -> str:
    return _base36(int(time.time() * 1000))


def _ascii_words(text: str) -> str:
    text = re.sub(r"[^\w\s-]", "", text, flags=re.ASCII)
    text = re.sub(r"[\s_]+", "-", text, flags=re.ASCII)
    text = re.sub(r"-+", "-", text)
    return text.strip("-")


def generate_slug(text: str, max_length: int = 50) -> str:
    """Generate a URL-safe slug from a title or file name.

    Args:
        text: Title or file name (a trailing .md is ignored)
        max_length: Maximum length of the title-derived part

    Returns:
        Slug matching ``SLUG_PATTERN``
    """
    slug = re.sub(r"\.md$", "", text, flags=re.IGNORECASE).lower()

    if not slug.isascii():
        ascii_part = _ascii_words(slug)[:20].strip("-")
        prefix = ascii_part or "post"
        return f"{prefix}-{_time_suffix()}"

    slug = _ascii_words(slug)[:max_length].strip("-")
    if not slug:
        return f"post-{_time_suffix()}"
    return slug


def is_valid_slug(slug: str) -> bool:
    """Check that a slug only has lowercase letters, digits and single hyphens."""
    return bool(SLUG_PATTERN.match(slug))
