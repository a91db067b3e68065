"""Domain value objects for the blog.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Literal

from blog.domain.value.common import ValueObject

SEGMENT_PATTERN = re.compile(r"^[a-z0-9-]+$")


class PostCategory(str, Enum):
    """Fixed top-level categories.

    Tech posts live under tech/<sub-category>/, the others directly under
    their category directory.
    """

    TECH = "tech"
    LIFE = "life"
    TOOLS = "tools"

    @property
    def display_name(self) -> str:
        return _CATEGORY_INFO[self][0]

    @property
    def description(self) -> str:
        return _CATEGORY_INFO[self][1]

    @property
    def icon(self) -> str:
        return _CATEGORY_INFO[self][2]

    @property
    def has_sub_categories(self) -> bool:
        return self is PostCategory.TECH


_CATEGORY_INFO = {
    PostCategory.TECH: ("技术分享", "编程技巧、开发经验、技术探索", "💻"),
    PostCategory.LIFE: ("生活随笔", "日常感悟、读书笔记、成长记录", "🌱"),
    PostCategory.TOOLS: ("实用工具", "效率工具、开发资源、实用技巧", "🛠️"),
}

DEFAULT_SUB_CATEGORY = "other"


def split_sub_category(sub_category: str) -> list[str]:
    """Split a sub-category path (``backend`` or ``backend/python``) into segments.

    Raises:
        ValueError: If there are more than two segments or a segment is not
            lowercase alphanumeric with hyphens
    """
    segments = sub_category.strip("/").split("/")
    if len(segments) > 2:
        raise ValueError("Sub-category supports one level of nesting only")
    for segment in segments:
        if not SEGMENT_PATTERN.match(segment):
            raise ValueError(
                "Sub-category may only contain lowercase letters, digits and hyphens"
            )
    return segments


class TokenClaims(ValueObject):
    """Claims carried by an admin session token."""

    role: Literal["admin"] = "admin"
    issued_at: datetime | None = None
    expires_at: datetime | None = None


class RateLimitRecord(ValueObject):
    """Request count for one key inside its current window."""

    count: int
    reset_at_ms: int


class RateLimitDecision(ValueObject):
    """Outcome of a rate limit check."""

    allowed: bool
    remaining: int
    reset_in_ms: int

    @property
    def retry_after_seconds(self) -> int:
        """Whole seconds until the window resets, rounded up."""
        return max(0, -(-self.reset_in_ms // 1000))
