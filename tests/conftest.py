"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import logfire
import pytest

from blog.util.clock import Clock

# Cheap bcrypt and test log levels for every container built in tests
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__ADMIN_PASSWORD", "admin123")

logfire.configure(send_to_logfire=False, console=False)


class FakeClock(Clock):
    """Clock that only moves when told to."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> None:
        """Move forward by a timedelta given as keyword arguments."""
        self.current += timedelta(**kwargs)


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock fixed at 2024-01-15 12:00 UTC."""
    return FakeClock()


def write_post(path, title: str, body: str = "Body\n", **meta) -> None:
    """Write a Markdown file with frontmatter for repository tests."""
    lines = ["---", f"title: {title}"]
    lines.extend(f"{key}: {value}" for key, value in meta.items())
    lines.append("---")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + "\n" + body, encoding="utf-8")
