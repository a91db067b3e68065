"""Unit tests for the feed and sitemap use cases."""

import xml.etree.ElementTree as ET

import pytest

from blog.application.usecase.feed import BuildFeedRequest, BuildFeedUseCase
from blog.application.usecase.feed import BuildSitemapRequest, BuildSitemapUseCase
from blog.application.usecase.feed.build_feed import parse_post_date
from blog.config import SiteSettings
from blog.domain.service import PostService
from blog.domain.value import PostCategory
from tests.conftest import FakeClock
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()

SITE = SiteSettings(url="https://blog.example.com/", title="Example", feed_size=2)
SITEMAP_NS = "{http://www.sitemaps.org/schemas/sitemap/0.9}"


async def _seed(post_service: PostService) -> None:
    for title, day in (("First", "01"), ("Second", "02"), ("Third", "03")):
        await post_service.create_post(
            title=title,
            content="body",
            category=PostCategory.LIFE,
            excerpt=f"About {title}",
            date=f"2024-01-{day}",
        )


class TestBuildFeedUseCase:
    """Tests for BuildFeedUseCase."""

    @pytest.mark.asyncio
    async def test_feed_lists_latest_posts(self, unit_env):
        """The feed should carry channel metadata and the newest posts only."""
        # Arrange
        post_service = await unit_env.get(PostService)
        await _seed(post_service)
        use_case = BuildFeedUseCase(post_service, SITE, FakeClock())

        # Act
        document = await use_case.execute(BuildFeedRequest())

        # Assert
        assert document.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        channel = ET.fromstring(document.split("\n", 1)[1]).find("channel")
        assert channel.findtext("title") == "Example"
        assert channel.findtext("link") == "https://blog.example.com"
        assert channel.findtext("lastBuildDate") == "Mon, 15 Jan 2024 12:00:00 GMT"

        items = channel.findall("item")
        assert [i.findtext("title") for i in items] == ["Third", "Second"]
        assert items[0].findtext("link") == "https://blog.example.com/posts/third"
        assert items[0].findtext("description") == "About Third"
        assert items[0].findtext("pubDate") == "Wed, 03 Jan 2024 00:00:00 GMT"

    @pytest.mark.asyncio
    async def test_feed_escapes_markup_in_titles(self, unit_env):
        """Titles with XML special characters must not break the document."""
        # Arrange
        post_service = await unit_env.get(PostService)
        await post_service.create_post(
            title="Tom & Jerry <3", content="x", category=PostCategory.LIFE, slug="tj"
        )
        use_case = BuildFeedUseCase(post_service, SITE, FakeClock())

        # Act
        document = await use_case.execute(BuildFeedRequest())

        # Assert
        channel = ET.fromstring(document.split("\n", 1)[1]).find("channel")
        assert channel.find("item").findtext("title") == "Tom & Jerry <3"


class TestBuildSitemapUseCase:
    """Tests for BuildSitemapUseCase."""

    @pytest.mark.asyncio
    async def test_sitemap_lists_pages_and_posts(self, unit_env):
        """Static pages come first, then every post with its date."""
        # Arrange
        post_service = await unit_env.get(PostService)
        await _seed(post_service)
        use_case = BuildSitemapUseCase(post_service, SITE, FakeClock())

        # Act
        document = await use_case.execute(BuildSitemapRequest())

        # Assert
        urlset = ET.fromstring(document.split("\n", 1)[1])
        locations = [u.findtext(f"{SITEMAP_NS}loc") for u in urlset]
        assert locations[0] == "https://blog.example.com"
        assert "https://blog.example.com/about" in locations
        assert locations[-3:] == [
            "https://blog.example.com/posts/third",
            "https://blog.example.com/posts/second",
            "https://blog.example.com/posts/first",
        ]
        assert urlset[-1].findtext(f"{SITEMAP_NS}lastmod") == "2024-01-01"


class TestParsePostDate:
    """Tests for parse_post_date."""

    def test_plain_date(self):
        assert parse_post_date("2024-01-15").isoformat() == "2024-01-15T00:00:00+00:00"

    def test_timestamp_with_offset(self):
        parsed = parse_post_date("2024-01-15T10:00:00+08:00")

        assert parsed.utcoffset().total_seconds() == 8 * 3600

    def test_garbage(self):
        assert parse_post_date("someday") is None
