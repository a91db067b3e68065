"""RSS feed use case."""

import xml.etree.ElementTree as ET
from datetime import date, datetime, time, timezone
from email.utils import format_datetime
from typing import Optional
from urllib.parse import quote

import logfire
from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.config import SiteSettings
from blog.domain.service import PostService
from blog.util.clock import Clock

ATOM_NS = "http://www.w3.org/2005/Atom"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

ET.register_namespace("atom", ATOM_NS)


def post_url(site: SiteSettings, slug: str) -> str:
    return f"{site.url.rstrip('/')}/posts/{quote(slug)}"


def parse_post_date(value: str) -> Optional[datetime]:
    """Read a post date (``2024-01-15`` or a full ISO timestamp) as UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        try:
            parsed = datetime.combine(date.fromisoformat(value[:10]), time())
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


class BuildFeedRequest(BaseModel):
    """Build feed request."""

    pass


class BuildFeedUseCase(BaseUseCase):
    """Render the latest posts as RSS 2.0."""

    def __init__(
        self, post_service: PostService, site_settings: SiteSettings, clock: Clock
    ) -> None:
        """Initialize build feed use case.

        Args:
            post_service: Post domain service
            site_settings: Site title, URL and feed size
            clock: Time source for the build date
        """
        self.post_service = post_service
        self.site = site_settings
        self.clock = clock

    async def execute(self, request: BuildFeedRequest) -> str:
        """Build the feed document.

        Returns:
            RSS XML text
        """
        with logfire.span("build_feed.execute"):
            posts = (await self.post_service.list_posts())[: self.site.feed_size]
            base_url = self.site.url.rstrip("/")

            rss = ET.Element("rss", version="2.0")
            channel = ET.SubElement(rss, "channel")
            ET.SubElement(channel, "title").text = self.site.title
            ET.SubElement(channel, "link").text = base_url
            ET.SubElement(channel, "description").text = self.site.description
            ET.SubElement(channel, "language").text = self.site.language
            ET.SubElement(channel, "lastBuildDate").text = format_datetime(
                self.clock.now(), usegmt=True
            )
            ET.SubElement(
                channel,
                f"{{{ATOM_NS}}}link",
                href=f"{base_url}/feed",
                rel="self",
                type="application/rss+xml",
            )

            for post in posts:
                link = post_url(self.site, post.slug)
                item = ET.SubElement(channel, "item")
                ET.SubElement(item, "title").text = post.title
                ET.SubElement(item, "link").text = link
                ET.SubElement(item, "guid", isPermaLink="true").text = link
                ET.SubElement(item, "description").text = post.excerpt
                published = parse_post_date(post.date)
                if published is not None:
                    ET.SubElement(item, "pubDate").text = format_datetime(
                        published.astimezone(timezone.utc), usegmt=True
                    )
                ET.SubElement(item, "category").text = post.category.value

            logfire.info("Feed built", items=len(posts))
            return XML_DECLARATION + ET.tostring(rss, encoding="unicode")
