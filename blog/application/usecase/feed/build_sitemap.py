"""Sitemap use case."""

import xml.etree.ElementTree as ET

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.application.usecase.feed.build_feed import (
    XML_DECLARATION,
    parse_post_date,
    post_url,
)
from blog.config import SiteSettings
from blog.domain.service import PostService
from blog.util.clock import Clock

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"

# (path, change frequency, priority)
STATIC_PAGES = (
    ("", "daily", "1.0"),
    ("/tech", "weekly", "0.9"),
    ("/life", "weekly", "0.9"),
    ("/tools", "weekly", "0.9"),
    ("/about", "monthly", "0.7"),
)


class BuildSitemapRequest(BaseModel):
    """Build sitemap request."""

    pass


class BuildSitemapUseCase(BaseUseCase):
    """List the site's sections and every post for search engines."""

    def __init__(
        self, post_service: PostService, site_settings: SiteSettings, clock: Clock
    ) -> None:
        self.post_service = post_service
        self.site = site_settings
        self.clock = clock

    async def execute(self, request: BuildSitemapRequest) -> str:
        base_url = self.site.url.rstrip("/")
        today = self.clock.today().isoformat()

        urlset = ET.Element("urlset", xmlns=SITEMAP_NS)
        for path, frequency, priority in STATIC_PAGES:
            _add_url(urlset, f"{base_url}{path}", today, frequency, priority)

        for post in await self.post_service.list_posts():
            published = parse_post_date(post.date)
            _add_url(
                urlset,
                post_url(self.site, post.slug),
                published.date().isoformat() if published else None,
                "monthly",
                "0.8",
            )

        return XML_DECLARATION + ET.tostring(urlset, encoding="unicode")


def _add_url(
    urlset: ET.Element,
    location: str,
    last_modified: str | None,
    frequency: str,
    priority: str,
) -> None:
    url = ET.SubElement(urlset, "url")
    ET.SubElement(url, "loc").text = location
    if last_modified:
        ET.SubElement(url, "lastmod").text = last_modified
    ET.SubElement(url, "changefreq").text = frequency
    ET.SubElement(url, "priority").text = priority
