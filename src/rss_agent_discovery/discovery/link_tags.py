"""Discovery of feeds declared with ``<link rel="alternate">`` tags."""

import logging
from collections.abc import Iterator

from bs4 import BeautifulSoup

from rss_agent_discovery.discovery.base import DEFAULT_FEED_TITLE, BaseDiscoverer, Feed, FeedKind
from rss_agent_discovery.utils.url_utils import make_absolute

logger = logging.getLogger(__name__)

FEED_MIME_MARKERS = ("rss+xml", "atom+xml")


class LinkTagDiscoverer(BaseDiscoverer):
    """Yield feeds the page advertises through alternate link tags."""

    def discover(self, html: str) -> Iterator[Feed]:
        soup = BeautifulSoup(html, "lxml")

        for link in soup.select('link[rel="alternate"]'):
            mime_type = link.get("type")
            if not mime_type or not any(m in mime_type for m in FEED_MIME_MARKERS):
                continue

            href = link.get("href")
            if not href:
                continue

            try:
                url = make_absolute(self.base_url, href)
            except ValueError as e:
                message = f"Skipping invalid feed href {href!r}: {e}"
                logger.debug(message)
                self.diagnostics.append(message)
                continue

            yield Feed(
                url=url,
                title=link.get("title") or DEFAULT_FEED_TITLE,
                kind=FeedKind.ATOM if "atom" in mime_type else FeedKind.RSS,
            )
