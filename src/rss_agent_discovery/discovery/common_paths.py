"""Discovery by guessing conventional feed locations."""

import logging
from collections.abc import Iterator

from rss_agent_discovery.discovery.base import DEFAULT_FEED_TITLE, BaseDiscoverer, Feed, FeedKind
from rss_agent_discovery.utils.url_utils import last_path_segment, make_absolute

logger = logging.getLogger(__name__)

COMMON_FEED_PATHS = [
    "rss.xml",
    "feed.xml",
    "rss",
    "atom",
    "atom.xml",
    "index.xml",
    "feeds/rss.xml",
    "feed",
    "rss/feed.xml",
]


class CommonPathDiscoverer(BaseDiscoverer):
    """Yield well-known feed paths relative to the page URL."""

    def __init__(self, base_url: str, paths: list[str] | None = None):
        super().__init__(base_url)
        self.paths = paths if paths is not None else COMMON_FEED_PATHS

    def discover(self, html: str) -> Iterator[Feed]:
        # The page body is irrelevant here; the guesses depend only on the URL
        for path in self.paths:
            try:
                url = make_absolute(self.base_url, path)
            except ValueError as e:
                message = f"Skipping invalid candidate URL {path!r}: {e}"
                logger.debug(message)
                self.diagnostics.append(message)
                continue

            yield Feed(
                url=url,
                title=last_path_segment(url) or DEFAULT_FEED_TITLE,
                kind=FeedKind.ATOM if "atom" in path else FeedKind.RSS,
            )
