"""Combine discovery strategies into one ordered candidate list."""

from rss_agent_discovery.discovery.base import BaseDiscoverer, Feed
from rss_agent_discovery.discovery.common_paths import CommonPathDiscoverer
from rss_agent_discovery.discovery.link_tags import LinkTagDiscoverer


class CandidateResolver:
    """Derive candidate feed URLs for a page.

    Declared link tags come first, then conventional paths. Each resolved URL
    appears once; the first strategy to produce it decides its title and kind.
    """

    def __init__(self, base_url: str, discoverers: list[BaseDiscoverer] | None = None):
        self.base_url = base_url
        self.discoverers = discoverers or [
            LinkTagDiscoverer(base_url),
            CommonPathDiscoverer(base_url),
        ]

    def resolve(self, html: str) -> list[Feed]:
        candidates: dict[str, Feed] = {}
        for discoverer in self.discoverers:
            for feed in discoverer.discover(html):
                candidates.setdefault(feed.url, feed)
        return list(candidates.values())

    @property
    def diagnostics(self) -> list[str]:
        return [message for d in self.discoverers for message in d.diagnostics]
