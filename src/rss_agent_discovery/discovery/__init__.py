"""Feed candidate and blog section discovery strategies."""

from rss_agent_discovery.discovery.base import BaseDiscoverer, Feed, FeedKind
from rss_agent_discovery.discovery.common_paths import COMMON_FEED_PATHS, CommonPathDiscoverer
from rss_agent_discovery.discovery.link_tags import LinkTagDiscoverer
from rss_agent_discovery.discovery.resolver import CandidateResolver
from rss_agent_discovery.discovery.sections import (
    BLOG_KEYWORDS,
    COMMON_BLOG_PATHS,
    BlogSectionFinder,
)

__all__ = [
    "BLOG_KEYWORDS",
    "COMMON_BLOG_PATHS",
    "COMMON_FEED_PATHS",
    "BaseDiscoverer",
    "BlogSectionFinder",
    "CandidateResolver",
    "CommonPathDiscoverer",
    "Feed",
    "FeedKind",
    "LinkTagDiscoverer",
]
