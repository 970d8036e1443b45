"""HTTP fetching."""

from rss_agent_discovery.fetcher.base import TIMEOUT_ERROR, BaseFetcher, FetchResult
from rss_agent_discovery.fetcher.http_fetcher import HttpFetcher

__all__ = [
    "TIMEOUT_ERROR",
    "BaseFetcher",
    "FetchResult",
    "HttpFetcher",
]
