"""Coordinates feed discovery across a site's root, its blog sections and many input URLs."""

import asyncio
import json
import logging
from collections.abc import Callable, Iterable

from pydantic import BaseModel, Field

from rss_agent_discovery.config import AppConfig, DiscoveryConfig
from rss_agent_discovery.discovery import BlogSectionFinder, Feed
from rss_agent_discovery.fetcher import TIMEOUT_ERROR, BaseFetcher, HttpFetcher
from rss_agent_discovery.scanner import SiteScanner
from rss_agent_discovery.utils.url_utils import is_same_origin, make_absolute

logger = logging.getLogger(__name__)

FetcherFactory = Callable[[], BaseFetcher]


class SiteUnreachableError(Exception):
    """The input URL itself could not be fetched."""

    def __init__(self, url: str, reason: str):
        message = reason if reason == TIMEOUT_ERROR else f"Failed to fetch {url}: {reason}"
        super().__init__(message)


class SiteResult(BaseModel):
    """Feeds discovered for one input URL."""

    url: str
    feeds: list[Feed] = Field(default_factory=list)
    error: str | None = None
    diagnostics: list[str] = Field(default_factory=list)


class RunReport(BaseModel):
    """Top-level output of a discovery run."""

    success: bool
    partial_results: bool | None = Field(default=None, serialization_alias="partialResults")
    results: list[SiteResult] = Field(default_factory=list)

    @classmethod
    def from_results(cls, results: list[SiteResult]) -> "RunReport":
        report = cls(success=True, results=results)
        if report.has_errors:
            report.success = False
            if report.total_feeds > 0:
                report.partial_results = True
        return report

    @property
    def total_feeds(self) -> int:
        return sum(len(r.feeds) for r in self.results)

    @property
    def has_errors(self) -> bool:
        return any(r.error for r in self.results)

    def to_dict(self) -> dict:
        """JSON-ready dict; ``partialResults`` is only present when set."""
        data = self.model_dump(mode="json", by_alias=True)
        if data.get("partialResults") is None:
            data.pop("partialResults", None)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def merge_feeds(merged: dict[str, Feed], feeds: Iterable[Feed]) -> None:
    """Add feeds to ``merged`` keyed by URL; an existing entry is never replaced."""
    for feed in feeds:
        merged.setdefault(feed.url, feed)


class DiscoveryCoordinator:
    """Discover feeds for one input URL under a single deadline.

    The deadline covers the root scan and every section scan combined. Candidate
    and section fetch failures are absorbed by ``SiteScanner``. An unreachable
    root page, deadline expiry and unexpected exceptions surface as
    ``SiteResult.error`` with no feeds.
    """

    def __init__(self, config: DiscoveryConfig, fetcher_factory: FetcherFactory):
        self.config = config
        self.fetcher_factory = fetcher_factory

    async def discover(self, url: str) -> SiteResult:
        diagnostics: list[str] = []
        try:
            feeds = await asyncio.wait_for(
                self._discover(url, diagnostics),
                timeout=self.config.timeout_ms / 1000,
            )
        except asyncio.TimeoutError:
            return self._failed(url, TIMEOUT_ERROR, diagnostics)
        except Exception as e:
            logger.debug("Discovery for %s raised", url, exc_info=True)
            return self._failed(url, str(e) or e.__class__.__name__, diagnostics)

        return SiteResult(url=url, feeds=feeds, diagnostics=diagnostics)

    async def _discover(self, url: str, diagnostics: list[str]) -> list[Feed]:
        # A fresh client per input URL keeps one site's stalls out of another's pool
        async with self.fetcher_factory() as fetcher:
            scanner = SiteScanner(fetcher, self.config)

            root = await scanner.scan(url)
            diagnostics.extend(root.diagnostics)

            merged: dict[str, Feed] = {}
            merge_feeds(merged, root.feeds)

            if root.html is None:
                raise SiteUnreachableError(url, root.error or "no response")

            # an empty page has no links worth following
            if not root.html or self.config.skip_blog_sections:
                return list(merged.values())

            section_urls = self._section_urls(root.final_url, root.html, diagnostics)
            if not section_urls:
                return list(merged.values())

            logger.debug("Scanning %d section(s) of %s", len(section_urls), url)
            outcomes = await asyncio.gather(*(scanner.scan(u) for u in section_urls))

            # gather preserves submission order, so merging is deterministic
            for outcome in outcomes:
                merge_feeds(merged, outcome.feeds)
                diagnostics.extend(outcome.diagnostics)

            return list(merged.values())

    def _section_urls(self, base_url: str, html: str, diagnostics: list[str]) -> list[str]:
        urls: list[str] = []
        for path in BlogSectionFinder(base_url, self.config).find(html):
            try:
                section_url = make_absolute(base_url, path)
            except ValueError as e:
                self._skip(f"Skipping invalid section path {path!r}: {e}", diagnostics)
                continue
            if not is_same_origin(section_url, base_url):
                self._skip(f"Skipping cross-origin section {section_url}", diagnostics)
                continue
            urls.append(section_url)
        return urls

    def _skip(self, message: str, diagnostics: list[str]) -> None:
        logger.debug(message)
        if self.config.verbose:
            diagnostics.append(message)

    def _failed(self, url: str, error: str, diagnostics: list[str]) -> SiteResult:
        logger.warning("Error processing %s: %s", url, error)
        if self.config.verbose:
            diagnostics.append(f"Error processing {url}: {error}")
        return SiteResult(url=url, feeds=[], error=error, diagnostics=diagnostics)


class Orchestrator:
    """Runs one ``DiscoveryCoordinator`` per input URL concurrently."""

    def __init__(self, config: AppConfig, fetcher_factory: FetcherFactory | None = None):
        self.config = config
        self.fetcher_factory = fetcher_factory or (lambda: HttpFetcher(config.fetcher))

    async def run(self, urls: list[str]) -> RunReport:
        """Discover feeds for every URL; results keep input order."""
        # Independent coordinators, so one URL's deadline never touches another
        results = await asyncio.gather(
            *(
                DiscoveryCoordinator(self.config.discovery, self.fetcher_factory).discover(url)
                for url in urls
            )
        )

        report = RunReport.from_results(list(results))
        logger.debug(
            "Finished %d URL(s): %d feed(s), success=%s",
            len(urls),
            report.total_feeds,
            report.success,
        )
        return report
