"""Visit one page: fetch it, derive feed candidates and validate each of them."""

import asyncio
import logging

from pydantic import BaseModel, Field

from rss_agent_discovery.config import DiscoveryConfig
from rss_agent_discovery.discovery import CandidateResolver, Feed
from rss_agent_discovery.fetcher import BaseFetcher
from rss_agent_discovery.validator import FeedValidator

logger = logging.getLogger(__name__)


class ScanOutcome(BaseModel):
    """Result of one site visit."""

    url: str
    final_url: str  # effective URL after redirects, base for relative links
    html: str | None = None  # None when the page could not be fetched
    error: str | None = None  # why the page could not be fetched
    feeds: list[Feed] = Field(default_factory=list)
    diagnostics: list[str] = Field(default_factory=list)


class SiteScanner:
    """Scan a single URL for confirmed feeds.

    Fetch failures are absorbed here: an unreachable page yields an outcome with
    no HTML and no feeds, and unreachable or invalid candidates are dropped.
    The caller's deadline bounds every fetch because cancellation propagates
    through the awaited validation tasks.
    """

    def __init__(self, fetcher: BaseFetcher, config: DiscoveryConfig):
        self.fetcher = fetcher
        self.config = config

    async def scan(self, url: str) -> ScanOutcome:
        diagnostics: list[str] = []

        page = await self.fetcher.fetch(url)
        if not page.success:
            reason = page.describe_failure()
            self._note(diagnostics, f"Error scanning {url}: {reason}")
            return ScanOutcome(url=url, final_url=url, error=reason, diagnostics=diagnostics)

        resolver = CandidateResolver(page.final_url)
        candidates = resolver.resolve(page.body)
        for message in resolver.diagnostics:
            self._note(diagnostics, message)

        semaphore = asyncio.Semaphore(self.config.max_concurrent_validations)
        checks = await asyncio.gather(
            *(self._validate(candidate, semaphore) for candidate in candidates)
        )

        feeds: list[Feed] = []
        for candidate, (ok, failure) in zip(candidates, checks):
            if ok:
                feeds.append(candidate)
            elif failure:
                self._note(diagnostics, failure)

        return ScanOutcome(
            url=url,
            final_url=page.final_url,
            html=page.body,
            feeds=feeds,
            diagnostics=diagnostics,
        )

    async def _validate(
        self, candidate: Feed, semaphore: asyncio.Semaphore
    ) -> tuple[bool, str | None]:
        """Fetch a candidate; return whether it is a feed and any fetch failure."""
        async with semaphore:
            result = await self.fetcher.fetch(candidate.url)

        if not result.success:
            return False, f"Failed to validate feed {candidate.url}: {result.describe_failure()}"
        return FeedValidator.is_feed(result.body, result.content_type), None

    def _note(self, diagnostics: list[str], message: str) -> None:
        logger.debug(message)
        if self.config.verbose:
            diagnostics.append(message)
