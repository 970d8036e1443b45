"""HTTP fetcher built on httpx."""

import logging

import httpx

from rss_agent_discovery.config import FetcherConfig
from rss_agent_discovery.fetcher.base import TIMEOUT_ERROR, BaseFetcher, FetchResult

logger = logging.getLogger(__name__)


class HttpFetcher(BaseFetcher):
    """Plain GET fetcher identifying itself with the configured User-Agent."""

    def __init__(
        self,
        config: FetcherConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(config)
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        """Initialize HTTP client."""
        self._client = httpx.AsyncClient(
            headers={"User-Agent": self.config.user_agent},
            follow_redirects=True,
            timeout=self.config.timeout_ms / 1000,
            transport=self._transport,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Clean up HTTP client."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL via HTTP GET."""
        if not self._client:
            raise RuntimeError("Fetcher not initialized. Use 'async with' context manager.")

        try:
            response = await self._client.get(url)
            return FetchResult(
                url=url,
                final_url=str(response.url),
                body=response.text,
                status_code=response.status_code,
                content_type=response.headers.get("content-type", ""),
            )

        except httpx.TimeoutException as e:
            logger.debug("GET %s timed out: %r", url, e)
            return FetchResult(url=url, final_url=url, body="", status_code=0, error=TIMEOUT_ERROR)

        except Exception as e:
            logger.debug("GET %s failed: %r", url, e)
            return FetchResult(
                url=url,
                final_url=url,
                body="",
                status_code=0,
                error=str(e) or e.__class__.__name__,
            )
