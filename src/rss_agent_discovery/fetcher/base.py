"""Base class for fetchers."""

from abc import ABC, abstractmethod

from pydantic import BaseModel

from rss_agent_discovery.config import FetcherConfig

TIMEOUT_ERROR = "Timeout"


class FetchResult(BaseModel):
    """Result of fetching a URL."""

    url: str
    final_url: str  # After redirects
    body: str
    status_code: int
    content_type: str = ""
    error: str | None = None

    @property
    def success(self) -> bool:
        return 200 <= self.status_code < 300 and not self.error

    def describe_failure(self) -> str:
        """Short human-readable reason for an unsuccessful fetch."""
        if self.error:
            return self.error
        return f"HTTP {self.status_code}"


class BaseFetcher(ABC):
    """Abstract base class for fetchers.

    Implementations never raise for network or HTTP failures; they report them
    through ``FetchResult.error`` and ``status_code`` instead. Cancellation is
    not caught, so a caller's deadline aborts in-flight requests.
    """

    def __init__(self, config: FetcherConfig):
        self.config = config

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """Fetch a URL and return its body."""
        pass

    @abstractmethod
    async def __aenter__(self):
        """Async context manager entry."""
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        pass
