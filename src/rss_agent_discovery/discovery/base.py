"""Base class for feed candidate discovery."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FEED_TITLE = "RSS Feed"


class FeedKind(str, Enum):
    """Feed format."""

    RSS = "rss"
    ATOM = "atom"
    UNKNOWN = "unknown"


class Feed(BaseModel):
    """A feed location, either a candidate or a confirmed feed."""

    model_config = ConfigDict(frozen=True)

    url: str
    title: str = DEFAULT_FEED_TITLE
    kind: FeedKind = Field(default=FeedKind.UNKNOWN, serialization_alias="type")


class BaseDiscoverer(ABC):
    """Abstract base class for candidate discovery strategies.

    Strategies are pure HTML/URL transformations and never touch the network.
    """

    def __init__(self, base_url: str):
        # The page's effective URL (after redirects); relative hrefs resolve against it
        self.base_url = base_url
        self.diagnostics: list[str] = []

    @abstractmethod
    def discover(self, html: str) -> Iterator[Feed]:
        """Yield candidate feeds for the page."""
        ...
