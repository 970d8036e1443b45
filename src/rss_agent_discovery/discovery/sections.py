"""Find same-site blog/news sections that may declare their own feeds."""

import logging

from bs4 import BeautifulSoup

from rss_agent_discovery.config import DiscoveryConfig
from rss_agent_discovery.utils.url_utils import is_same_origin, make_absolute, url_path

logger = logging.getLogger(__name__)

BLOG_KEYWORDS = [
    "blog", "news", "articles", "posts", "updates",
    "journal", "insights", "stories", "press", "medium",
    "substack", "the-edge", "engineering-blog", "dev",
    "engineering", "developers", "community",
]

COMMON_BLOG_PATHS = [
    "/blog",
    "/news",
    "/articles",
    "/posts",
    "/updates",
    "/journal",
    "/insights",
    "/stories",
    "/press",
    "/medium",
    "/substack",
    "/the-edge",
    "/engineering-blog",
    "/engineering",
    "/developers",
    "/dev",
    "/community",
]

MAX_SECTION_DEPTH = 3  # deeper links never yield a section root on their own


class BlogSectionFinder:
    """Pick up to ``max_blog_sections`` section roots for a site."""

    def __init__(self, base_url: str, config: DiscoveryConfig):
        self.base_url = base_url
        self.config = config

    def find(self, html: str | None) -> list[str]:
        """Return section paths, heuristic matches first, then fallbacks.

        An explicit ``blog_section_paths`` override replaces the heuristic
        entirely. Without HTML only the fallback list is used.
        """
        override = self.config.blog_section_paths
        sections: list[str] = []

        if html and override is None:
            sections = self.extract_sections(html)

        if not sections or override is not None:
            for path in override if override is not None else COMMON_BLOG_PATHS:
                if path not in sections:
                    sections.append(path)

        return sections[: self.config.max_blog_sections]

    def extract_sections(self, html: str) -> list[str]:
        """Derive section roots from same-origin anchors whose text or path looks bloggy."""
        soup = BeautifulSoup(html, "lxml")

        links: dict[str, str] = {}  # path -> lower-cased anchor text of its first link
        for a in soup.select("a[href]"):
            try:
                absolute = make_absolute(self.base_url, a["href"])
            except ValueError:
                logger.debug("Ignoring unparseable anchor href %r", a["href"])
                continue
            if not is_same_origin(absolute, self.base_url):
                continue
            links.setdefault(url_path(absolute), a.get_text().lower().strip())

        sections: list[str] = []
        seen_paths: set[str] = set()
        for path, text in links.items():
            if path in seen_paths:
                continue

            lower_path = path.lower()
            if not any(k in text or k in lower_path for k in BLOG_KEYWORDS):
                continue
            if not path.startswith("/") or path == "/":
                continue

            parts = [p for p in path.split("/") if p]
            if not 1 <= len(parts) <= MAX_SECTION_DEPTH:
                continue

            root = "/" + parts[0]
            if root not in seen_paths:
                sections.append(root)
                seen_paths.add(root)
                seen_paths.add(path)

        return sections
