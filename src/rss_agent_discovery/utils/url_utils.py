"""URL manipulation utilities."""

from urllib.parse import urljoin, urlparse

_DEFAULT_PORTS = {"http": 80, "https": 443}


def make_absolute(base_url: str, href: str) -> str:
    """Resolve a potentially relative URL against ``base_url``.

    Raises ValueError when either URL cannot be parsed (e.g. a broken IPv6 host).
    """
    absolute = urljoin(base_url, href.strip())
    # urljoin is lenient; parsing the result surfaces malformed netlocs
    parsed = urlparse(absolute)
    _ = parsed.port  # raises ValueError on a non-numeric port
    return absolute


def get_origin(url: str) -> tuple[str, str, int | None]:
    """Return the (scheme, host, port) origin of a URL, with default ports filled in."""
    parsed = urlparse(url)
    scheme = parsed.scheme.lower()
    port = parsed.port or _DEFAULT_PORTS.get(scheme)
    return scheme, (parsed.hostname or "").lower(), port


def is_same_origin(url1: str, url2: str) -> bool:
    """Check if two URLs share scheme, host and port."""
    return get_origin(url1) == get_origin(url2)


def url_path(url: str) -> str:
    """Path component of a URL; an empty path is reported as ``/``."""
    return urlparse(url).path or "/"


def last_path_segment(url: str) -> str:
    """The text after the final ``/`` of a URL, which may be empty."""
    return url.rsplit("/", 1)[-1]
