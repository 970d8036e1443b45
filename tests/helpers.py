"""Shared fixtures: canned feed documents and an in-memory HTTP transport."""

import httpx

from rss_agent_discovery.config import FetcherConfig
from rss_agent_discovery.fetcher import HttpFetcher

RSS_DOC = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example</title>
  </channel>
</rss>
"""

ATOM_DOC = """<?xml version="1.0"?><feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example</title>
</feed>
"""


def rss_response(body: str = RSS_DOC) -> httpx.Response:
    return httpx.Response(200, text=body, headers={"content-type": "application/rss+xml"})


def atom_response(body: str = ATOM_DOC) -> httpx.Response:
    return httpx.Response(200, text=body, headers={"content-type": "application/atom+xml"})


def html_response(body: str) -> httpx.Response:
    return httpx.Response(200, html=body)


def route_key(url: str | httpx.URL) -> str:
    url = httpx.URL(url)
    return f"{url.scheme}://{url.host}{url.path or '/'}"


def make_transport(routes: dict, seen: list | None = None) -> httpx.MockTransport:
    """Serve ``routes`` (url -> Response, Exception or async callable); anything else is a 404."""
    table = {route_key(url): route for url, route in routes.items()}

    async def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        route = table.get(route_key(request.url))
        if route is None:
            return httpx.Response(404, text="not found")
        if isinstance(route, Exception):
            raise route
        if callable(route):
            return await route(request)
        # a fresh copy per request; Response objects carry per-request state
        return httpx.Response(route.status_code, headers=route.headers, content=route.content)

    return httpx.MockTransport(handler)


def fetcher_factory(routes: dict, seen: list | None = None):
    """A fetcher factory whose clients all talk to the same in-memory routes."""
    return lambda: HttpFetcher(FetcherConfig(), transport=make_transport(routes, seen))
