"""Discover RSS and Atom feeds for websites, reported as JSON for other programs."""

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("rss-agent-discovery")
except PackageNotFoundError:
    __version__ = "0.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
