"""Utility functions."""

from rss_agent_discovery.utils.url_utils import (
    get_origin,
    is_same_origin,
    last_path_segment,
    make_absolute,
    url_path,
)

__all__ = [
    "get_origin",
    "is_same_origin",
    "last_path_segment",
    "make_absolute",
    "url_path",
]
