"""Lightweight check that a fetched document really is an RSS or Atom feed."""

FEED_ROOT_MARKERS = ("<rss", "<feed")
XML_CONTENT_TYPE_MARKERS = ("xml", "rss", "atom")


class FeedValidator:
    """Tell genuine feeds apart from HTML pages that merely mention them.

    A feed must carry an ``<rss`` or ``<feed`` root marker, be XML either by
    declaration or by content type, and must not be served as ``text/html``.
    The marker test is a plain substring match, not an XML parse.
    """

    @staticmethod
    def is_feed(body: str, content_type: str) -> bool:
        has_feed_root = any(marker in body for marker in FEED_ROOT_MARKERS)
        has_xml_declaration = "<?xml" in body
        has_xml_content_type = any(m in content_type for m in XML_CONTENT_TYPE_MARKERS)
        is_html = "text/html" in content_type

        return has_feed_root and (has_xml_declaration or has_xml_content_type) and not is_html
