"""Tests for the feed presence heuristic."""

from rss_agent_discovery.validator import FeedValidator

from tests.helpers import ATOM_DOC, RSS_DOC


class TestFeedValidator:
    def test_rss_with_rss_content_type(self):
        assert FeedValidator.is_feed(RSS_DOC, "application/rss+xml")

    def test_atom_with_atom_content_type(self):
        body = '<?xml version="1.0"?><feed xmlns="http://www.w3.org/2005/Atom"></feed>'
        assert FeedValidator.is_feed(body, "application/atom+xml")
        assert FeedValidator.is_feed(ATOM_DOC, "application/atom+xml; charset=utf-8")

    def test_html_content_type_rejected_even_with_rss_marker(self):
        body = "<html><body><p>Check out our <rss> feed!</p></body></html>"
        assert not FeedValidator.is_feed(body, "text/html")
        assert not FeedValidator.is_feed(RSS_DOC, "text/html; charset=utf-8")

    def test_xml_declaration_is_enough_without_content_type(self):
        assert FeedValidator.is_feed(RSS_DOC, "")

    def test_xml_content_type_is_enough_without_declaration(self):
        assert FeedValidator.is_feed('<rss version="2.0"></rss>', "application/xml")
        assert FeedValidator.is_feed('<feed xmlns="http://www.w3.org/2005/Atom"/>', "text/xml")

    def test_neither_declaration_nor_xml_type(self):
        assert not FeedValidator.is_feed('<rss version="2.0"></rss>', "text/plain")

    def test_missing_feed_root(self):
        assert not FeedValidator.is_feed('<?xml version="1.0"?><urlset></urlset>', "application/xml")

    def test_marker_match_is_case_sensitive(self):
        assert not FeedValidator.is_feed('<?xml version="1.0"?><RSS></RSS>', "application/xml")
