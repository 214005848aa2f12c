# File: tests/test_link_extractor.py
import pytest

from page_finder.crawler.link_extractor import extract_links
from page_finder.errors import ParseError
from page_finder.parser.html_parser import parse_html

BASE = "https://example.test/dir/"


def test_malformed_href_is_dropped_others_kept():
    page = parse_html('<a href="/one">1</a><a href="http://[::1">bad</a><a href="two">2</a>')
    assert extract_links(page, BASE) == ["https://example.test/one", "https://example.test/dir/two"]


def test_document_order_and_duplicates_are_preserved():
    html = """
    <body>
      <a href="b">B</a>
      <map><area href="/map-target" alt="x"></map>
      <a>no href</a>
      <a href="a">A</a>
      <a href="b">B again</a>
    </body>
    """
    assert extract_links(parse_html(html), BASE) == [
        "https://example.test/dir/b",
        "https://example.test/map-target",
        "https://example.test/dir/a",
        "https://example.test/dir/b",
    ]


def test_non_http_links_are_skipped():
    html = '<a href="mailto:x@example.test">m</a><a href="javascript:go()">j</a><a href="https://other.test/">o</a>'
    assert extract_links(parse_html(html), BASE) == ["https://other.test/"]


def test_page_without_anchors_yields_nothing():
    assert extract_links(parse_html("<p>plain</p>"), BASE) == []


def test_visible_text_skips_scripts_styles_and_comments():
    page = parse_html(
        "<html><head><style>.x{}</style><script>var s = 1;</script></head>"
        "<body><!-- hidden --><p>Hello <b>world</b></p><noscript>nojs</noscript></body></html>"
    )
    assert page.text == "Hello world"


def test_parse_error_wraps_rejected_markup(monkeypatch):
    from bs4.builder import ParserRejectedMarkup

    import page_finder.parser.html_parser as html_parser

    def reject(*args, **kwargs):
        raise ParserRejectedMarkup("nope")

    monkeypatch.setattr(html_parser, "BeautifulSoup", reject)
    with pytest.raises(ParseError):
        html_parser.parse_html("<p>x</p>")
