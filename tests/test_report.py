# File: tests/test_report.py
import json

from page_finder.config import CrawlerConfig
from page_finder.crawler.models import CrawlResult
from page_finder.report import build_payload
from page_finder.report.html_report import render_html
from page_finder.report.json_report import render_json

CONFIG = CrawlerConfig(base_url="https://example.test/", search_text="<Contact>")
RESULT = CrawlResult(
    matched=("https://example.test/a?x=1&y=2",),
    unmatched=("https://example.test/",),
    failed=0,
    total_visited=2,
)


def test_payload_describes_the_crawl():
    payload = build_payload(RESULT, CONFIG)
    assert payload["start_url"] == "https://example.test/"
    assert payload["criterion"] == "text '<Contact>'"
    assert payload["total_visited"] == 2
    assert payload["failed_urls"] == []


def test_render_json_compact_and_pretty(tmp_path):
    payload = build_payload(RESULT, CONFIG)
    compact = render_json(payload, tmp_path / "nested" / "c.json", pretty=False)
    pretty = render_json(payload, tmp_path / "p.json")

    assert "\n" not in compact.read_text(encoding="utf-8")
    assert json.loads(pretty.read_text(encoding="utf-8")) == payload
    assert pretty.read_text(encoding="utf-8").startswith("{\n  ")


def test_render_html_escapes_values(tmp_path):
    out = render_html(build_payload(RESULT, CONFIG), tmp_path / "r.html")
    html = out.read_text(encoding="utf-8")
    assert "&lt;Contact&gt;" in html
    assert "https://example.test/a?x=1&amp;y=2" in html
    assert "Failed pages" not in html


def test_render_html_custom_template(tmp_path):
    tpl_dir = tmp_path / "tpl"
    tpl_dir.mkdir()
    (tpl_dir / "report.html.j2").write_text("{{ matched | length }}/{{ total_visited }}", encoding="utf-8")
    out = render_html(build_payload(RESULT, CONFIG), tmp_path / "r.html", tpl_dir)
    assert out.read_text(encoding="utf-8") == "1/2"
