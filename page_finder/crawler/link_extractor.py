# page_finder/crawler/link_extractor.py
"""
Link extraction for PageFinder.
"""
from __future__ import annotations

from typing import List

from page_finder.crawler.scope import normalize_link
from page_finder.errors import LinkResolutionError
from page_finder.logger import logger
from page_finder.parser.html_parser import ParsedPage


def extract_links(page: ParsedPage, page_url: str) -> List[str]:
    """
    Return absolute URLs of every anchor on *page*, in document order.

    Unresolvable hrefs are dropped; duplicates are kept, the frontier
    deduplicates.
    """
    links: List[str] = []
    for href in page.hrefs():
        try:
            links.append(normalize_link(href, page_url))
        except LinkResolutionError as exc:
            logger.debug("Skipping link on %s: %s", page_url, exc)
    return links
