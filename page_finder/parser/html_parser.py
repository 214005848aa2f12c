"""HTML parsing utilities for PageFinder.

:func:`parse_html` turns raw markup into a :class:`ParsedPage`, the only view
of a document the crawler core works with:

* ``has_class(name)`` — element/class query used by the class matcher.
* ``text`` — flattened visible text, used by the substring matcher.
* ``hrefs()`` — raw ``href`` values of anchor-like elements in document order.

Nothing here touches the network, so pages can be built from static fixtures.
"""
from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import NavigableString, PreformattedString, Tag

from page_finder.errors import ParseError

__all__: Sequence[str] = ("ParsedPage", "parse_html")

#: elements whose text never reaches the reader
_INVISIBLE: frozenset[str] = frozenset(("script", "style", "noscript", "template"))

#: elements that carry navigable ``href`` attributes
_ANCHORS: list[str] = ["a", "area"]


@dataclass(eq=False)
class ParsedPage:
    """Parsed document plus its pre-computed visible text."""

    soup: BeautifulSoup
    text: str

    def has_class(self, name: str) -> bool:
        """Return True if at least one element carries the class token *name*."""
        return self.soup.find(class_=name) is not None

    def hrefs(self) -> Iterator[str]:
        """Yield ``href`` values of ``<a>``/``<area>`` elements, skipping ones without it."""
        for tag in self.soup.find_all(_ANCHORS, href=True):
            if not isinstance(tag, Tag):
                continue
            href = tag.get("href")
            if isinstance(href, str):
                yield href


def _visible_text(soup: BeautifulSoup) -> str:
    parts: list[str] = []
    for node in soup.find_all(string=True):
        # comments, doctypes, CDATA and processing instructions
        if not isinstance(node, NavigableString) or isinstance(node, PreformattedString):
            continue
        if any(parent.name in _INVISIBLE for parent in node.parents):
            continue
        parts.append(str(node))
    return "".join(parts)


def parse_html(raw: str) -> ParsedPage:
    """Parse raw HTML into a :class:`ParsedPage`.

    Raises :class:`~page_finder.errors.ParseError` if the parser rejects the
    markup outright.
    """
    try:
        soup = BeautifulSoup(raw, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseError(str(exc)) from exc
    return ParsedPage(soup=soup, text=_visible_text(soup))
