"""
Content matching: does a parsed page satisfy the search criterion?

New criteria are added by registering another implementation of
:func:`_match` for their type; the crawler only ever calls :func:`matches`.
"""
from __future__ import annotations

from functools import singledispatch

from page_finder.crawler.models import ByClass, ByString, SearchCriterion
from page_finder.parser.html_parser import ParsedPage

__all__ = ("matches",)


@singledispatch
def _match(criterion: object, page: ParsedPage) -> bool:
    raise TypeError(f"Unsupported search criterion: {type(criterion).__name__}")


@_match.register
def _(criterion: ByClass, page: ParsedPage) -> bool:
    return page.has_class(criterion.name)


@_match.register
def _(criterion: ByString, page: ParsedPage) -> bool:
    return criterion.term in page.text


def matches(page: ParsedPage, criterion: SearchCriterion) -> bool:
    """Pure predicate over (*page*, *criterion*)."""
    return _match(criterion, page)
