"""Exception hierarchy for PageFinder."""
from __future__ import annotations

__all__ = (
    "PageFinderError",
    "NetworkError",
    "LinkResolutionError",
    "ParseError",
    "CrawlerStateError",
)


class PageFinderError(Exception):
    """Base class for all PageFinder errors."""


class NetworkError(PageFinderError):
    """A page could not be fetched (timeout, DNS, connection reset, non-2xx status)."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class LinkResolutionError(PageFinderError, ValueError):
    """An href could not be turned into an absolute http(s) URL."""

    def __init__(self, link: str, reason: str) -> None:
        super().__init__(f"cannot resolve {link!r}: {reason}")
        self.link = link
        self.reason = reason


class CrawlerStateError(PageFinderError, RuntimeError):
    """Operation not allowed in the current crawl state."""


class ParseError(PageFinderError):
    """Fetched content was rejected by the HTML parser."""
