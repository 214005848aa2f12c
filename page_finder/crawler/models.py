"""
Data models for the PageFinder crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

__all__ = (
    "ByClass",
    "ByString",
    "SearchCriterion",
    "OutcomeStatus",
    "ErrorKind",
    "PageOutcome",
    "CrawlResult",
    "CrawlState",
)


@dataclass(frozen=True, slots=True)
class ByClass:
    """Page matches when any element carries the CSS class *name*."""

    name: str

    def describe(self) -> str:
        return f"class '{self.name}'"


@dataclass(frozen=True, slots=True)
class ByString:
    """Page matches when its visible text contains *term* verbatim."""

    term: str

    def describe(self) -> str:
        return f"text '{self.term}'"


SearchCriterion = Union[ByClass, ByString]


class OutcomeStatus(str, Enum):
    MATCHED = "matched"
    UNMATCHED = "unmatched"
    FAILED = "failed"


class ErrorKind(str, Enum):
    NETWORK = "network"
    PARSE = "parse"


class CrawlState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    DONE = "done"


@dataclass(frozen=True, slots=True)
class PageOutcome:
    """Classification of one dequeued URL."""

    url: str
    status: OutcomeStatus
    error: Optional[ErrorKind] = None
    detail: Optional[str] = None

    @classmethod
    def matched(cls, url: str) -> PageOutcome:
        return cls(url, OutcomeStatus.MATCHED)

    @classmethod
    def unmatched(cls, url: str) -> PageOutcome:
        return cls(url, OutcomeStatus.UNMATCHED)

    @classmethod
    def failed(cls, url: str, error: ErrorKind, detail: Optional[str] = None) -> PageOutcome:
        return cls(url, OutcomeStatus.FAILED, error, detail)


@dataclass(frozen=True, slots=True)
class CrawlResult:
    """Aggregate of a crawl: matched/unmatched URLs in visitation order plus counters."""

    matched: Tuple[str, ...] = ()
    unmatched: Tuple[str, ...] = ()
    failed: int = 0
    total_visited: int = 0
    failed_urls: Tuple[str, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "matched": list(self.matched),
            "unmatched": list(self.unmatched),
            "failed": self.failed,
            "failed_urls": list(self.failed_urls),
            "total_visited": self.total_visited,
        }
