"""
Result collector: accumulates page outcomes into a :class:`CrawlResult`.
"""
from __future__ import annotations

from typing import List, Optional

from page_finder.crawler.models import CrawlResult, OutcomeStatus, PageOutcome
from page_finder.errors import CrawlerStateError

__all__ = ("ResultCollector",)


class ResultCollector:
    """Keeps matched/unmatched URLs in the order outcomes were recorded."""

    def __init__(self) -> None:
        self._matched: List[str] = []
        self._unmatched: List[str] = []
        self._failed: List[str] = []
        self._final: Optional[CrawlResult] = None

    def record(self, outcome: PageOutcome) -> None:
        if self._final is not None:
            raise CrawlerStateError("collector already finalized")
        if outcome.status is OutcomeStatus.MATCHED:
            self._matched.append(outcome.url)
        elif outcome.status is OutcomeStatus.UNMATCHED:
            self._unmatched.append(outcome.url)
        else:
            self._failed.append(outcome.url)

    def snapshot(self) -> CrawlResult:
        """Current totals; used for live progress reporting."""
        if self._final is not None:
            return self._final
        return CrawlResult(
            matched=tuple(self._matched),
            unmatched=tuple(self._unmatched),
            failed=len(self._failed),
            total_visited=len(self._matched) + len(self._unmatched) + len(self._failed),
            failed_urls=tuple(self._failed),
        )

    def finalize(self) -> CrawlResult:
        if self._final is None:
            self._final = self.snapshot()
        return self._final
