# === FILE: page_finder/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import time
from typing import Callable, Optional, Union

from aiohttp import ClientSession

from page_finder.config import CrawlerConfig
from page_finder.crawler.collector import ResultCollector
from page_finder.crawler.fetcher import FetchCapability, Fetcher
from page_finder.crawler.frontier import Frontier
from page_finder.crawler.link_extractor import extract_links
from page_finder.crawler.matcher import matches
from page_finder.crawler.models import CrawlResult, CrawlState, ErrorKind, PageOutcome
from page_finder.errors import CrawlerStateError, NetworkError, ParseError
from page_finder.logger import logger
from page_finder.parser.html_parser import ParsedPage, parse_html

__all__ = ("Crawler", "ProgressCallback")

ProgressCallback = Callable[[PageOutcome, CrawlResult], None]
ParseCapability = Callable[[str], ParsedPage]


class Crawler:
    """
    Breadth-first crawler that classifies every in-scope page against one criterion.

    One instance runs exactly one crawl: ``IDLE -> RUNNING -> DONE``. Up to
    ``config.concurrency`` fetches are in flight at a time; their results are
    then processed one by one in dequeue order, so the frontier is only touched
    between awaits and the outcome order is fixed for a given site.
    """

    def __init__(
        self,
        config: CrawlerConfig,
        fetcher: Optional[FetchCapability] = None,
        *,
        parser: ParseCapability = parse_html,
        on_progress: Optional[ProgressCallback] = None,
    ) -> None:
        self.config = config
        self.scope = config.scope()
        self.criterion = config.criterion()
        self.concurrency = config.concurrency
        self.state = CrawlState.IDLE
        self.result: Optional[CrawlResult] = None
        self._fetcher = fetcher
        self._parser = parser
        self._on_progress = on_progress
        self._session: Optional[ClientSession] = None

    async def __aenter__(self) -> Crawler:
        if self._fetcher is None:
            self._session = ClientSession(headers={"User-Agent": self.config.user_agent})
            self._fetcher = Fetcher(self._session, self.config.timeout)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self._session and not self._session.closed:
            await self._session.close()

    async def crawl(self) -> CrawlResult:
        """
        Run the crawl to completion and return the aggregated result.

        The crawler ends in ``DONE`` even if the progress callback raises; the
        exception propagates and :attr:`result` stays ``None``.
        """
        if self.state is not CrawlState.IDLE:
            raise CrawlerStateError(f"crawler is {self.state.value}; create a new Crawler for another run")
        fetcher = self._fetcher
        if fetcher is None:
            raise CrawlerStateError("no fetcher: use 'async with Crawler(...)' or pass one in")

        self.state = CrawlState.RUNNING
        logger.info("Crawl started: %s (looking for %s)", self.scope.url, self.criterion.describe())
        start = time.monotonic()

        frontier = Frontier()
        collector = ResultCollector()
        frontier.enqueue_seed(self.scope.url)

        try:
            while True:
                batch = frontier.take(self.concurrency)
                if not batch:
                    break
                fetched = await asyncio.gather(*(self._fetch(fetcher, url) for url in batch))
                for url, content in zip(batch, fetched):
                    outcome = self._process(url, content, frontier)
                    collector.record(outcome)
                    if self._on_progress is not None:
                        self._on_progress(outcome, collector.snapshot())
            result = self.result = collector.finalize()
        finally:
            self.state = CrawlState.DONE

        duration = time.monotonic() - start
        logger.info(
            "Crawl finished: %d pages in %.2f s (matched %d, unmatched %d, failed %d)",
            result.total_visited,
            duration,
            len(result.matched),
            len(result.unmatched),
            result.failed,
        )
        return result

    @staticmethod
    async def _fetch(fetcher: FetchCapability, url: str) -> Union[str, NetworkError]:
        try:
            return await fetcher.fetch(url)
        except NetworkError as exc:
            return exc

    def _process(self, url: str, content: Union[str, NetworkError], frontier: Frontier) -> PageOutcome:
        if isinstance(content, NetworkError):
            logger.warning("Failed %s: %s", url, content.reason)
            return PageOutcome.failed(url, ErrorKind.NETWORK, content.reason)

        try:
            page = self._parser(content)
        except ParseError as exc:
            logger.warning("Unparsable %s: %s", url, exc)
            return PageOutcome.failed(url, ErrorKind.PARSE, str(exc))

        if matches(page, self.criterion):
            logger.debug("Match: %s", url)
            outcome = PageOutcome.matched(url)
        else:
            logger.debug("No match: %s", url)
            outcome = PageOutcome.unmatched(url)

        new_links = 0
        for link in extract_links(page, url):
            if self.scope.contains(link) and frontier.offer(link):
                new_links += 1
        logger.debug("%s: +%d links, %d pending", url, new_links, frontier.pending)
        return outcome
