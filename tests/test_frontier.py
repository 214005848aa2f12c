# File: tests/test_frontier.py
import pytest

from page_finder.crawler.collector import ResultCollector
from page_finder.crawler.frontier import Frontier
from page_finder.crawler.models import CrawlResult, ErrorKind, PageOutcome
from page_finder.errors import CrawlerStateError


def test_seed_is_marked_visited_and_queued():
    frontier = Frontier()
    frontier.enqueue_seed("https://example.test/")
    assert "https://example.test/" in frontier
    assert frontier.pending == 1
    assert not frontier.offer("https://example.test/")


def test_seed_must_come_first():
    frontier = Frontier()
    frontier.offer("https://example.test/a")
    with pytest.raises(ValueError):
        frontier.enqueue_seed("https://example.test/")


def test_fifo_order_and_at_most_once():
    frontier = Frontier()
    frontier.enqueue_seed("s")
    assert frontier.dequeue() == "s"
    assert frontier.offer("a")
    assert frontier.offer("b")
    assert not frontier.offer("a")
    # already dequeued URLs stay visited
    assert not frontier.offer("s")
    assert frontier.dequeue() == "a"
    assert frontier.dequeue() == "b"
    assert frontier.dequeue() is None
    assert frontier.visited == {"s", "a", "b"}
    assert frontier.dequeued == 3


def test_take_batches_in_order():
    frontier = Frontier()
    for url in ("a", "b", "c"):
        frontier.offer(url)
    assert frontier.take(2) == ["a", "b"]
    assert frontier.take(2) == ["c"]
    assert frontier.take(2) == []


def test_pending_never_exceeds_unprocessed_visited():
    frontier = Frontier()
    frontier.enqueue_seed("s")
    frontier.dequeue()
    for url in ("a", "b", "a", "c", "b"):
        frontier.offer(url)
        assert len(frontier) <= len(frontier.visited) - frontier.dequeued


def test_collector_keeps_recording_order():
    collector = ResultCollector()
    collector.record(PageOutcome.unmatched("u1"))
    collector.record(PageOutcome.matched("m2"))
    collector.record(PageOutcome.failed("f", ErrorKind.NETWORK, "HTTP 500"))
    collector.record(PageOutcome.matched("m1"))
    result = collector.finalize()
    assert result == CrawlResult(
        matched=("m2", "m1"),
        unmatched=("u1",),
        failed=1,
        total_visited=4,
        failed_urls=("f",),
    )


def test_collector_rejects_records_after_finalize():
    collector = ResultCollector()
    collector.record(PageOutcome.matched("m"))
    first = collector.finalize()
    with pytest.raises(CrawlerStateError):
        collector.record(PageOutcome.matched("late"))
    assert collector.finalize() is first
    assert collector.snapshot() is first


def test_result_to_dict():
    result = CrawlResult(matched=("a",), unmatched=("b",), failed=1, total_visited=3, failed_urls=("c",))
    assert result.to_dict() == {
        "matched": ["a"],
        "unmatched": ["b"],
        "failed": 1,
        "failed_urls": ["c"],
        "total_visited": 3,
    }
