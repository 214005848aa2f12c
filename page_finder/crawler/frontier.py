"""
Frontier and visited set: breadth-first traversal with at-most-once visitation.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, FrozenSet, List, Optional, Set

__all__ = ("Frontier",)


class Frontier:
    """
    FIFO queue of pending URLs paired with the set of URLs ever admitted.

    A URL is marked visited when it is enqueued, before anyone can fetch it,
    so it can be handed out at most once. All methods are synchronous: callers
    running on an event loop mutate the frontier only between awaits, which
    keeps check-and-insert atomic.
    """

    def __init__(self) -> None:
        self._queue: Deque[str] = deque()
        self._visited: Set[str] = set()
        self._dequeued = 0

    def enqueue_seed(self, url: str) -> None:
        if self._visited:
            raise ValueError("seed must be the first URL offered")
        self.offer(url)

    def offer(self, url: str) -> bool:
        """Admit *url* unless already visited. Returns True if it was enqueued."""
        if url in self._visited:
            return False
        self._visited.add(url)
        self._queue.append(url)
        return True

    def dequeue(self) -> Optional[str]:
        """Pop the oldest pending URL, or None when nothing is pending."""
        if not self._queue:
            return None
        self._dequeued += 1
        return self._queue.popleft()

    def take(self, limit: int) -> List[str]:
        """Dequeue up to *limit* URLs in FIFO order."""
        batch: List[str] = []
        while len(batch) < limit:
            url = self.dequeue()
            if url is None:
                break
            batch.append(url)
        return batch

    @property
    def visited(self) -> FrozenSet[str]:
        return frozenset(self._visited)

    @property
    def pending(self) -> int:
        return len(self._queue)

    @property
    def dequeued(self) -> int:
        return self._dequeued

    def __contains__(self, url: object) -> bool:
        return url in self._visited

    def __len__(self) -> int:
        return len(self._queue)
