# page_finder/crawler/fetcher.py
"""
Fetcher module: retrieves raw page content over HTTP with a per-request timeout.
"""
from __future__ import annotations

import asyncio
from typing import Protocol

from aiohttp import ClientError, ClientSession, ClientTimeout

from page_finder.errors import NetworkError

__all__ = ("FetchCapability", "Fetcher")


class FetchCapability(Protocol):
    """Anything that can turn a URL into raw HTML or raise NetworkError."""

    async def fetch(self, url: str) -> str:
        ...


class Fetcher:
    """Single-attempt HTTP GET over a shared aiohttp session."""

    def __init__(self, session: ClientSession, timeout: float) -> None:
        self.session = session
        self._timeout = ClientTimeout(total=timeout)

    async def fetch(self, url: str) -> str:
        """
        Fetch *url* and return its body decoded as text.

        Redirects are not followed: a 3xx is a failure like any other non-2xx
        status, so a page is only ever read from the URL that was admitted.
        Every failure (timeout, DNS, refused/reset connection, non-2xx status,
        broken payload) is reported as :class:`NetworkError`. No retries.
        """
        try:
            async with self.session.get(
                url, timeout=self._timeout, allow_redirects=False, raise_for_status=False,
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise NetworkError(url, f"HTTP {resp.status}")
                return await resp.text(errors="replace")
        except asyncio.TimeoutError as exc:
            raise NetworkError(url, "timeout") from exc
        except ClientError as exc:
            raise NetworkError(url, f"{type(exc).__name__}: {exc}") from exc
        except ValueError as exc:
            # yarl rejects URLs it cannot encode
            raise NetworkError(url, f"invalid URL: {exc}") from exc
