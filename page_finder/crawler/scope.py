"""
URL scoping and link normalization.

A crawl never leaves its :class:`CrawlScope`: every URL admitted to the
frontier starts with ``scope.url``. A strict scope additionally requires the
same scheme, host and port and a path-segment boundary, so a scope of
``https://example.com`` admits neither ``https://example.com.evil.test`` nor
``https://example.com/docsx`` when scoped to ``/docs``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple
from urllib.parse import SplitResult, urljoin, urlsplit

from page_finder.errors import LinkResolutionError

__all__ = ("CrawlScope", "normalize_link", "is_in_scope")

_HTTP_SCHEMES: Tuple[str, ...] = ("http", "https")


@dataclass(frozen=True, slots=True)
class CrawlScope:
    """Immutable crawl boundary: the validated start URL used as a prefix."""

    url: str
    strict: bool = True

    def contains(self, candidate: str) -> bool:
        return is_in_scope(candidate, self)


def _split_checked(url: str) -> SplitResult:
    parts = urlsplit(url)
    # .port raises ValueError for garbage like "host:abc"
    parts.port
    return parts


def normalize_link(raw_link: str, base_url: str) -> str:
    """
    Turn an href into an absolute http(s) URL.

    Links that already carry an http/https scheme are returned unchanged;
    everything else is resolved against *base_url* with the usual relative URL
    rules (query and fragment are kept). Raises :class:`LinkResolutionError`
    for links that cannot be resolved or point to a non-http scheme.
    """
    link = raw_link.strip()
    try:
        parsed = _split_checked(link)
        if parsed.scheme.lower() in _HTTP_SCHEMES and parsed.netloc:
            return link
        absolute = urljoin(base_url, link)
        resolved = _split_checked(absolute)
    except ValueError as exc:
        raise LinkResolutionError(raw_link, str(exc)) from exc

    if resolved.scheme.lower() not in _HTTP_SCHEMES:
        raise LinkResolutionError(raw_link, f"unsupported scheme {resolved.scheme!r}")
    if not resolved.netloc:
        raise LinkResolutionError(raw_link, "no host")
    return absolute


def _origin(parts: SplitResult) -> Tuple[str, Optional[str], Optional[int]]:
    return parts.scheme.lower(), parts.hostname, parts.port


def is_in_scope(candidate: str, scope: CrawlScope) -> bool:
    """Check whether *candidate* lies inside *scope*."""
    if not candidate.startswith(scope.url):
        return False
    if not scope.strict:
        return True

    try:
        cand = _split_checked(candidate)
        root = _split_checked(scope.url)
    except ValueError:
        return False
    if _origin(cand) != _origin(root):
        return False

    base_path = root.path.rstrip("/")
    if not base_path:
        return True
    return cand.path == root.path or cand.path == base_path or cand.path.startswith(base_path + "/")
