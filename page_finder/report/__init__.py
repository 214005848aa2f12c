"""page_finder.report: report payloads shared by the JSON and HTML renderers and the CLI."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from page_finder.config import CrawlerConfig
from page_finder.crawler.models import CrawlResult

#: templates shipped with the package
TEMPLATE_DIR: Path = Path(__file__).with_name("templates")


def build_payload(result: CrawlResult, config: CrawlerConfig) -> Dict[str, Any]:
    """Serializable view of a finished crawl, tagged with what was searched for."""
    payload: Dict[str, Any] = {
        "start_url": config.base_url,
        "criterion": config.criterion().describe(),
    }
    payload.update(result.to_dict())
    return payload


__all__ = ["TEMPLATE_DIR", "build_payload"]
