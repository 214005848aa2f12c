"""
Модуль-обёртка для функции запуска обхода.
"""
from typing import Optional

from page_finder.config import CrawlerConfig
from page_finder.crawler.crawler import Crawler, ProgressCallback
from page_finder.crawler.models import CrawlResult


async def start_scan(cfg: CrawlerConfig, on_progress: Optional[ProgressCallback] = None) -> CrawlResult:
    """
    Запускает краулер в контексте и возвращает итоговый CrawlResult.

    Parameters
    ----------
    cfg : CrawlerConfig
        Конфигурация обхода.
    on_progress : callable, optional
        Вызывается после каждой страницы с (PageOutcome, CrawlResult).

    Returns
    -------
    CrawlResult
        Списки найденных и не найденных страниц, число ошибок.
    """
    async with Crawler(cfg, on_progress=on_progress) as crawler:
        return await crawler.crawl()

__all__ = ["start_scan"]
