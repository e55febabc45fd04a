# File: site_mirror/engine.py
"""site_mirror.engine: Запуск обхода по готовой конфигурации."""

from __future__ import annotations

from site_mirror.config import CrawlerConfig
from site_mirror.crawler.crawler import AsyncCrawler
from site_mirror.crawler.models import CrawlReport

__all__ = ["start_crawl"]


async def start_crawl(cfg: CrawlerConfig) -> CrawlReport:
    """
    Запускает AsyncCrawler в контексте сессии и возвращает отчёт.

    Ошибка разбора стартового URL (SeedParseError) возникает до старта задач.
    """
    async with AsyncCrawler(cfg) as crawler:
        return await crawler.crawl()
