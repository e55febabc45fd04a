"""Shared test doubles for the crawler tests."""
from __future__ import annotations

import asyncio
from typing import Dict, Iterable, List

from site_mirror.crawler.models import FetchResult
from site_mirror.errors import FetchError

SITE = "https://site.com"


class FakeFetcher:
    """
    In-memory fetcher keyed by canonical URL.

    Unknown URLs and URLs listed in *failures* raise FetchError. Tracks how many
    fetches run at once so tests can check the concurrency bound.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        *,
        delay: float = 0.0,
        failures: Iterable[str] = (),
    ) -> None:
        self.pages = pages
        self.delay = delay
        self.failures = set(failures)
        self.calls: List[str] = []
        self.active = 0
        self.max_active = 0

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            await asyncio.sleep(self.delay)
            if url in self.failures or url not in self.pages:
                raise FetchError(url, "connection refused")
            return FetchResult(
                url=url,
                final_url=url,
                status=200,
                headers={"Content-Type": "text/html"},
                body=self.pages[url].encode("utf-8"),
            )
        finally:
            self.active -= 1


def links(*hrefs: str) -> str:
    """Build a small HTML page containing one anchor per href."""
    anchors = "".join(f'<a href="{h}">{h}</a>' for h in hrefs)
    return f"<html><body>{anchors}</body></html>"
