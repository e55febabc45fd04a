# site_mirror/crawler/fetcher.py
"""
Fetcher module: one HTTP GET per target, no retries, no status filtering.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from site_mirror.crawler.models import FetchResult
from site_mirror.errors import FetchError


class Fetcher:
    """Thin wrapper over an aiohttp session that turns network failures into FetchError."""

    def __init__(self, session: ClientSession) -> None:
        self.session = session

    async def fetch(self, url: str) -> FetchResult:
        """
        GET *url*, following redirects, and read the whole body.

        Any HTTP status is returned as-is; error pages are content too.
        Raises FetchError on connection errors and timeouts.
        """
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                body = await resp.read()
                return FetchResult(
                    url=url,
                    final_url=str(resp.url),
                    status=resp.status,
                    headers=dict(resp.headers),
                    body=body,
                )
        except (ClientError, asyncio.TimeoutError) as exc:
            raise FetchError(url, exc) from exc
