# File: tests/conftest.py
import asyncio
from collections import Counter
from collections.abc import AsyncIterator
from typing import Dict, List, Optional

import pytest
import pytest_asyncio
from aiohttp import web

from site_mirror.config import CrawlerConfig
from site_mirror.logger import configure

from helpers import SITE


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )

@pytest.fixture(autouse=True)
def project_logger():
    """Bind the project logger to the current test's stdout, before and after the test."""
    configure(level="DEBUG")
    yield
    configure(level="DEBUG")

@pytest.fixture()
def make_config(tmp_path):
    """Factory for CrawlerConfig writing into a per-test output directory."""

    def _make(base_url: str = SITE, **kwargs) -> CrawlerConfig:
        kwargs.setdefault("output_dir", tmp_path / "out")
        kwargs.setdefault("timeout", 5.0)
        return CrawlerConfig(base_url=base_url, **kwargs)

    return _make

@pytest_asyncio.fixture
async def serve_app(unused_tcp_port_factory) -> AsyncIterator:
    """Start aiohttp applications on free ports; returns their base URLs, cleans up after the test."""
    runners: List[web.AppRunner] = []

    async def _serve(app: web.Application) -> str:
        runner = web.AppRunner(app)
        await runner.setup()
        port = unused_tcp_port_factory()
        site = web.TCPSite(runner, "127.0.0.1", port)
        await site.start()
        runners.append(runner)
        return f"http://127.0.0.1:{port}"

    yield _serve
    for runner in runners:
        await runner.cleanup()

@pytest_asyncio.fixture
async def serve_site(serve_app):
    """
    Serve a dict of ``path -> html`` and count requests per path.

    Paths missing from *pages* answer 404; *statuses* overrides the status of a
    served page; *redirects* maps a path to a 302 target.
    """

    async def _serve(
        pages: Dict[str, str],
        *,
        statuses: Optional[Dict[str, int]] = None,
        redirects: Optional[Dict[str, str]] = None,
        delay: float = 0.0,
    ):
        hits: Counter = Counter()

        async def handler(request: web.Request) -> web.Response:
            hits[request.path] += 1
            if delay:
                await asyncio.sleep(delay)
            if redirects and request.path in redirects:
                raise web.HTTPFound(redirects[request.path])
            if request.path not in pages:
                raise web.HTTPNotFound()
            return web.Response(
                text=pages[request.path],
                status=(statuses or {}).get(request.path, 200),
                content_type="text/html",
            )

        app = web.Application()
        app.router.add_get("/{tail:.*}", handler)
        base = await serve_app(app)
        return base, hits

    return _serve
