from __future__ import annotations

import time
from contextlib import nullcontext
from typing import Optional
from urllib.parse import urlsplit

from aiohttp import ClientSession, ClientTimeout, TCPConnector

from site_mirror.crawler.fetcher import Fetcher
from site_mirror.crawler.gate import AdmissionGate
from site_mirror.crawler.link_extractor import extract_links
from site_mirror.crawler.models import CrawlReport, FetchResult, PageRecord, TaskOutcome
from site_mirror.crawler.storage import PageStore
from site_mirror.crawler.tracker import TaskTracker
from site_mirror.crawler.urls import is_admissible, parse_seed
from site_mirror.crawler.visited import VisitedSet
from site_mirror.errors import FetchError, PersistError
from site_mirror.logger import get_logger

__all__ = ("AsyncCrawler",)


class AsyncCrawler:
    """Same-host recursive crawler: one task per claimed URL, bounded fetch concurrency.

    Each task runs claim -> fetch -> persist -> extract -> spawn. Collaborators
    (fetcher, store, visited set, gate) can be injected; otherwise they are
    built from the config, and ``async with`` opens the HTTP session.
    """

    def __init__(
        self,
        config,
        *,
        fetcher: Optional[Fetcher] = None,
        store: Optional[PageStore] = None,
        visited: Optional[VisitedSet] = None,
        gate: Optional[AdmissionGate] = None,
    ) -> None:
        self.config = config
        self.seed = parse_seed(config.base_url)
        self.root_host = urlsplit(self.seed).hostname or ""
        self.fetcher = fetcher
        self.store = store if store is not None else PageStore(config.output_dir, self.root_host)
        self.visited = visited if visited is not None else VisitedSet()
        self.gate = gate if gate is not None else AdmissionGate(config.max_concurrency)
        self.session: Optional[ClientSession] = None
        self.logger = get_logger("crawler")
        self._tracker: Optional[TaskTracker] = None
        self._report: Optional[CrawlReport] = None

    async def __aenter__(self) -> AsyncCrawler:
        if self.fetcher is None:
            self.session = ClientSession(
                timeout=ClientTimeout(total=self.config.timeout),
                headers={"User-Agent": self.config.user_agent},
                connector=TCPConnector(limit=self.config.max_concurrency),
                raise_for_status=False,
            )
            self.fetcher = Fetcher(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self) -> CrawlReport:
        """Crawl from the seed until every spawned task has finished."""
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        if self._tracker is not None:
            raise RuntimeError("AsyncCrawler instances are single-use")

        self.logger.info("Starting crawl of %s", self.seed)
        start = time.monotonic()
        report = CrawlReport(seed=self.seed, output_dir=str(self.store.directory))
        self._report = report
        self._tracker = TaskTracker()

        self._tracker.spawn(self._crawl_page(self.seed, 0))
        try:
            await self._tracker.wait()
        finally:
            report.duration = time.monotonic() - start
            report.tasks_spawned = self._tracker.spawned
            report.peak_in_flight = self.gate.peak

        self.logger.info(
            "Crawl completed in %.2f s: %d pages, %d errors",
            report.duration,
            len(report.pages),
            len(report.errors),
        )
        self.logger.info("Pages saved in %s", report.output_dir)
        return report

    async def _crawl_page(self, target: str, depth: int) -> None:
        report = self._report
        if report is None or self._tracker is None:
            raise RuntimeError("Crawl not started")

        if depth > self.config.max_depth:
            report.record_outcome(TaskOutcome.SKIPPED_DEPTH)
            return
        if not self.visited.claim(target):
            self.logger.debug("Already visited: %s", target)
            report.record_outcome(TaskOutcome.SKIPPED_VISITED)
            return

        hold_for_task = self.config.permit_scope == "task"
        task_permit = self.gate if hold_for_task else nullcontext()
        fetch_permit = nullcontext() if hold_for_task else self.gate

        async with task_permit:
            try:
                async with fetch_permit:
                    result = await self.fetcher.fetch(target)
            except FetchError as exc:
                self.logger.warning("Error fetching %s", exc)
                report.record_error(target, "fetch", str(exc))
                report.record_outcome(TaskOutcome.FETCH_FAILED)
                return

            stored = await self._persist(target, result)
            links = extract_links(result.body, result.final_url)
            admitted = [link for link in links if is_admissible(link, self.root_host)]
            report.record_page(
                PageRecord(
                    url=target,
                    depth=depth,
                    status=result.status,
                    path=stored,
                    links_found=len(links),
                    links_admitted=len(admitted),
                )
            )
            report.record_outcome(TaskOutcome.FETCHED)
            self.logger.debug(
                "Fetched %s (depth %d, HTTP %d): %d links, %d admitted",
                target, depth, result.status, len(links), len(admitted),
            )
            for link in admitted:
                self._tracker.spawn(self._crawl_page(link, depth + 1))

    async def _persist(self, target: str, result: FetchResult) -> Optional[str]:
        if self._report is None:
            raise RuntimeError("Crawl not started")
        try:
            path = await self.store.save(target, result.body)
        except PersistError as exc:
            self.logger.error("Error saving page %s", exc)
            self._report.record_error(target, "persist", str(exc))
            return None
        return str(path)
