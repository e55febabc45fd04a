"""
Data models for the SiteMirror crawler.
"""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional


class TaskOutcome(str, Enum):
    """Terminal state of one crawl task."""

    FETCHED = "fetched"
    FETCH_FAILED = "fetch_failed"
    SKIPPED_DEPTH = "skipped_depth"
    SKIPPED_VISITED = "skipped_visited"


@dataclass(slots=True)
class FetchResult:
    """Raw response of one fetch: requested URL, URL after redirects, status, headers, body."""

    url: str
    final_url: str
    status: int
    headers: Mapping[str, str]
    body: bytes


@dataclass(slots=True)
class PageRecord:
    url: str
    depth: int
    status: int
    path: Optional[str]
    links_found: int = 0
    links_admitted: int = 0


@dataclass(slots=True)
class ErrorRecord:
    url: str
    kind: str
    message: str


@dataclass(slots=True)
class CrawlReport:
    """Summary of one crawl run, filled in by the tasks as they finish."""

    seed: str
    output_dir: str
    duration: float = 0.0
    pages: List[PageRecord] = field(default_factory=list)
    errors: List[ErrorRecord] = field(default_factory=list)
    outcomes: Dict[str, int] = field(default_factory=dict)
    tasks_spawned: int = 0
    peak_in_flight: int = 0

    def record_page(self, page: PageRecord) -> None:
        self.pages.append(page)

    def record_error(self, url: str, kind: str, message: str) -> None:
        self.errors.append(ErrorRecord(url=url, kind=kind, message=message))

    def record_outcome(self, outcome: TaskOutcome) -> None:
        self.outcomes[outcome.value] = self.outcomes.get(outcome.value, 0) + 1

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["duration"] = round(self.duration, 3)
        return data

    def json(self, *, pretty: bool = False) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
