"""site_mirror.crawler: Движок обхода и его компоненты."""

from .crawler import AsyncCrawler
from .gate import AdmissionGate
from .models import CrawlReport, FetchResult, PageRecord, TaskOutcome
from .tracker import TaskTracker
from .visited import VisitedSet

__all__ = [
    "AsyncCrawler",
    "AdmissionGate",
    "CrawlReport",
    "FetchResult",
    "PageRecord",
    "TaskOutcome",
    "TaskTracker",
    "VisitedSet",
]
