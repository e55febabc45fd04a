"""
Visited set: the crawl engine's only deduplication primitive.
"""
from __future__ import annotations

import threading
from typing import Set


class VisitedSet:
    """Grow-only set of claimed crawl targets.

    :meth:`claim` is the single accessor; there is intentionally no ``contains``
    so that callers cannot split the test from the insert.
    """

    def __init__(self) -> None:
        self._claimed: Set[str] = set()
        self._lock = threading.Lock()

    def claim(self, target: str) -> bool:
        """Insert *target* if absent. True means the caller now owns crawling it."""
        with self._lock:
            if target in self._claimed:
                return False
            self._claimed.add(target)
            return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._claimed)
