"""
Admission gate: a fixed pool of permits bounding simultaneous fetches.
"""
from __future__ import annotations

import asyncio


class AdmissionGate:
    """Bounded-capacity permit pool on top of :class:`asyncio.Semaphore`.

    Every successful :meth:`acquire` must be paired with exactly one
    :meth:`release`; use ``async with gate:`` to get that on every exit path.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._semaphore = asyncio.Semaphore(capacity)
        self._in_flight = 0
        self.peak = 0

    @property
    def in_flight(self) -> int:
        return self._in_flight

    async def acquire(self) -> None:
        """Wait for a free permit. Never times out."""
        await self._semaphore.acquire()
        self._in_flight += 1
        if self._in_flight > self.peak:
            self.peak = self._in_flight

    def release(self) -> None:
        if self._in_flight == 0:
            raise RuntimeError("release() called without a held permit")
        self._in_flight -= 1
        self._semaphore.release()

    async def __aenter__(self) -> AdmissionGate:
        await self.acquire()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.release()
