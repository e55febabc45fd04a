"""
Outstanding-work counter for a dynamically growing tree of crawl tasks.

Semantics follow :class:`asyncio.Queue`'s ``task_done``/``join`` pair: every
registered unit must be marked done, and :meth:`TaskTracker.wait` returns once
the count drops to zero. Children are registered synchronously inside their
parent, so the count cannot reach zero while a parent is still spawning.
"""
from __future__ import annotations

import asyncio
from typing import Any, Coroutine, List, Set

from site_mirror.logger import logger


class TaskTracker:
    """Registers spawned tasks and signals when all of them have finished."""

    def __init__(self) -> None:
        self._pending = 0
        self._idle = asyncio.Event()
        self._idle.set()
        self._tasks: Set[asyncio.Task[None]] = set()
        self._errors: List[BaseException] = []
        self.spawned = 0

    @property
    def pending(self) -> int:
        return self._pending

    def add(self) -> None:
        """Register one unit of outstanding work."""
        self._pending += 1
        self._idle.clear()

    def done(self) -> None:
        """Mark one unit finished."""
        if self._pending <= 0:
            raise ValueError("done() called too many times")
        self._pending -= 1
        if self._pending == 0:
            self._idle.set()

    def spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        """Register *coro* and schedule it as a task."""
        self.add()
        self.spawned += 1
        task = asyncio.create_task(self._run(coro))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, coro: Coroutine[Any, Any, None]) -> None:
        try:
            await coro
        except Exception as exc:
            logger.exception("Crawl task crashed: %s", exc)
            self._errors.append(exc)
        finally:
            self.done()

    async def wait(self) -> None:
        """Block until every registered unit is done.

        Re-raises the first unexpected task exception, after all work finished.
        """
        await self._idle.wait()
        if self._errors:
            raise self._errors[0]
