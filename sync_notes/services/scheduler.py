"""
Background maintenance.
Runs token expiry and note sweeps on independent fixed intervals.
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional

from sync_notes.exceptions import StorageError
from sync_notes.services.authorizer import Authorizer
from sync_notes.services.collector import Collector

logger = logging.getLogger(__name__)


class Scheduler:
    """Owns the two periodic maintenance tasks and their stop signal."""

    def __init__(
        self,
        authorizer: Authorizer,
        collector: Collector,
        *,
        token_ttl: float,
        token_interval: float,
        retention: float,
        sweep_interval: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.authorizer = authorizer
        self.collector = collector
        self.token_ttl = token_ttl
        self.token_interval = token_interval
        self.retention = retention
        self.sweep_interval = sweep_interval
        self._clock = clock
        self._stopping = asyncio.Event()
        self._tasks: List[asyncio.Task] = []

    @property
    def running(self) -> bool:
        return any(not task.done() for task in self._tasks)

    async def expire_tokens(self) -> int:
        """Run one token expiry pass."""
        return self.authorizer.expire_older_than(self._clock(), self.token_ttl)

    async def sweep_notes(self) -> Optional[List[str]]:
        """Run one note sweep. Returns the deleted names, or None if the sweep failed."""
        try:
            removed = await asyncio.to_thread(self.collector.sweep, self._clock(), self.retention)
        except StorageError as exc:
            logger.error("Note sweep failed, retrying next interval: %s", exc)
            return None
        if removed:
            logger.info("Note sweep removed %d file(s)", len(removed))
        return removed

    async def start(self) -> None:
        """Sweep once, then launch the periodic loops."""
        if self.running:
            return

        # Bound to the loop that runs the tasks
        self._stopping = asyncio.Event()
        await self.sweep_notes()
        self._tasks = [
            asyncio.create_task(self._every(self.token_interval, self.expire_tokens), name="expire-tokens"),
            asyncio.create_task(self._every(self.sweep_interval, self.sweep_notes), name="sweep-notes"),
        ]
        logger.info(
            "Scheduler started (token expiry every %ss, note sweep every %ss)",
            self.token_interval,
            self.sweep_interval,
        )

    async def stop(self) -> None:
        """Signal both loops to exit and wait for them."""
        self._stopping.set()
        if self._tasks:
            await asyncio.gather(*self._tasks)
            self._tasks = []
        logger.info("Scheduler stopped")

    async def _every(self, interval: float, job: Callable[[], Awaitable[object]]) -> None:
        while not self._stopping.is_set():
            try:
                await asyncio.wait_for(self._stopping.wait(), timeout=interval)
            except asyncio.TimeoutError:
                try:
                    await job()
                except Exception:
                    logger.exception("Scheduled job %s failed", job.__name__)
