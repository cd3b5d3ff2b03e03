"""Background scheduler running order sync passes at a fixed interval."""

import asyncio
from typing import Optional

import structlog

from .order_sync_job import OrderSyncJob

logger = structlog.get_logger(__name__)


class OrderSyncScheduler:
    """
    Runs ``OrderSyncJob.run`` every ``interval_seconds``.

    A pass that fails is not retried early: the next tick simply runs a
    new pass, with no backoff and no attempt bound.
    """

    def __init__(self, job: OrderSyncJob, interval_seconds: float):
        self._job = job
        self._interval_seconds = interval_seconds
        self._running = False
        self._task: Optional[asyncio.Task] = None

    @property
    def interval_seconds(self) -> float:
        return self._interval_seconds

    @property
    def is_running(self) -> bool:
        return self._running

    async def start(self) -> None:
        """Start the background sync task."""
        if self._running:
            logger.warning("sync_scheduler_already_running")
            return

        self._running = True
        self._task = asyncio.create_task(self._run_loop())
        logger.info("sync_scheduler_started", interval_seconds=self._interval_seconds)

    async def stop(self) -> None:
        """Stop the background sync task."""
        if not self._running:
            logger.warning("sync_scheduler_not_running")
            return

        self._running = False

        if self._task is not None:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        logger.info("sync_scheduler_stopped")

    async def _run_loop(self) -> None:
        while self._running:
            try:
                await self._job.run()
            except Exception:
                logger.exception("sync_pass_crashed")

            await asyncio.sleep(self._interval_seconds)
