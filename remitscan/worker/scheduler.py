import asyncio
from collections import deque

from remitscan.jobs.models import JobStatus
from remitscan.jobs.store import JobStore
from remitscan.logging.logger import Log
from remitscan.worker.job_runner import JobRunner


class Scheduler:
    """Admission loop: fill the active set up to the ceiling, wait, backfill.

    Admission is FIFO over the jobs pending when run() is called; completion
    order is unconstrained.
    """

    DEFAULT_MAX_CONCURRENT_JOBS = 5

    def __init__(
        self,
        job_runner: JobRunner,
        max_concurrent_jobs: int = DEFAULT_MAX_CONCURRENT_JOBS,
    ) -> None:
        if max_concurrent_jobs < 1:
            raise ValueError("max_concurrent_jobs must be at least 1")
        self._job_runner = job_runner
        self._max_concurrent_jobs = max_concurrent_jobs

    async def run(self, store: JobStore) -> None:
        """Drive every pending job in the store to done or error."""
        queue = deque(job.id for job in store.pending())
        active: set[asyncio.Task[None]] = set()
        Log.info(
            f"Scheduler started: {len(queue)} jobs queued, "
            f"ceiling {self._max_concurrent_jobs}"
        )
        try:
            while queue or active:
                while queue and len(active) < self._max_concurrent_jobs:
                    task = self._admit(store, queue.popleft())
                    if task is not None:
                        active.add(task)
                if not active:
                    continue
                done, active = await asyncio.wait(active, return_when=asyncio.FIRST_COMPLETED)
                for task in done:
                    self._log_escaped_error(task)
        except asyncio.CancelledError:
            for task in active:
                task.cancel()
            await asyncio.gather(*active, return_exceptions=True)
            raise
        summary = {status.value: count for status, count in store.counts().items()}
        Log.info(f"Scheduler finished: {summary}")

    def _admit(self, store: JobStore, job_id: str) -> asyncio.Task[None] | None:
        current = store.get(job_id)
        if current is None or current.status is not JobStatus.PENDING:
            Log.debug("Skipping job no longer pending", job_id=job_id)
            return None
        job = store.mark_processing(job_id)
        if job is None:
            return None
        Log.debug("Job admitted", job_id=job_id)
        return asyncio.create_task(self._job_runner.run(job), name=f"job-{job_id}")

    @staticmethod
    def _log_escaped_error(task: asyncio.Task[None]) -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            Log.error(f"Job task {task.get_name()} raised: {exc}")
