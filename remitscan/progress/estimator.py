"""Progress and remaining-time estimate for the single-file interactive path.

Reading progress is real (reported by the normalizer) and fills 0-30%. Analysis
progress is simulated: a ticker walks from 30% toward 95% at a pace derived from a
size-based duration estimate, running 1.5x faster than the estimate itself. The
estimator is advisory only and never blocks the pipeline.
"""

import asyncio
import math
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager, suppress
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ProgressStatus(str, Enum):
    IDLE = "idle"
    READING = "reading"
    ANALYZING = "analyzing"


@dataclass(frozen=True)
class ProgressSnapshot:
    status: ProgressStatus
    percent: int
    remaining_label: str | None = None


ProgressListener = Callable[[ProgressSnapshot], None]


class ProgressEstimator:
    READING_SHARE: ClassVar[int] = 30
    SIMULATED_CAP: ClassVar[int] = 95
    BYTES_PER_MB: ClassVar[int] = 1024 * 1024

    DONE_LABEL: ClassVar[str] = "done!"
    FINAL_MOMENTS_LABEL: ClassVar[str] = "final moments..."

    def __init__(
        self,
        *,
        base_seconds: float = 5.0,
        seconds_per_mb: float = 2.0,
        acceleration: float = 1.5,
        completion_pause_seconds: float = 0.5,
    ) -> None:
        self._base_seconds = base_seconds
        self._seconds_per_mb = seconds_per_mb
        self._acceleration = acceleration
        self._completion_pause_seconds = completion_pause_seconds
        self._listeners: list[ProgressListener] = []
        self._snapshot = ProgressSnapshot(ProgressStatus.IDLE, 0)
        self._ticker: asyncio.Task[None] | None = None

    @property
    def snapshot(self) -> ProgressSnapshot:
        return self._snapshot

    @property
    def ticking(self) -> bool:
        return self._ticker is not None and not self._ticker.done()

    def subscribe(self, listener: ProgressListener) -> None:
        self._listeners.append(listener)

    def estimate_seconds(self, size_bytes: int) -> int:
        size_mb = size_bytes / self.BYTES_PER_MB
        return math.ceil(self._base_seconds + size_mb * self._seconds_per_mb)

    def tick_interval(self, estimated_seconds: float) -> float:
        steps = self.SIMULATED_CAP - self.READING_SHARE
        return estimated_seconds / steps / self._acceleration

    def remaining_seconds(self, estimated_seconds: float, percent: int) -> int:
        span = self.SIMULATED_CAP - self.READING_SHARE
        covered = (percent - self.READING_SHARE) / span
        return math.ceil(estimated_seconds * (1 - covered))

    def begin_reading(self) -> None:
        self._publish(ProgressSnapshot(ProgressStatus.READING, 0))

    def report_reading(self, percent: float) -> None:
        """Map normalizer progress (0-100) onto the reading share."""
        bounded = max(0.0, min(100.0, percent))
        self._advance(round(bounded * self.READING_SHARE / 100), self._snapshot.remaining_label)

    def begin_analyzing(self, size_bytes: int) -> None:
        """Switch to the simulated phase and start the ticker."""
        estimated = self.estimate_seconds(size_bytes)
        percent = max(self._snapshot.percent, self.READING_SHARE)
        self._publish(
            ProgressSnapshot(ProgressStatus.ANALYZING, percent, self._seconds_label(estimated))
        )
        self._stop_ticker()
        self._ticker = asyncio.get_running_loop().create_task(
            self._tick(estimated, self.tick_interval(estimated)),
            name="progress-ticker",
        )

    async def complete(self) -> None:
        """Show 100% with the done label, hold it briefly, then go idle."""
        await self._cancel_ticker()
        self._publish(ProgressSnapshot(self._snapshot.status, 100, self.DONE_LABEL))
        await asyncio.sleep(self._completion_pause_seconds)
        self._go_idle()

    @asynccontextmanager
    async def track(self) -> AsyncIterator["ProgressEstimator"]:
        """Scope one run; the ticker is cancelled on every exit path."""
        try:
            yield self
        finally:
            await self._cancel_ticker()
            if self._snapshot.status is not ProgressStatus.IDLE:
                self._go_idle()

    async def _tick(self, estimated_seconds: int, interval: float) -> None:
        current = self._snapshot.percent
        while current < self.SIMULATED_CAP:
            await asyncio.sleep(interval)
            current += 1
            remaining = self.remaining_seconds(estimated_seconds, current)
            label = self._seconds_label(remaining) if remaining > 0 else self.FINAL_MOMENTS_LABEL
            self._advance(current, label)

    def _advance(self, percent: int, label: str | None) -> None:
        current = self._snapshot
        self._publish(ProgressSnapshot(current.status, max(current.percent, percent), label))

    def _go_idle(self) -> None:
        current = self._snapshot
        self._publish(ProgressSnapshot(ProgressStatus.IDLE, current.percent, current.remaining_label))

    def _stop_ticker(self) -> None:
        if self._ticker is not None:
            self._ticker.cancel()
            self._ticker = None

    async def _cancel_ticker(self) -> None:
        ticker, self._ticker = self._ticker, None
        if ticker is None:
            return
        ticker.cancel()
        with suppress(asyncio.CancelledError):
            await ticker

    def _publish(self, snapshot: ProgressSnapshot) -> None:
        if snapshot == self._snapshot:
            return
        self._snapshot = snapshot
        for listener in self._listeners:
            listener(snapshot)

    @staticmethod
    def _seconds_label(seconds: int) -> str:
        return f"{seconds} second" if seconds == 1 else f"{seconds} seconds"
