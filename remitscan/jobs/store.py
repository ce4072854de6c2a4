from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace

from remitscan.content.models import SourceFile
from remitscan.extraction.models import StructuredRecord
from remitscan.jobs.models import EnrichedRecord, Job, JobStatus
from remitscan.logging.logger import Log

JobListener = Callable[[Job], None]


class JobStore:
    """Ordered in-memory collection of jobs keyed by id.

    Every write replaces the whole Job value for one id. Writes addressed to an id
    that is no longer present (removed or cleared) are ignored and return None.
    """

    def __init__(self) -> None:
        self._jobs: dict[str, Job] = {}
        self._listeners: list[JobListener] = []

    def __len__(self) -> int:
        return len(self._jobs)

    def __iter__(self) -> Iterator[Job]:
        return iter(list(self._jobs.values()))

    def __contains__(self, job_id: object) -> bool:
        return job_id in self._jobs

    def subscribe(self, listener: JobListener) -> None:
        """Register a callback invoked with the new Job after every write."""
        self._listeners.append(listener)

    def add(self, files: Iterable[SourceFile]) -> list[Job]:
        """Append one new pending job per file."""
        jobs = [Job(file=f) for f in files]
        for job in jobs:
            self._jobs[job.id] = job
            Log.debug("Job queued", job_id=job.id, file=job.file.name)
            self._notify(job)
        return jobs

    def get(self, job_id: str) -> Job | None:
        return self._jobs.get(job_id)

    def jobs(self) -> list[Job]:
        return list(self._jobs.values())

    def pending(self) -> list[Job]:
        return [job for job in self._jobs.values() if job.status is JobStatus.PENDING]

    def counts(self) -> Counter[JobStatus]:
        return Counter(job.status for job in self._jobs.values())

    def remove(self, job_id: str) -> bool:
        removed = self._jobs.pop(job_id, None)
        if removed is not None:
            Log.info("Job removed", job_id=job_id, status=removed.status.value)
        return removed is not None

    def clear(self) -> None:
        self._jobs.clear()

    def mark_processing(self, job_id: str) -> Job | None:
        return self._update(job_id, status=JobStatus.PROCESSING, error=None)

    def record_extraction(self, job_id: str, record: StructuredRecord) -> Job | None:
        """Publish the structured record while enrichment is still running."""
        return self._update(job_id, data=EnrichedRecord.from_record(record))

    def mark_done(self, job_id: str, data: EnrichedRecord) -> Job | None:
        return self._update(job_id, status=JobStatus.DONE, data=data)

    def mark_failed(self, job_id: str, error: str) -> Job | None:
        return self._update(job_id, status=JobStatus.ERROR, error=error)

    def _update(self, job_id: str, **changes: object) -> Job | None:
        current = self._jobs.get(job_id)
        if current is None:
            Log.debug("Ignoring write for removed job", job_id=job_id)
            return None
        job = replace(current, **changes)
        self._jobs[job_id] = job
        self._notify(job)
        return job

    def _notify(self, job: Job) -> None:
        for listener in self._listeners:
            listener(job)
