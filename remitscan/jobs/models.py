import uuid
from dataclasses import dataclass, replace
from enum import Enum

from remitscan.content.models import SourceFile
from remitscan.enrichment.models import Citation, EnrichmentResult
from remitscan.extraction.models import StructuredRecord


class JobStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    DONE = "done"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self in (JobStatus.DONE, JobStatus.ERROR)


@dataclass(frozen=True)
class EnrichedRecord(StructuredRecord):
    """StructuredRecord plus the enrichment narrative and its sources."""

    company_info: str | None = None
    sources: tuple[Citation, ...] = ()

    @classmethod
    def from_record(cls, record: StructuredRecord) -> "EnrichedRecord":
        return cls(**{name: getattr(record, name) for name in StructuredRecord.field_names()})

    def with_enrichment(self, result: EnrichmentResult) -> "EnrichedRecord":
        return replace(self, company_info=result.narrative, sources=result.sources)

    @property
    def is_enriched(self) -> bool:
        return self.company_info is not None


@dataclass(frozen=True)
class Job:
    """One input file on its way through extraction and enrichment."""

    file: SourceFile
    id: str = ""
    status: JobStatus = JobStatus.PENDING
    data: EnrichedRecord | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            object.__setattr__(self, "id", uuid.uuid4().hex)
