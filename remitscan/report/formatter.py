"""Plain-text rendering of records, job status lines and progress."""

from collections.abc import Sequence

from remitscan.compliance.checker import ComplianceFlag
from remitscan.jobs.models import EnrichedRecord, Job, JobStatus
from remitscan.progress.estimator import ProgressSnapshot, ProgressStatus

FIELD_LABELS: tuple[tuple[str, str], ...] = (
    ("beneficiary_name", "Beneficiary name"),
    ("account_number", "Account number"),
    ("swift_code", "Bank SWIFT"),
    ("bank_name", "Bank name"),
    ("country", "Country"),
    ("province", "Province or state"),
    ("city", "City"),
    ("address", "Address"),
)

RECORD_HEADER = "Extracted data\n━━━━━━━━━━━━━━━━━━"

_STATUS_LABELS = {
    JobStatus.PENDING: "pending",
    JobStatus.PROCESSING: "processing",
    JobStatus.DONE: "done",
    JobStatus.ERROR: "error",
}

_PHASE_LABELS = {
    ProgressStatus.READING: "Reading file...",
    ProgressStatus.ANALYZING: "Analyzing data with AI...",
}


def format_fields(record: EnrichedRecord) -> str:
    """Label line, value line, blank line; absent fields are skipped."""
    blocks = [
        f"{label}:\n{getattr(record, key)}"
        for key, label in FIELD_LABELS
        if getattr(record, key)
    ]
    return "\n\n".join(blocks)


def format_record(
    record: EnrichedRecord,
    flags: Sequence[ComplianceFlag] = (),
) -> str:
    sections: list[str] = []
    for flag in flags:
        sections.append(
            f"WARNING: {flag.value} ({flag.field}) - {flag.reason}. "
            "Take care before sending transfers to this bank."
        )
    sections.append(RECORD_HEADER)
    fields_text = format_fields(record)
    if fields_text:
        sections.append(fields_text)
    if record.company_info:
        sections.append(f"Additional information:\n{record.company_info.strip()}")
    if record.sources:
        lines = "\n".join(f"- {s.title} <{s.uri}>" for s in record.sources)
        sections.append(f"Sources:\n{lines}")
    return "\n\n".join(sections)


def format_job_line(job: Job) -> str:
    line = f"[{_STATUS_LABELS[job.status]}] {job.file.name}"
    if job.status is JobStatus.PROCESSING and job.data is not None:
        line += " (record ready, enrichment running)"
    if job.status is JobStatus.ERROR and job.error:
        line += f": {job.error}"
    return line


def format_progress(snapshot: ProgressSnapshot) -> str:
    label = _PHASE_LABELS.get(snapshot.status, "")
    line = f"{label} {snapshot.percent}%".strip()
    if snapshot.remaining_label:
        line += f" (time left: {snapshot.remaining_label})"
    return line
