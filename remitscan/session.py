from enum import Enum

from remitscan.compliance.checker import ComplianceChecker, ComplianceFlag
from remitscan.config.settings import Settings
from remitscan.content.handlers import build_rules
from remitscan.content.models import SourceFile
from remitscan.content.normalizer import ContentNormalizer
from remitscan.enrichment.enricher import Enricher
from remitscan.enrichment.factory import EnricherFactory
from remitscan.extraction.base import BaseExtractor
from remitscan.extraction.factory import ExtractorFactory
from remitscan.extraction.models import StructuredRecord
from remitscan.jobs.models import EnrichedRecord, Job
from remitscan.jobs.store import JobStore
from remitscan.logging.logger import Log
from remitscan.pdf.factory import PdfExtractorFactory
from remitscan.progress.estimator import ProgressEstimator
from remitscan.worker.job_runner import JobRunner
from remitscan.worker.scheduler import Scheduler


class SessionMode(str, Enum):
    SINGLE = "single"
    MULTI = "multi"


class PreconditionError(Exception):
    """Raised for session-wide failures that do not belong to any single job."""


class ExtractionSession:
    """Interactive controller: file intake, single-file path and multi-file path.

    In single mode one file is processed with a progress estimate. In multi mode
    files become jobs in the store and run through the scheduler.
    """

    MIN_MULTI_FILES = 2
    NOT_ENOUGH_FILES = (
        "Add at least two files for multi-file extraction. "
        "Use single-file mode for one file."
    )
    UNEXPECTED_ERROR = "Unexpected error while processing the file. Please try again."

    def __init__(
        self,
        *,
        normalizer: ContentNormalizer,
        extractor: BaseExtractor,
        enricher: Enricher,
        compliance: ComplianceChecker,
        max_concurrent_jobs: int = Scheduler.DEFAULT_MAX_CONCURRENT_JOBS,
        estimator: ProgressEstimator | None = None,
    ) -> None:
        self._normalizer = normalizer
        self._extractor = extractor
        self._enricher = enricher
        self.compliance = compliance
        self.store = JobStore()
        self._scheduler = Scheduler(
            JobRunner(normalizer, extractor, enricher, self.store),
            max_concurrent_jobs,
        )
        self.estimator = estimator or ProgressEstimator()
        self.mode = SessionMode.SINGLE
        self.single_file: SourceFile | None = None
        self.single_result: EnrichedRecord | None = None
        self.error: str | None = None
        self.is_loading = False

    def set_mode(self, mode: SessionMode) -> None:
        self.mode = mode

    def select_files(self, files: list[SourceFile]) -> list[Job]:
        """Take files picked or dropped by the user.

        Single mode keeps only the first file; multi mode queues all of them.
        """
        if not files:
            return []
        self.error = None
        self.single_result = None
        if self.mode is SessionMode.SINGLE:
            self.single_file = files[0]
            self.store.clear()
            return []
        self.single_file = None
        return self.store.add(files)

    def paste_files(self, files: list[SourceFile]) -> list[Job]:
        """Take pasted files; several files switch single mode to multi mode."""
        if self.is_loading or not files:
            return []
        if len(files) > 1 and self.mode is SessionMode.SINGLE:
            Log.info(f"Pasted {len(files)} files, switching to multi-file mode")
            self.mode = SessionMode.MULTI
        return self.select_files(files)

    def remove_job(self, job_id: str) -> bool:
        return self.store.remove(job_id)

    def clear(self) -> None:
        self.error = None
        if self.mode is SessionMode.SINGLE:
            self.single_file = None
            self.single_result = None
        else:
            self.store.clear()

    def flags_for(self, record: StructuredRecord) -> list[ComplianceFlag]:
        return self.compliance.check(record)

    async def process_single(self) -> EnrichedRecord | None:
        """Process the selected file with progress reporting.

        Failures are stored in ``error`` and None is returned.
        """
        file = self.single_file
        if file is None:
            return None
        self.is_loading = True
        self.error = None
        self.single_result = None
        estimator = self.estimator
        try:
            async with estimator.track():
                estimator.begin_reading()
                unit = await self._normalizer.normalize(file, on_progress=estimator.report_reading)
                estimator.begin_analyzing(file.size)
                record = await self._extractor.extract(unit)
                result = await self._enricher.enrich(
                    record.beneficiary_name,
                    record.bank_name,
                    record.goods_description,
                )
                await estimator.complete()
            self.single_result = EnrichedRecord.from_record(record).with_enrichment(result)
        except Exception as exc:
            Log.error(f"Error processing single file {file.name}: {exc}")
            self.error = str(exc) or self.UNEXPECTED_ERROR
        finally:
            self.is_loading = False
        return self.single_result

    async def process_multi(self) -> None:
        """Run every pending job through the scheduler.

        Raises:
            PreconditionError: if fewer than two files have been added.
        """
        if len(self.store) < self.MIN_MULTI_FILES:
            self.error = self.NOT_ENOUGH_FILES
            raise PreconditionError(self.NOT_ENOUGH_FILES)
        if not self.store.pending():
            return
        self.is_loading = True
        self.error = None
        try:
            await self._scheduler.run(self.store)
        finally:
            self.is_loading = False

    def close(self) -> None:
        self._normalizer.close()


def build_session(settings: Settings) -> ExtractionSession:
    """Build an ExtractionSession with all adapters configured from settings."""
    pdf_mode = settings.pdf_mode.lower()
    if pdf_mode not in ("binary", "text"):
        raise ValueError(f"Unknown pdf_mode '{settings.pdf_mode}'. Choose from: ['binary', 'text']")
    pdf_extractor = PdfExtractorFactory.create(settings.pdf_engine) if pdf_mode == "text" else None

    normalizer = ContentNormalizer(
        build_rules(pdf_extractor),
        max_workers=settings.normalization_workers,
    )
    estimator = ProgressEstimator(
        base_seconds=settings.progress_base_seconds,
        seconds_per_mb=settings.progress_seconds_per_mb,
        acceleration=settings.progress_acceleration,
        completion_pause_seconds=settings.progress_completion_pause_seconds,
    )
    return ExtractionSession(
        normalizer=normalizer,
        extractor=ExtractorFactory.create(settings),
        enricher=EnricherFactory.create(settings),
        compliance=ComplianceChecker(settings.banned_swift_codes),
        max_concurrent_jobs=settings.max_concurrent_jobs,
        estimator=estimator,
    )
