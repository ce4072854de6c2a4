from remitscan.content.normalizer import ContentNormalizer
from remitscan.enrichment.enricher import Enricher
from remitscan.extraction.base import BaseExtractor
from remitscan.jobs.models import EnrichedRecord, Job
from remitscan.jobs.store import JobStore
from remitscan.logging.logger import Log


class JobRunner:
    """Run one job through both steps and record each transition in the store.

    Jobs are never retried; a failure is captured on the job and the slot is freed.
    """

    UNKNOWN_ERROR = "Unknown error while processing the file."

    def __init__(
        self,
        normalizer: ContentNormalizer,
        extractor: BaseExtractor,
        enricher: Enricher,
        store: JobStore,
    ) -> None:
        self._normalizer = normalizer
        self._extractor = extractor
        self._enricher = enricher
        self._store = store

    async def run(self, job: Job) -> None:
        """Normalize -> extract -> publish record -> enrich -> mark done."""
        Log.info(f"Running job {job.id}", file=job.file.name)
        try:
            unit = await self._normalizer.normalize(job.file)
            record = await self._extractor.extract(unit)

            if self._store.record_extraction(job.id, record) is None:
                Log.info(f"Job {job.id} was removed, skipping enrichment")
                return

            result = await self._enricher.enrich(
                record.beneficiary_name,
                record.bank_name,
                record.goods_description,
            )
            enriched = EnrichedRecord.from_record(record).with_enrichment(result)
            self._store.mark_done(job.id, enriched)
            Log.info(f"Job {job.id} completed successfully")
        except Exception as exc:
            self._handle_failure(job, exc)

    def _handle_failure(self, job: Job, exc: Exception) -> None:
        Log.error(f"Job {job.id} failed: {exc}", file=job.file.name)
        self._store.mark_failed(job.id, str(exc) or self.UNKNOWN_ERROR)
