"""Search-augmented enrichment of an extracted record."""

from pathlib import Path
from typing import ClassVar

from remitscan.enrichment.client_base import BaseEnrichmentClient
from remitscan.enrichment.models import Citation, EnrichmentResult, RawCitation
from remitscan.logging.logger import Log

_DEFAULT_PROMPT_PATH = Path(__file__).parent / "prompts" / "enrichment_prompt.txt"


class Enricher:
    """Looks up the beneficiary and its bank on the web.

    Never raises: a blank name skips the call, and any backend failure is turned
    into a placeholder narrative with no sources.
    """

    NO_NAME_PLACEHOLDER: ClassVar[str] = "No name was provided for the lookup."
    NOT_FOUND_PLACEHOLDER: ClassVar[str] = "No additional information was found."
    FAILURE_PLACEHOLDER: ClassVar[str] = (
        "Could not retrieve additional information (search service connection error). "
        "This may be caused by a network problem or an exceeded usage quota."
    )
    UNSPECIFIED_GOODS: ClassVar[str] = "not specified"

    def __init__(
        self,
        *,
        client: BaseEnrichmentClient,
        model: str,
        prompt_template_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._prompt_template = (prompt_template_path or _DEFAULT_PROMPT_PATH).read_text(
            encoding="utf-8"
        )

    async def enrich(
        self,
        beneficiary_name: str | None,
        bank_name: str | None,
        goods_description: str | None = None,
    ) -> EnrichmentResult:
        if not beneficiary_name or not beneficiary_name.strip():
            Log.info("Enrichment skipped: no beneficiary name")
            return EnrichmentResult(narrative=self.NO_NAME_PLACEHOLDER)

        prompt = self._prompt_template.format(
            beneficiary_name=beneficiary_name,
            bank_name=bank_name or "",
            goods_description=goods_description or self.UNSPECIFIED_GOODS,
        )
        Log.debug(f"Enrichment prompt:\n{prompt}")

        try:
            response = await self._client.search(model=self._model, prompt=prompt)
        except Exception as exc:
            Log.warning(f"Enrichment degraded for {beneficiary_name}: {exc}")
            return EnrichmentResult(narrative=self.FAILURE_PLACEHOLDER)

        sources = self._complete_citations(response.citations)
        narrative = (response.text or "").strip() or self.NOT_FOUND_PLACEHOLDER
        Log.info(f"Enrichment complete for {beneficiary_name}: {len(sources)} sources")
        return EnrichmentResult(narrative=narrative, sources=sources)

    @staticmethod
    def _complete_citations(raw: list[RawCitation]) -> tuple[Citation, ...]:
        return tuple(
            Citation(uri=c.uri, title=c.title) for c in raw if c.uri and c.title
        )
