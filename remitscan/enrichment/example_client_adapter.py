"""Example enrichment client adapter (no network calls)."""

from remitscan.enrichment.client_base import BaseEnrichmentClient
from remitscan.enrichment.models import RawCitation, SearchResponse


class ExampleEnrichmentAdapter(BaseEnrichmentClient):
    """Returns a fixed narrative and one citation."""

    DEFAULT_TEXT = (
        "Company: wholesale trading company based in the stated city.\n\n"
        "Bank: commercial bank with an international branch network.\n\n"
        "Goods stated in the invoice: assorted consumer goods."
    )

    async def search(self, *, model: str, prompt: str) -> SearchResponse:
        _ = model, prompt
        return SearchResponse(
            text=self.DEFAULT_TEXT,
            citations=[RawCitation(uri="https://example.com/company", title="Example registry")],
        )
