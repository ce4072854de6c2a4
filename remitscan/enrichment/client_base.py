from abc import ABC, abstractmethod

from remitscan.enrichment.models import SearchResponse


class BaseEnrichmentClient(ABC):
    """Contract for provider-specific search-augmented clients."""

    @abstractmethod
    async def search(self, *, model: str, prompt: str) -> SearchResponse:
        """Run the search-augmented call and return narrative plus citations.

        Raises:
            EnrichmentError: on any provider failure.
        """
