from abc import ABC, abstractmethod

from remitscan.content.models import ContentUnit


class BaseExtractionClient(ABC):
    """Contract for provider-specific field-extraction clients."""

    @abstractmethod
    async def create_extraction(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        content: ContentUnit,
        json_schema: dict[str, object],
    ) -> str:
        """Return the provider response as plain text (expected to be JSON)."""
