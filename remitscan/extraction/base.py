from abc import ABC, abstractmethod

from remitscan.content.models import ContentUnit
from remitscan.extraction.models import StructuredRecord


class BaseExtractor(ABC):
    """Contract for the extraction step."""

    @abstractmethod
    async def extract(self, unit: ContentUnit) -> StructuredRecord:
        """Turn a content unit into a normalized StructuredRecord.

        Raises:
            ExtractionEmptyError: backend returned nothing usable or failed.
            ExtractionParseError: backend payload does not fit the field schema.
        """
