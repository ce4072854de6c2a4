from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import ClassVar

from remitscan.pdf.exceptions import PdfExtractionError


class BasePdfExtractor(ABC):
    """Local PDF-to-text conversion, used when pdf_mode is 'text'.

    Subclasses only yield raw page texts; error wrapping and page assembly live here.
    """

    ENGINE: ClassVar[str] = ""
    PAGE_HEADER: ClassVar[str] = "--- Page {number} ---"

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract plain text from PDF bytes.

        Each non-empty page is preceded by a ``--- Page N ---`` header line so the
        extraction backend still sees page boundaries.

        Raises:
            PdfExtractionError: if extraction fails for any reason.
        """
        try:
            pages = list(self.read_pages(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"{self.ENGINE} extraction failed: {exc}") from exc
        return self.join_pages(pages)

    @abstractmethod
    def read_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        """Yield the raw text of every page, in order."""

    @classmethod
    def join_pages(cls, pages: list[str]) -> str:
        blocks = [
            f"{cls.PAGE_HEADER.format(number=i)}\n{text.strip()}"
            for i, text in enumerate(pages, start=1)
            if text.strip()
        ]
        return "\n\n".join(blocks)
