import io
from collections.abc import Iterator

import pdfplumber

from remitscan.pdf.base import BasePdfExtractor


class PdfPlumberAdapter(BasePdfExtractor):
    """pdfplumber engine with a tight horizontal tolerance for dense invoice tables."""

    ENGINE = "pdfplumber"
    X_TOLERANCE = 1.5

    def read_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
            for page in pdf.pages:
                yield page.extract_text(x_tolerance=self.X_TOLERANCE) or ""
