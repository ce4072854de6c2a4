from collections.abc import Iterator

import pymupdf

from remitscan.pdf.base import BasePdfExtractor


class PyMuPdfAdapter(BasePdfExtractor):
    """PyMuPDF engine; blocks are sorted top-to-bottom, left-to-right."""

    ENGINE = "pymupdf"

    def read_pages(self, pdf_bytes: bytes) -> Iterator[str]:
        with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
            for page in doc:
                yield page.get_text("text", sort=True)
