from remitscan.pdf.base import BasePdfExtractor
from remitscan.pdf.pdfplumber_adapter import PdfPlumberAdapter
from remitscan.pdf.pymupdf_adapter import PyMuPdfAdapter

_ENGINES: dict[str, type[BasePdfExtractor]] = {
    adapter.ENGINE: adapter for adapter in (PdfPlumberAdapter, PyMuPdfAdapter)
}


class PdfExtractorFactory:
    """Resolves the pdf_engine setting to a local text extractor (pdf_mode 'text' only)."""

    @classmethod
    def engines(cls) -> list[str]:
        return sorted(_ENGINES)

    @classmethod
    def create(cls, engine: str) -> BasePdfExtractor:
        """Raises ValueError for an engine name that is not registered."""
        adapter_cls = _ENGINES.get(engine.strip().lower())
        if adapter_cls is None:
            raise ValueError(f"Unknown PDF engine '{engine}'. Choose from: {cls.engines()}")
        return adapter_cls()
