import pytest

from remitscan.pdf.exceptions import PdfExtractionError
from remitscan.pdf.factory import PdfExtractorFactory
from remitscan.pdf.pdfplumber_adapter import PdfPlumberAdapter
from remitscan.pdf.pymupdf_adapter import PyMuPdfAdapter


class TestPdfExtractorFactory:
    def test_creates_pdfplumber_adapter(self) -> None:
        assert isinstance(PdfExtractorFactory.create("pdfplumber"), PdfPlumberAdapter)

    def test_creates_pymupdf_adapter(self) -> None:
        assert isinstance(PdfExtractorFactory.create("pymupdf"), PyMuPdfAdapter)

    def test_is_case_insensitive(self) -> None:
        assert isinstance(PdfExtractorFactory.create("PdfPlumber"), PdfPlumberAdapter)

    def test_raises_for_unknown_engine(self) -> None:
        with pytest.raises(ValueError, match="Unknown PDF engine"):
            PdfExtractorFactory.create("unknown")

    def test_lists_engines(self) -> None:
        assert PdfExtractorFactory.engines() == ["pdfplumber", "pymupdf"]


@pytest.mark.parametrize("adapter_cls", [PdfPlumberAdapter, PyMuPdfAdapter])
class TestPdfAdapters:
    def test_extract_returns_text_with_page_header(
        self, adapter_cls: type, sample_pdf_bytes: bytes
    ) -> None:
        result = adapter_cls().extract(sample_pdf_bytes)
        assert result.startswith("--- Page 1 ---\n")
        assert "Hello PDF World" in result

    def test_extract_multi_page(self, adapter_cls: type, multi_page_pdf_bytes: bytes) -> None:
        result = adapter_cls().extract(multi_page_pdf_bytes)
        assert "--- Page 2 ---" in result
        assert result.index("Page one content") < result.index("Page two content")

    def test_extract_empty_pdf_returns_empty_string(
        self, adapter_cls: type, empty_pdf_bytes: bytes
    ) -> None:
        assert adapter_cls().extract(empty_pdf_bytes) == ""

    def test_extract_raises_on_invalid_bytes(self, adapter_cls: type) -> None:
        with pytest.raises(PdfExtractionError):
            adapter_cls().extract(b"not a pdf")


class TestJoinPages:
    def test_skips_blank_pages_but_keeps_numbering(self) -> None:
        assert PdfPlumberAdapter.join_pages(["a", "  ", "c"]) == (
            "--- Page 1 ---\na\n\n--- Page 3 ---\nc"
        )
