import io

import openpyxl
import pytest
import xlwt
from docx import Document
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from remitscan.content.models import SourceFile


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Hello PDF World")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a two-page PDF with known text on each page."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Page one content")
    c.showPage()
    c.drawString(72, 720, "Page two content")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Generate a valid PDF with no text content (blank page)."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_docx_bytes() -> bytes:
    """A contract with two paragraphs and a two-row details table."""
    document = Document()
    document.add_paragraph("Sales contract No. 42")
    document.add_paragraph("")
    document.add_paragraph("Beneficiary: Example Trading Co., Ltd.")
    table = document.add_table(rows=2, cols=2)
    table.cell(0, 0).text = "SWIFT"
    table.cell(0, 1).text = "ICBKCNBJ"
    table.cell(1, 0).text = "Account"
    table.cell(1, 1).text = "6222 0212 3456 7890"
    buf = io.BytesIO()
    document.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """A workbook with two sheets."""
    workbook = openpyxl.Workbook()
    first = workbook.active
    first.title = "Invoice"
    first.append(["Beneficiary", "Example Trading Co., Ltd."])
    first.append(["Amount", 1200])
    second = workbook.create_sheet("Bank")
    second.append(["SWIFT", "ICBKCNBJ"])
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def sample_xls_bytes() -> bytes:
    """The same two-sheet workbook in the legacy BIFF format."""
    workbook = xlwt.Workbook()
    first = workbook.add_sheet("Invoice")
    first.write(0, 0, "Beneficiary")
    first.write(0, 1, "Example Trading Co., Ltd.")
    first.write(1, 0, "Amount")
    first.write(1, 1, 1200)
    second = workbook.add_sheet("Bank")
    second.write(0, 0, "SWIFT")
    second.write(0, 1, "ICBKCNBJ")
    buf = io.BytesIO()
    workbook.save(buf)
    return buf.getvalue()


@pytest.fixture()
def text_file() -> SourceFile:
    return SourceFile(
        name="invoice.txt",
        mime_type="text/plain",
        data="Beneficiary: Example Trading Co., Ltd.".encode(),
    )
