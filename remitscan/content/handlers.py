"""Format dispatch for the content normalizer.

Rules are evaluated in order and the first matching predicate wins. The last rule
always matches and sends the raw bytes as a base64 payload.
"""

import base64
import csv
import io
import mimetypes
from collections.abc import Callable
from dataclasses import dataclass

import openpyxl
import xlrd
from docx import Document
from docx.table import Table

from remitscan.content.models import BinaryContent, ContentUnit, SourceFile, TextContent
from remitscan.pdf.base import BasePdfExtractor

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
SPREADSHEET_MIMES = frozenset({
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "application/vnd.ms-excel",
})
FALLBACK_MIME = "application/octet-stream"
ZIP_MAGIC = b"PK"


@dataclass(frozen=True)
class DispatchRule:
    name: str
    matches: Callable[[SourceFile], bool]
    handle: Callable[[SourceFile], ContentUnit]


def is_image_or_pdf(file: SourceFile) -> bool:
    return file.mime_type.startswith("image/") or file.mime_type == PDF_MIME


def is_docx(file: SourceFile) -> bool:
    return file.mime_type == DOCX_MIME or file.suffix == ".docx"


def is_spreadsheet(file: SourceFile) -> bool:
    return file.mime_type in SPREADSHEET_MIMES or file.suffix in (".xlsx", ".xls")


def is_text(file: SourceFile) -> bool:
    return file.mime_type.startswith("text/") or file.suffix == ".txt"


def encode_binary(file: SourceFile) -> BinaryContent:
    mime_type = file.mime_type or mimetypes.guess_type(file.name)[0] or FALLBACK_MIME
    payload = base64.b64encode(file.read_bytes()).decode("ascii")
    return BinaryContent(data=payload, mime_type=mime_type)


def read_docx(file: SourceFile) -> TextContent:
    document = Document(io.BytesIO(file.read_bytes()))
    blocks: list[str] = []
    for item in document.iter_inner_content():
        if isinstance(item, Table):
            for row in item.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    blocks.append(" | ".join(cells))
        elif item.text.strip():
            blocks.append(item.text)
    return TextContent(text="\n\n".join(blocks))


def read_spreadsheet(file: SourceFile) -> TextContent:
    data = file.read_bytes()
    if data.startswith(ZIP_MAGIC):
        sheets = _read_workbook(data)
    else:
        sheets = _read_legacy_workbook(data)
    parts = [f"--- {title} ---\n{_rows_to_csv(rows)}\n\n" for title, rows in sheets]
    return TextContent(text="".join(parts))


def _read_workbook(data: bytes) -> list[tuple[str, list[list[object]]]]:
    workbook = openpyxl.load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    try:
        return [
            (sheet.title, [list(row) for row in sheet.iter_rows(values_only=True)])
            for sheet in workbook.worksheets
        ]
    finally:
        workbook.close()


def _read_legacy_workbook(data: bytes) -> list[tuple[str, list[list[object]]]]:
    """BIFF .xls via xlrd; integral floats are rendered without the trailing .0."""
    workbook = xlrd.open_workbook(file_contents=data)
    try:
        return [
            (
                sheet.name,
                [
                    [_legacy_cell(value) for value in sheet.row_values(index)]
                    for index in range(sheet.nrows)
                ],
            )
            for sheet in workbook.sheets()
        ]
    finally:
        workbook.release_resources()


def _legacy_cell(value: object) -> object:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _rows_to_csv(rows: list[list[object]]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    for row in rows:
        writer.writerow(["" if value is None else value for value in row])
    return buffer.getvalue().rstrip("\n")


def read_text(file: SourceFile) -> TextContent:
    return TextContent(text=file.read_bytes().decode("utf-8-sig", errors="replace"))


def _pdf_to_text(extractor: BasePdfExtractor) -> Callable[[SourceFile], ContentUnit]:
    def handle(file: SourceFile) -> ContentUnit:
        if file.mime_type != PDF_MIME:
            return encode_binary(file)
        return TextContent(text=extractor.extract(file.read_bytes()))

    return handle


def build_rules(pdf_extractor: BasePdfExtractor | None = None) -> list[DispatchRule]:
    """Build the ordered rule list.

    With a pdf_extractor, PDFs are converted to text locally instead of being
    uploaded as binary.
    """
    media_handler = encode_binary if pdf_extractor is None else _pdf_to_text(pdf_extractor)
    return [
        DispatchRule("image_or_pdf", is_image_or_pdf, media_handler),
        DispatchRule("docx", is_docx, read_docx),
        DispatchRule("spreadsheet", is_spreadsheet, read_spreadsheet),
        DispatchRule("text", is_text, read_text),
        DispatchRule("binary_fallback", lambda _file: True, encode_binary),
    ]
