import asyncio

from remitscan.compliance.checker import ComplianceChecker
from remitscan.config.settings import Settings
from remitscan.content.models import TextContent
from remitscan.extraction.example_client_adapter import ExampleExtractionAdapter
from remitscan.extraction.extractor import Extractor
from remitscan.extraction.models import StructuredRecord


class TestComplianceChecker:
    def test_flags_banned_swift_code(self) -> None:
        checker = ComplianceChecker(["CZCBCN2XXXX"])
        flags = checker.check(StructuredRecord(swift_code="CZCBCN2XXXX"))
        assert len(flags) == 1
        assert flags[0].field == "swift_code"
        assert flags[0].value == "CZCBCN2XXXX"

    def test_configured_codes_are_case_insensitive(self) -> None:
        checker = ComplianceChecker([" czcbcn2xxxx "])
        assert checker.is_banned("CZCBCN2XXXX")

    def test_clean_record_has_no_flags(self) -> None:
        checker = ComplianceChecker(["CZCBCN2XXXX"])
        assert checker.check(StructuredRecord(swift_code="ICBKCNBJXXX")) == []

    def test_missing_swift_code_has_no_flags(self) -> None:
        checker = ComplianceChecker(["CZCBCN2XXXX"])
        assert checker.check(StructuredRecord()) == []
        assert not checker.is_banned(None)

    def test_record_is_unchanged(self) -> None:
        record = StructuredRecord(swift_code="CZCBCN2XXXX")
        ComplianceChecker(["CZCBCN2XXXX"]).check(record)
        assert record.swift_code == "CZCBCN2XXXX"


class TestExtractedCodeIsFlagged:
    def test_short_code_is_padded_before_check(self) -> None:
        extractor = Extractor(
            client=ExampleExtractionAdapter({"swift_code": "czcbcn2x"}),
            model="example",
        )
        record = asyncio.run(extractor.extract(TextContent(text="doc")))
        assert record.swift_code == "CZCBCN2XXXX"
        assert ComplianceChecker(Settings(_env_file=None).banned_swift_codes).check(record)
