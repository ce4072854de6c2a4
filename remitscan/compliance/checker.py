from collections.abc import Iterable
from dataclasses import dataclass

from remitscan.extraction.models import StructuredRecord


@dataclass(frozen=True)
class ComplianceFlag:
    """A warning attached to a record for display; the record itself is unchanged."""

    field: str
    value: str
    reason: str


class ComplianceChecker:
    """Checks normalized bank identifier codes against a disallowed list."""

    BANNED_SWIFT_REASON = "bank identifier code is on the disallowed list"

    def __init__(self, banned_swift_codes: Iterable[str]) -> None:
        self._banned = frozenset(code.strip().upper() for code in banned_swift_codes)

    def is_banned(self, swift_code: str | None) -> bool:
        return bool(swift_code) and swift_code in self._banned

    def check(self, record: StructuredRecord) -> list[ComplianceFlag]:
        flags: list[ComplianceFlag] = []
        if record.swift_code and self.is_banned(record.swift_code):
            flags.append(
                ComplianceFlag(
                    field="swift_code",
                    value=record.swift_code,
                    reason=self.BANNED_SWIFT_REASON,
                )
            )
        return flags
