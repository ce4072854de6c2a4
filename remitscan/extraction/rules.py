"""Deterministic field rules applied to every extracted record."""

import re
from collections.abc import Callable
from dataclasses import replace

from remitscan.extraction.models import StructuredRecord

SWIFT_PRIMARY_OFFICE_SUFFIX = "XXX"
_SHORT_SWIFT_LENGTH = 8

_ACCOUNT_SEPARATORS_RE = re.compile(r"[\s\-_]")
_UPPERCASE_FIELDS = ("country", "province", "city", "address")
_TRIMMED_FIELDS = ("bank_name", "goods_description")


def clean_beneficiary_name(value: str) -> str:
    """Keep letters, ASCII digits and whitespace; upper-case the rest."""
    kept = "".join(
        ch for ch in value if ch.isalpha() or "0" <= ch <= "9" or ch.isspace()
    )
    return kept.upper()


def clean_account_number(value: str) -> str:
    return _ACCOUNT_SEPARATORS_RE.sub("", value)


def normalize_swift_code(value: str) -> str:
    """Trim and upper-case; an 8-character code gets the primary office suffix.

    Codes of any other length pass through unpadded and unvalidated.
    """
    code = value.strip().upper()
    if len(code) == _SHORT_SWIFT_LENGTH:
        code += SWIFT_PRIMARY_OFFICE_SUFFIX
    return code


def normalize_record(record: StructuredRecord) -> StructuredRecord:
    changes: dict[str, str | None] = {
        "beneficiary_name": _apply(record.beneficiary_name, clean_beneficiary_name),
        "account_number": _apply(record.account_number, clean_account_number),
        "swift_code": _apply(record.swift_code, normalize_swift_code),
    }
    for name in _UPPERCASE_FIELDS:
        changes[name] = _apply(getattr(record, name), str.upper)
    for name in _TRIMMED_FIELDS:
        changes[name] = _apply(getattr(record, name), str.strip)
    return replace(record, **changes)


def _apply(value: str | None, rule: Callable[[str], str]) -> str | None:
    if value is None:
        return None
    result = rule(value).strip()
    return result or None
