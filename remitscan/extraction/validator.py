"""Builds a StructuredRecord from the parsed backend payload."""

from typing import Any

from remitscan.extraction.exceptions import ExtractionParseError
from remitscan.extraction.models import StructuredRecord


def validate_and_build(data: dict[str, Any]) -> StructuredRecord:
    """Check field types and build a raw (not yet normalized) record.

    Missing or null fields become None; unknown keys are ignored. Required fields
    are not enforced here.

    Raises:
        ExtractionParseError: if a known field holds a non-string value.
    """
    values: dict[str, str | None] = {}
    for name in StructuredRecord.field_names():
        values[name] = _build_field(name, data.get(name))
    return StructuredRecord(**values)


def _build_field(name: str, raw: Any) -> str | None:
    if raw is None:
        return None
    if not isinstance(raw, str):
        raise ExtractionParseError(
            f"Malformed model response: '{name}' must be a string, got {type(raw).__name__}"
        )
    return raw
