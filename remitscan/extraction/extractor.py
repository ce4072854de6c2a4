"""AI-powered beneficiary field extractor."""

import json
from pathlib import Path

from remitscan.content.models import ContentUnit
from remitscan.extraction.base import BaseExtractor
from remitscan.extraction.client_base import BaseExtractionClient
from remitscan.extraction.exceptions import (
    ExtractionEmptyError,
    ExtractionError,
    ExtractionParseError,
)
from remitscan.extraction.models import REQUIRED_FIELDS, StructuredRecord
from remitscan.extraction.prompt_loader import load_json_schema, load_prompt_template
from remitscan.extraction.rules import normalize_record
from remitscan.extraction.validator import validate_and_build
from remitscan.logging.logger import Log


class Extractor(BaseExtractor):
    """Extracts a StructuredRecord from a content unit using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.0,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._json_schema = load_json_schema(json_schema_path)
        self._json_schema_dict = json.loads(self._json_schema)
        self._instructions = load_prompt_template(prompt_template_path).format(
            json_schema=self._json_schema,
        )

    async def extract(self, unit: ContentUnit) -> StructuredRecord:
        Log.debug(f"Extraction prompt:\n{self._instructions}")

        raw_response = await self._call_ai(unit)
        Log.debug(f"AI raw response:\n{raw_response}")

        parsed = self._parse_json(raw_response)
        record = normalize_record(validate_and_build(parsed))

        missing = [name for name in REQUIRED_FIELDS if getattr(record, name) is None]
        if missing:
            Log.warning(f"Extraction complete with missing fields: {', '.join(missing)}")
        else:
            Log.info("Extraction complete: all required fields present")
        return record

    async def _call_ai(self, unit: ContentUnit) -> str:
        try:
            raw = await self._client.create_extraction(
                model=self._model,
                temperature=self._temperature,
                instructions=self._instructions,
                content=unit,
                json_schema=self._json_schema_dict,
            )
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionEmptyError(
                f"Extraction failed: empty or invalid model response ({exc})"
            ) from exc
        if not raw or not raw.strip():
            raise ExtractionEmptyError("Extraction failed: empty or invalid model response")
        return raw

    @staticmethod
    def _parse_json(raw: str) -> dict[str, object]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ExtractionParseError(f"Malformed model response: invalid JSON ({exc})") from exc

        if not isinstance(parsed, dict):
            raise ExtractionParseError("Malformed model response: JSON must be an object")
        return parsed
