"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractorFactory.
"""

import json
from typing import ClassVar

from remitscan.content.models import ContentUnit
from remitscan.extraction.client_base import BaseExtractionClient


class ExampleExtractionAdapter(BaseExtractionClient):
    """Returns a fixed, valid extraction payload without any network call."""

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "beneficiary_name": "Example Trading Co., Ltd.",
        "account_number": "6222 0212-3456_7890",
        "swift_code": "icbkcnbj",
        "bank_name": "Industrial and Commercial Bank of China",
        "country": "China",
        "province": "Zhejiang",
        "city": "Yiwu",
        "address": "No. 1 Example Road",
        "goods_description": "Ready-made shoes",
    }

    def __init__(self, response: dict[str, object] | None = None) -> None:
        self._response = response if response is not None else self.DEFAULT_RESPONSE

    async def create_extraction(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        content: ContentUnit,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, instructions, content, json_schema
        return json.dumps(self._response)
