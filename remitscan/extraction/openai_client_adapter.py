import mimetypes

import httpx
import openai

from remitscan.content.models import BinaryContent, ContentUnit, TextContent
from remitscan.extraction.client_base import BaseExtractionClient
from remitscan.extraction.exceptions import ExtractionEmptyError, ExtractionNetworkError


class OpenAIExtractionAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat completions API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def create_extraction(
        self,
        *,
        model: str,
        temperature: float,
        instructions: str,
        content: ContentUnit,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "beneficiary_record",
                        "strict": True,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {"role": "system", "content": instructions},
                    {"role": "user", "content": [content_part(content)]},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ExtractionNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ExtractionNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ExtractionEmptyError("AI returned no choices")
        text = response.choices[0].message.content
        if not text:
            raise ExtractionEmptyError("AI returned empty response")
        return text


def content_part(content: ContentUnit) -> dict[str, object]:
    """Map a content unit onto a chat message part."""
    if isinstance(content, TextContent):
        return {"type": "text", "text": content.text}
    data_url = _data_url(content)
    if content.mime_type.startswith("image/"):
        return {"type": "image_url", "image_url": {"url": data_url}}
    extension = mimetypes.guess_extension(content.mime_type) or ".bin"
    return {
        "type": "file",
        "file": {"filename": f"document{extension}", "file_data": data_url},
    }


def _data_url(content: BinaryContent) -> str:
    return f"data:{content.mime_type};base64,{content.data}"
