import httpx
import openai

from remitscan.enrichment.client_base import BaseEnrichmentClient
from remitscan.enrichment.exceptions import EnrichmentError
from remitscan.enrichment.models import RawCitation, SearchResponse


class OpenAIEnrichmentAdapter(BaseEnrichmentClient):
    """Enrichment client built on the OpenAI API.

    With web search enabled the Responses API is called with the hosted
    ``web_search`` tool and ``url_citation`` annotations become citations.
    Otherwise a plain chat completion is used and no citations are returned.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        web_search: bool = True,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )
        self._web_search = web_search

    async def search(self, *, model: str, prompt: str) -> SearchResponse:
        try:
            if self._web_search:
                return await self._search_with_tool(model, prompt)
            return await self._complete(model, prompt)
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EnrichmentError(f"Search provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EnrichmentError(f"Search provider API error: {exc}") from exc

    async def _search_with_tool(self, model: str, prompt: str) -> SearchResponse:
        response = await self._client.responses.create(
            model=model,
            input=prompt,
            tools=[{"type": "web_search"}],
        )
        citations: list[RawCitation] = []
        seen: set[str | None] = set()
        for item in response.output:
            if getattr(item, "type", None) != "message":
                continue
            for part in getattr(item, "content", None) or []:
                for annotation in getattr(part, "annotations", None) or []:
                    if getattr(annotation, "type", None) != "url_citation":
                        continue
                    uri = getattr(annotation, "url", None)
                    if uri in seen:
                        continue
                    seen.add(uri)
                    citations.append(
                        RawCitation(uri=uri, title=getattr(annotation, "title", None))
                    )
        return SearchResponse(text=response.output_text, citations=citations)

    async def _complete(self, model: str, prompt: str) -> SearchResponse:
        response = await self._client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
        )
        if not response.choices:
            return SearchResponse(text=None)
        return SearchResponse(text=response.choices[0].message.content)
