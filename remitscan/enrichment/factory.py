from remitscan.config.providers import ProviderResolver
from remitscan.config.settings import Settings
from remitscan.enrichment.enricher import Enricher
from remitscan.enrichment.example_client_adapter import ExampleEnrichmentAdapter
from remitscan.enrichment.openai_client_adapter import OpenAIEnrichmentAdapter


class EnricherFactory:
    """Creates the configured enrichment step.

    The hosted web-search tool is only available on the OpenAI provider; other
    OpenAI-compatible hosts get plain completions without citations.
    """

    @classmethod
    def create(cls, settings: Settings) -> Enricher:
        endpoint = ProviderResolver.resolve(settings)
        if endpoint.name == "example":
            return Enricher(client=ExampleEnrichmentAdapter(), model="example")
        client = OpenAIEnrichmentAdapter(
            api_key=endpoint.api_key,
            timeout_seconds=endpoint.timeout_seconds,
            base_url=endpoint.base_url,
            web_search=settings.enrichment_web_search and endpoint.name == "openai",
        )
        return Enricher(client=client, model=settings.enrichment_model_name)
