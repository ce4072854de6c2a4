from remitscan.config.providers import ProviderResolver
from remitscan.config.settings import Settings
from remitscan.extraction.base import BaseExtractor
from remitscan.extraction.example_client_adapter import ExampleExtractionAdapter
from remitscan.extraction.extractor import Extractor
from remitscan.extraction.openai_client_adapter import OpenAIExtractionAdapter


class ExtractorFactory:
    """Creates the configured extraction step."""

    @classmethod
    def create(cls, settings: Settings) -> BaseExtractor:
        endpoint = ProviderResolver.resolve(settings)
        if endpoint.name == "example":
            return Extractor(client=ExampleExtractionAdapter(), model="example")
        client = OpenAIExtractionAdapter(
            api_key=endpoint.api_key,
            timeout_seconds=endpoint.timeout_seconds,
            base_url=endpoint.base_url,
        )
        return Extractor(
            client=client,
            model=settings.extraction_model_name,
            temperature=settings.extraction_temperature,
        )
