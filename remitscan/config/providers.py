from dataclasses import dataclass
from typing import ClassVar

from remitscan.config.settings import Settings


@dataclass(frozen=True)
class ProviderEndpoint:
    """Connection details for an OpenAI-compatible AI provider."""

    name: str
    api_key: str
    base_url: str | None
    timeout_seconds: int


class ProviderResolver:
    """Resolves the configured ai_provider into an endpoint."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def supported(cls) -> list[str]:
        return ["example", "openai", "openai_compatible", *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS)]

    @classmethod
    def resolve(cls, settings: Settings) -> ProviderEndpoint:
        provider = settings.ai_provider.lower()
        return ProviderEndpoint(
            name=provider,
            api_key=cls._resolve_api_key(provider, settings),
            base_url=cls._resolve_base_url(provider, settings),
            timeout_seconds=settings.ai_timeout_seconds or 60,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider in ("openai", "example"):
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for ai_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        raise ValueError(
            f"Unknown AI provider '{provider}'. Choose from: {cls.supported()}"
        )

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        if provider == "openai":
            return settings.openai_api_key
        if provider == "openai_compatible":
            return settings.openai_compatible_api_key
        return settings.provider_api_key
