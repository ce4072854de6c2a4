import pytest

from remitscan.config.providers import ProviderResolver
from remitscan.config.settings import Settings


def _settings(**overrides: object) -> Settings:
    return Settings(_env_file=None, **overrides)  # type: ignore[arg-type]


class TestProviderResolver:
    def test_openai_uses_default_base_url(self) -> None:
        endpoint = ProviderResolver.resolve(_settings(ai_provider="openai", openai_api_key="sk-1"))
        assert endpoint.name == "openai"
        assert endpoint.api_key == "sk-1"
        assert endpoint.base_url is None

    def test_provider_name_is_case_insensitive(self) -> None:
        endpoint = ProviderResolver.resolve(_settings(ai_provider="OpenAI"))
        assert endpoint.name == "openai"

    def test_openai_compatible_requires_base_url(self) -> None:
        with pytest.raises(ValueError, match="openai_compatible_base_url"):
            ProviderResolver.resolve(_settings(ai_provider="openai_compatible"))

    def test_openai_compatible_uses_its_own_key(self) -> None:
        endpoint = ProviderResolver.resolve(
            _settings(
                ai_provider="openai_compatible",
                openai_compatible_base_url="http://llm.local/v1",
                openai_compatible_api_key="local-key",
            )
        )
        assert endpoint.base_url == "http://llm.local/v1"
        assert endpoint.api_key == "local-key"

    def test_known_host_gets_preset_base_url(self) -> None:
        endpoint = ProviderResolver.resolve(
            _settings(ai_provider="groq", provider_api_key="gk")
        )
        assert endpoint.base_url == "https://api.groq.com/openai/v1"
        assert endpoint.api_key == "gk"

    def test_unknown_provider_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown AI provider"):
            ProviderResolver.resolve(_settings(ai_provider="nope"))

    def test_timeout_is_carried(self) -> None:
        endpoint = ProviderResolver.resolve(_settings(ai_timeout_seconds=15))
        assert endpoint.timeout_seconds == 15

    def test_supported_lists_example(self) -> None:
        assert "example" in ProviderResolver.supported()
