from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_concurrent_jobs: int = 5
    normalization_workers: int = 4

    pdf_mode: str = "binary"
    pdf_engine: str = "pdfplumber"

    ai_provider: str = "openai"
    ai_timeout_seconds: int = 60
    openai_api_key: str = ""
    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    provider_api_key: str = ""

    extraction_model_name: str = "gpt-4o-mini"
    extraction_temperature: float = 0.0
    enrichment_model_name: str = "gpt-4o-mini"
    enrichment_web_search: bool = True

    progress_base_seconds: float = 5.0
    progress_seconds_per_mb: float = 2.0
    progress_acceleration: float = 1.5
    progress_completion_pause_seconds: float = 0.5

    banned_swift_codes: list[str] = ["CZCBCN2X", "CZCBCN2XXXX"]
