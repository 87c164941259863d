from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3000
    cors_allow_origins: list[str] = ["*"]

    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_content_types: list[str] = ["image/jpeg", "image/png", "application/pdf"]
    timezone: str = "UTC"

    pdf_engine: str = "pdfplumber"

    ocr_language: str = "eng"
    tesseract_cmd: str | None = None

    ai_provider: str = "gemini"
    ai_api_key: str = ""
    ai_model_name: str = "gemini-2.5-pro"
    ai_base_url: str | None = None
    ai_timeout_seconds: int = 60
    ai_unavailable_policy: Literal["fail", "degrade"] = "fail"

    scratch_dir: str | None = None
    extraction_workers: int = 4
    request_timeout_seconds: int = 120


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
