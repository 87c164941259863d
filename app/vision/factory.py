from typing import ClassVar

from app.config.settings import Settings
from app.vision.client_base import BaseVisionClient
from app.vision.example_client_adapter import ExampleClientAdapter
from app.vision.exceptions import VisionConfigurationError
from app.vision.openai_client_adapter import OpenAIClientAdapter


class VisionClientFactory:
    """Creates the configured AI vision client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }
    KEYLESS_PROVIDERS: ClassVar[frozenset[str]] = frozenset({"example", "ollama"})

    @classmethod
    def create(cls, settings: Settings) -> BaseVisionClient:
        """Create a vision client from application settings.

        Raises:
            VisionConfigurationError: if the provider is unknown or its
                credential is missing.
        """
        provider = cls.provider_name(settings)
        if provider in ("", "none"):
            raise VisionConfigurationError("AI extraction is disabled (ai_provider=none)")
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        api_key = settings.ai_api_key.strip()
        if not api_key and provider not in cls.KEYLESS_PROVIDERS:
            raise VisionConfigurationError(
                f"ai_api_key is required for ai_provider={provider}"
            )
        return OpenAIClientAdapter(
            api_key=api_key or provider,
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=base_url,
        )

    @staticmethod
    def provider_name(settings: Settings) -> str:
        return settings.ai_provider.strip().lower()

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = (settings.ai_base_url or "").strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise VisionConfigurationError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise VisionConfigurationError(
            f"Unknown AI provider '{provider}'. Choose from: {supported}"
        )
