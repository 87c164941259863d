import pytest
from pydantic import ValidationError

from app.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_max_upload_bytes_is_10_mib(self) -> None:
        s = Settings()
        assert s.max_upload_bytes == 10 * 1024 * 1024

    def test_default_allowed_content_types(self) -> None:
        s = Settings()
        assert s.allowed_content_types == ["image/jpeg", "image/png", "application/pdf"]

    def test_default_timezone(self) -> None:
        s = Settings()
        assert s.timezone == "UTC"

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_ocr_language(self) -> None:
        s = Settings()
        assert s.ocr_language == "eng"

    def test_default_ai_unavailable_policy(self) -> None:
        s = Settings()
        assert s.ai_unavailable_policy == "fail"

    def test_default_cors_allows_any_origin(self) -> None:
        s = Settings()
        assert s.cors_allow_origins == ["*"]


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_ai_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_PROVIDER", "openai")
        monkeypatch.setenv("AI_API_KEY", "secret")
        s = Settings()
        assert s.ai_provider == "openai"
        assert s.ai_api_key == "secret"

    def test_loads_max_upload_bytes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "1024")
        s = Settings()
        assert s.max_upload_bytes == 1024

    def test_loads_allowed_content_types_from_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ALLOWED_CONTENT_TYPES", '["application/pdf"]')
        s = Settings()
        assert s.allowed_content_types == ["application/pdf"]


class TestSettingsValidation:
    def test_invalid_max_upload_bytes_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_UPLOAD_BYTES", "ten")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_ai_unavailable_policy_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("AI_UNAVAILABLE_POLICY", "retry")
        with pytest.raises(ValidationError):
            Settings()
