"""Tests for settings loading."""

from code_verify.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("CODE_VERIFY_PORT", raising=False)
    settings = Settings()
    assert settings.port == 5000
    assert settings.cors_origins == ["*"]


def test_port_from_environment(monkeypatch):
    monkeypatch.delenv("CODE_VERIFY_PORT", raising=False)
    monkeypatch.setenv("PORT", "8080")
    assert Settings().port == 8080


def test_prefixed_environment(monkeypatch):
    monkeypatch.setenv("CODE_VERIFY_PORT", "9000")
    monkeypatch.setenv("CODE_VERIFY_API_BASE_URL", "http://api.test")
    settings = Settings()
    assert settings.port == 9000
    assert settings.api_base_url == "http://api.test"
