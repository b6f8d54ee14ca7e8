from __future__ import annotations

import pytest

from contactgrid.shared.config.settings import AppConfig, SecurityConfig, SessionConfig
from contactgrid.shared.logging import sanitize_message


def test_session_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SESSION_LIFETIME_MINUTES", raising=False)
    monkeypatch.delenv("SESSION_COOKIE_NAME", raising=False)

    config = SessionConfig()

    assert config.lifetime_minutes == 20
    assert config.lifetime_seconds == 1200
    assert config.cookie_name == "auth_token"


def test_security_reads_comma_separated_origins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("COOKIE_SECURE", "true")

    config = SecurityConfig()

    assert config.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.cookie_secure is True


def test_production_refuses_insecure_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SECRET_KEY", "dev")

    with pytest.raises(SystemExit):
        AppConfig()


def test_sanitize_message_redacts_secrets() -> None:
    text = sanitize_message(
        "password=redpill123 url=mysql+pymysql://root:hunter2@db/contacts"
    )

    assert "redpill123" not in text
    assert "hunter2" not in text
    assert "***REDACTED***" in text
