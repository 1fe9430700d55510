"""Tests for environment-driven settings."""

from __future__ import annotations

from miro.config import Settings


def test_defaults(monkeypatch):
    for name in ("ACCESS_TOKEN", "BASE_URL", "API_VERSION", "USER_AGENT", "TIMEOUT"):
        monkeypatch.delenv(f"MIRO_{name}", raising=False)
    s = Settings(_env_file=None)
    assert s.access_token == ""
    assert s.base_url == "https://api.miro.com/"
    assert s.api_version == "v1"
    assert s.user_agent == ""
    assert s.timeout == 30.0


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("MIRO_ACCESS_TOKEN", "secret")
    monkeypatch.setenv("MIRO_USER_AGENT", "ci-bot/2")
    monkeypatch.setenv("MIRO_TIMEOUT", "2.5")
    monkeypatch.setenv("MIRO_LOG_FORMAT", "json")
    s = Settings(_env_file=None)
    assert s.access_token == "secret"
    assert s.user_agent == "ci-bot/2"
    assert s.timeout == 2.5
    assert s.log_format == "json"


def test_env_file(tmp_path, monkeypatch):
    monkeypatch.delenv("MIRO_ACCESS_TOKEN", raising=False)
    env = tmp_path / ".env"
    env.write_text("MIRO_ACCESS_TOKEN=from-file\nMIRO_API_VERSION=v2\n", encoding="utf-8")
    s = Settings(_env_file=env)
    assert s.access_token == "from-file"
    assert s.api_version == "v2"
