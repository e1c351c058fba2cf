import logging

from repo_tracker.settings import Settings, get_settings
from repo_tracker.logging_setup import setup_logging


def test_defaults(monkeypatch):
    monkeypatch.delenv("APP_API_PORT", raising=False)
    cfg = Settings(_env_file=None)
    assert cfg.env == "dev"
    assert cfg.api_port == 3333
    assert cfg.api_workers == 1
    assert cfg.cors_origins == ["*"]
    assert cfg.cors_allow_credentials is False

def test_env_prefix(monkeypatch):
    monkeypatch.setenv("APP_API_PORT", "8080")
    monkeypatch.setenv("APP_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APP_CORS_ORIGINS", '["http://localhost:3000"]')
    cfg = get_settings()
    assert cfg.api_port == 8080
    assert cfg.log_level == "DEBUG"
    assert cfg.cors_origins == ["http://localhost:3000"]

def test_setup_logging_falls_back_to_info(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    setup_logging("not-a-level")
    assert calls["level"] == logging.INFO
    setup_logging("debug")
    assert calls["level"] == logging.DEBUG

def test_setup_logging_defaults_to_app_log_level(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.update(kw))
    monkeypatch.setenv("APP_LOG_LEVEL", "WARNING")
    # A bare LOG_LEVEL must not override the APP_ prefixed setting
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    setup_logging()
    assert calls["level"] == logging.WARNING

def test_get_settings_rereads_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "staging")
    first = get_settings()
    monkeypatch.setenv("APP_ENV", "prod")
    second = get_settings()
    assert first.env == "staging"
    assert second.env == "prod"
