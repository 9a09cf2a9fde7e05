"""Tests for settings loading and startup configuration checks."""

from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from vpsnet_mcp import main as main_module
from vpsnet_mcp.config import DEFAULT_API_URL, Settings, UpstreamConfig, get_settings

@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in (
        "VPSNET_API_KEY",
        "VPSNET_API_URL",
        "VPSNET_TIMEOUT",
        "VPSNET_TRANSPORT",
        "VPSNET_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    # Keep a developer's .env out of the picture.
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()

def test_defaults(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")

    settings = Settings()

    assert settings.api_key == "secret"
    assert settings.api_url == DEFAULT_API_URL == "https://api.vpsnet.com"
    assert settings.transport == "stdio"
    assert settings.timeout == 30.0

def test_api_url_override(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")
    monkeypatch.setenv("VPSNET_API_URL", "https://staging.vpsnet.test/")

    settings = Settings()

    assert settings.api_url == "https://staging.vpsnet.test"
    assert settings.upstream() == UpstreamConfig(
        base_url="https://staging.vpsnet.test", api_key="secret"
    )

def test_missing_api_key_is_rejected():
    with pytest.raises(ValidationError):
        Settings()

def test_blank_api_key_is_rejected(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "   ")

    with pytest.raises(ValidationError):
        Settings()

def test_env_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("VPSNET_API_KEY=from-dotenv\n")

    assert Settings().api_key == "from-dotenv"

def test_upstream_config_is_immutable():
    config = UpstreamConfig(base_url="https://api.vpsnet.com", api_key="k")

    with pytest.raises(ValidationError):
        config.api_key = "other"

def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")

    assert get_settings() is get_settings()

def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")
    monkeypatch.setenv("VPSNET_LOG_LEVEL", "debug")

    assert Settings().log_level == "DEBUG"

def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")
    monkeypatch.setenv("VPSNET_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError) as exc_info:
        Settings()

    assert "log_level" in str(exc_info.value)

def test_main_exits_without_api_key(monkeypatch):
    run = MagicMock()
    monkeypatch.setattr(main_module.anyio, "run", run)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    run.assert_not_called()

def test_main_starts_stdio_transport(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")
    run = MagicMock()
    monkeypatch.setattr(main_module.anyio, "run", run)

    main_module.main()

    run.assert_called_once()
    func, settings = run.call_args.args
    assert func is main_module.run_stdio_server
    assert settings.api_key == "secret"

def test_main_exits_on_unknown_log_level(monkeypatch):
    monkeypatch.setenv("VPSNET_API_KEY", "secret")
    monkeypatch.setenv("VPSNET_LOG_LEVEL", "verbose")
    run = MagicMock()
    monkeypatch.setattr(main_module.anyio, "run", run)

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    run.assert_not_called()
