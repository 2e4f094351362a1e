"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from gamp.adapters.config import AppConfig
from gamp.adapters.http.constants import COLLECT_URL


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without GAMP_ variables or a stray .env file."""
    for name in (
        "GAMP_TRACKING_ID",
        "GAMP_CLIENT_ID",
        "GAMP_HTTP_METHOD",
        "GAMP_USE_CACHE_BUSTER",
        "GAMP_ANONYMIZE_IP",
        "GAMP_ENDPOINT_URL",
        "GAMP_TIMEOUT_SECONDS",
        "GAMP_USER_AGENT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.tracking_id is None
    assert config.client_id is None
    assert config.http_method == "POST"
    assert config.use_cache_buster is False
    assert config.anonymize_ip is False
    assert config.endpoint_url == COLLECT_URL
    assert config.timeout_seconds is None
    assert config.user_agent is None


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("GAMP_TRACKING_ID", "UA-12345-1")
    monkeypatch.setenv("GAMP_HTTP_METHOD", "get")
    monkeypatch.setenv("GAMP_USE_CACHE_BUSTER", "true")
    monkeypatch.setenv("GAMP_ANONYMIZE_IP", "1")
    monkeypatch.setenv("GAMP_TIMEOUT_SECONDS", "2.5")

    config = AppConfig()

    assert config.tracking_id == "UA-12345-1"
    assert config.http_method == "GET"
    assert config.use_cache_buster is True
    assert config.anonymize_ip is True
    assert config.timeout_seconds == 2.5


def test_config_loads_from_env_file(tmp_path: Path) -> None:
    """Given a .env file, when loading config, then its values are used."""
    env_file = tmp_path / ".env"
    env_file.write_text("GAMP_TRACKING_ID=UA-999-2\nGAMP_CLIENT_ID=123456789.987654321\n")

    config = AppConfig()

    assert config.tracking_id == "UA-999-2"
    assert config.client_id == "123456789.987654321"


def test_config_validates_http_method(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given invalid HTTP method, when loading config, then validation error is raised."""
    monkeypatch.setenv("GAMP_HTTP_METHOD", "PUT")

    with pytest.raises(ValueError, match="http_method must be either"):
        AppConfig()


def test_config_accepts_keyword_arguments() -> None:
    """Given keyword arguments, when creating config, then they override defaults."""
    config = AppConfig(tracking_id="UA-1-1", http_method="get", endpoint_url="http://localhost/c")

    assert config.tracking_id == "UA-1-1"
    assert config.http_method == "GET"
    assert config.endpoint_url == "http://localhost/c"
