"""Tests for the settings store."""

import json
import pytest

from keap_client.core.models import ConfigurationError, EngineSettings
from keap_client.core.config_store import (
    get_base_dir,
    settings_path,
    save_settings,
    load_settings,
)


@pytest.fixture
def temp_home(tmp_path, monkeypatch):
    """Set up a temporary home directory for settings storage."""
    monkeypatch.setenv("KEAP_CLIENT_HOME", str(tmp_path))
    monkeypatch.delenv("KEAP_API_KEY", raising=False)
    return tmp_path


def test_get_base_dir_with_env_var(temp_home):
    """Test get_base_dir uses KEAP_CLIENT_HOME environment variable."""
    base_dir = get_base_dir()
    assert base_dir == temp_home
    assert base_dir.exists()


def test_get_base_dir_creates_directory(temp_home):
    temp_home.rmdir()
    assert not temp_home.exists()

    base_dir = get_base_dir()
    assert base_dir.exists()
    assert base_dir.is_dir()


def test_settings_path(temp_home):
    assert settings_path() == temp_home / "settings.json"


def test_load_settings_without_file(temp_home):
    """Test that defaults are used when nothing has been saved."""
    settings = load_settings()

    assert settings == EngineSettings()


def test_save_and_load_settings(temp_home):
    settings = EngineSettings(api_key="secret", timeout_ms=2000, retries=3, backoff_seconds=0.5)

    path = save_settings(settings)
    assert path.exists()

    loaded = load_settings("secret")
    assert loaded == settings


def test_api_key_never_written(temp_home):
    path = save_settings(EngineSettings(api_key="secret"))

    content = path.read_text()
    assert "secret" not in content
    assert "api_key" not in json.loads(content)


def test_api_key_from_environment(temp_home, monkeypatch):
    monkeypatch.setenv("KEAP_API_KEY", "env-key")

    assert load_settings().api_key == "env-key"
    assert load_settings("explicit").api_key == "explicit"


def test_load_settings_invalid_json(temp_home):
    settings_path().write_text("{ invalid json content")

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert "invalid json" in str(exc_info.value).lower()


def test_load_settings_not_an_object(temp_home):
    settings_path().write_text("[1, 2]")

    with pytest.raises(ConfigurationError, match="JSON object"):
        load_settings()


def test_load_settings_bad_values(temp_home):
    settings_path().write_text(json.dumps({"timeout_ms": "soon"}))

    with pytest.raises(ConfigurationError) as exc_info:
        load_settings()

    assert "failed to parse" in str(exc_info.value).lower()


def test_load_settings_negative_retries(temp_home):
    settings_path().write_text(json.dumps({"retries": -2}))

    with pytest.raises(ConfigurationError):
        load_settings()


def test_json_format(temp_home):
    """Test that saved JSON is properly formatted."""
    path = save_settings(EngineSettings())

    content = path.read_text()
    assert "\n" in content
    assert "  " in content
    assert json.loads(content)["retries"] == 1
