"""Tests for the CLI commands."""

import argparse
import json
import pytest
import httpx
from unittest.mock import AsyncMock, Mock, patch

from keap_client import KeapClient
from keap_client.cli.main import cmd_configure, cmd_contacts, cmd_demo, cmd_tags, main
from keap_client.core.config_store import load_settings


@pytest.fixture
def temp_config_dir(tmp_path, monkeypatch):
    """Create temporary config directory."""
    monkeypatch.setenv("KEAP_CLIENT_HOME", str(tmp_path))
    monkeypatch.delenv("KEAP_API_KEY", raising=False)
    return tmp_path


@pytest.fixture
def mock_http_client():
    client = Mock(spec=httpx.AsyncClient)
    client.request = AsyncMock()
    client.aclose = AsyncMock()
    return client


def patched_client(mock_http_client):
    """Patch create_client so commands talk to the mock HTTP client."""
    return patch(
        "keap_client.cli.main.create_client",
        side_effect=lambda api_key=None: KeapClient(api_key="k", http_client=mock_http_client),
    )


def test_configure_saves_settings(temp_config_dir, capsys):
    args = argparse.Namespace(timeout=1500, retries=3, backoff=0.5, base_url=None)

    cmd_configure(args)

    settings = load_settings()
    assert settings.timeout_ms == 1500
    assert settings.retries == 3
    assert settings.backoff_seconds == 0.5
    captured = capsys.readouterr()
    assert "Settings saved to" in captured.out


def test_configure_rejects_negative_retries(temp_config_dir, capsys):
    args = argparse.Namespace(timeout=None, retries=-1, backoff=None, base_url=None)

    with pytest.raises(SystemExit) as exc_info:
        cmd_configure(args)

    assert exc_info.value.code == 1
    assert not (temp_config_dir / "settings.json").exists()


def test_contacts_command(temp_config_dir, mock_http_client, capsys):
    mock_http_client.request.return_value = httpx.Response(200, json={
        "contacts": [{"id": 1, "given_name": "Ada"}],
        "count": 12,
        "next": "",
        "previous": "",
    })
    args = argparse.Namespace(api_key=None, limit=1, offset=None, email=None)

    with patched_client(mock_http_client):
        cmd_contacts(args)

    captured = capsys.readouterr()
    assert json.loads(captured.out) == [{"id": 1, "given_name": "Ada"}]
    assert "1 of 12 contacts" in captured.err


def test_tags_command_api_error(temp_config_dir, mock_http_client, capsys):
    mock_http_client.request.return_value = httpx.Response(500)
    args = argparse.Namespace(api_key=None, limit=10, offset=None, name="VIP")

    with patched_client(mock_http_client):
        with pytest.raises(SystemExit) as exc_info:
            cmd_tags(args)

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "API error" in captured.err
    assert "HTTP Status: 500" in captured.err


def test_account_command_without_key(temp_config_dir, capsys):
    with patch("sys.argv", ["keap-client", "account"]), patch("keap_client.cli.main.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    captured = capsys.readouterr()
    assert "API key is not set" in captured.err


def test_main_without_command(capsys):
    with patch("sys.argv", ["keap-client"]), patch("keap_client.cli.main.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1


def test_demo_command(temp_config_dir, mock_http_client, capsys):
    mock_http_client.request.side_effect = [
        httpx.Response(200, json={"name": "Acme"}),
        httpx.Response(200, json={"contacts": [], "count": 0, "next": "", "previous": ""}),
    ]
    args = argparse.Namespace(api_key=None, limit=3)

    with patched_client(mock_http_client):
        cmd_demo(args)

    captured = capsys.readouterr()
    assert "Demo completed successfully" in captured.out
    assert mock_http_client.request.call_args.kwargs["url"].endswith("v1/contacts?limit=3")
