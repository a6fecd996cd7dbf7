"""Tests for the end-to-end demo."""

import pytest
import httpx
from unittest.mock import AsyncMock, Mock

from keap_client import KeapClient
from keap_client.core.models import ConfigurationError, HTTPStatusFailure
from keap_client.demo import run_demo

BASE = "https://api.infusionsoft.com/crm/rest/"


@pytest.fixture
def mock_http_client():
    client = Mock(spec=httpx.AsyncClient)
    client.request = AsyncMock()
    client.aclose = AsyncMock()
    return client


def contacts_page(items, next_url=""):
    return {"contacts": items, "count": 3, "next": next_url, "previous": ""}


@pytest.mark.asyncio
async def test_demo_success(mock_http_client, capsys):
    mock_http_client.request.side_effect = [
        httpx.Response(200, json={"name": "Acme", "email": "hq@acme.test"}),
        httpx.Response(200, json=contacts_page(
            [
                {
                    "id": 1,
                    "given_name": "Ada",
                    "family_name": "Lovelace",
                    "email_addresses": [{"email": "ada@example.com", "field": "EMAIL1"}],
                },
                {"id": 2},
            ],
            next_url=BASE + "v1/contacts?limit=2&offset=2",
        )),
        httpx.Response(200, json=contacts_page([{"id": 3}])),
    ]
    client = KeapClient(api_key="k", http_client=mock_http_client)

    await run_demo(client, page_size=2)

    captured = capsys.readouterr()
    assert "Account: Acme" in captured.out
    assert "Retrieved 2 of 3 contacts" in captured.out
    assert "Name: Ada Lovelace" in captured.out
    assert "Email: ada@example.com" in captured.out
    assert "Next page holds 1 contacts" in captured.out
    assert "Demo completed successfully" in captured.out
    urls = [c.kwargs["url"] for c in mock_http_client.request.call_args_list]
    assert urls == [
        BASE + "v1/account/profile",
        BASE + "v1/contacts?limit=2",
        BASE + "v1/contacts?limit=2&offset=2",
    ]


@pytest.mark.asyncio
async def test_demo_single_page(mock_http_client, capsys):
    mock_http_client.request.side_effect = [
        httpx.Response(200, json={"name": "Acme"}),
        httpx.Response(200, json=contacts_page([])),
    ]
    client = KeapClient(api_key="k", http_client=mock_http_client)

    await run_demo(client)

    captured = capsys.readouterr()
    assert "No further pages" in captured.out


@pytest.mark.asyncio
async def test_demo_missing_key(mock_http_client, capsys):
    client = KeapClient(http_client=mock_http_client)

    with pytest.raises(ConfigurationError):
        await run_demo(client)

    captured = capsys.readouterr()
    assert "KEAP_API_KEY" in captured.out


@pytest.mark.asyncio
async def test_demo_api_error(mock_http_client, capsys):
    mock_http_client.request.return_value = httpx.Response(401)
    client = KeapClient(api_key="bad", retries=0, http_client=mock_http_client)

    with pytest.raises(HTTPStatusFailure):
        await run_demo(client)

    captured = capsys.readouterr()
    assert "HTTP Status: 401" in captured.out
    assert "Invalid or revoked API key" in captured.out
