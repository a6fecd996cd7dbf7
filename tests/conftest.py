"""Shared fixtures."""

import pytest
from unittest.mock import AsyncMock, Mock

from keap_client.core.api import RequestEngine

BASE_URL = "https://api.infusionsoft.com/crm/rest/"


@pytest.fixture
def mock_engine():
    """Create a mock request engine with async HTTP helpers."""
    engine = Mock(spec=RequestEngine)
    engine.base_url = BASE_URL
    engine.request = AsyncMock()
    engine.get = AsyncMock()
    engine.post = AsyncMock()
    engine.put = AsyncMock()
    engine.patch = AsyncMock()
    engine.delete = AsyncMock(return_value=None)
    return engine


@pytest.fixture
def make_page():
    """Build raw collection responses."""

    def build(key, items, count=None, next_url="", previous_url=""):
        return {
            key: items,
            "count": len(items) if count is None else count,
            "next": next_url,
            "previous": previous_url,
        }

    return build
