"""Shared fixtures for patching the HTTP layer."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def mock_http_client():
    """Patch httpx.AsyncClient and yield the client the code will use."""
    with patch("httpx.AsyncClient") as mock_client_class:
        mock_client = AsyncMock()
        mock_client_class.return_value.__aenter__.return_value = mock_client
        yield mock_client


@pytest.fixture
def make_response():
    """Build a fake httpx response with a status code and JSON body."""

    def _make(status_code: int = 200, body=None) -> MagicMock:
        response = MagicMock()
        response.status_code = status_code
        response.json.return_value = body
        response.text = str(body)
        return response

    return _make


@pytest.fixture
def full_page() -> dict:
    """A first page of 50 characters, Mickey Mouse included."""
    data = [{"_id": 4703, "name": "Mickey Mouse", "url": "https://example/4703"}]
    data += [{"_id": i, "name": f"Character {i}"} for i in range(1, 50)]
    return {
        "data": data,
        "count": 50,
        "totalPages": 149,
        "nextPage": "https://api.disneyapi.dev/character?page=2&pageSize=50",
        "previousPage": None,
    }
