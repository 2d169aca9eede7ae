"""Test configuration and fixtures for the GhostMarket client tests."""

import json
from collections.abc import AsyncGenerator, Callable, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_asyncio

from ghostmarket.client import GhostMarketAPI, GhostMarketAPIConfig

TEST_BASE_URL = "http://test.example.com"
TEST_API_KEY = "test-api-key"

ENV_VARS = (
    "GHOSTMARKET_NETWORK",
    "GHOSTMARKET_API_KEY",
    "GHOSTMARKET_API_BASE_URL",
    "GHOSTMARKET_USE_READ_ONLY_PROVIDER",
)

ResponseFactory = Callable[..., AsyncMock]


def _make_response(
    status: int = 200,
    json_data: Any = None,
    text: str | None = None,
) -> AsyncMock:
    """Create a mock aiohttp response with a buffered body."""
    if text is None:
        text = "" if json_data is None else json.dumps(json_data)
    response = AsyncMock()
    response.status = status
    response.read = AsyncMock(return_value=text.encode())
    response.text = AsyncMock(return_value=text)
    response.json = AsyncMock(return_value=json_data)
    return response


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep GHOSTMARKET_* variables from the host out of the tests."""
    for env_var in ENV_VARS:
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def make_response() -> ResponseFactory:
    """Return a factory for mock aiohttp responses."""
    return _make_response


@pytest.fixture
def log_callback() -> MagicMock:
    """Create a log callback that records its calls."""
    return MagicMock()


@pytest_asyncio.fixture
async def api(log_callback: MagicMock) -> AsyncGenerator[GhostMarketAPI]:
    """Create a connected client with an API key and a test base URL."""
    client = GhostMarketAPI(
        GhostMarketAPIConfig(api_key=TEST_API_KEY, api_base_url=TEST_BASE_URL),
        log_callback,
    )
    await client.connect()
    yield client
    await client.close()


@pytest.fixture
def mock_request(api: GhostMarketAPI) -> Generator[MagicMock]:
    """Patch the session of ``api``; every request answers 200 with ``{}``."""
    with patch.object(api._base_client._session, "request") as mock_request:
        mock_request.return_value.__aenter__ = AsyncMock(
            return_value=_make_response(200, {})
        )
        yield mock_request
