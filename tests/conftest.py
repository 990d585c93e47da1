"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from findologic_api.client import FindologicApi
from findologic_api.config import Settings
from tests.fixtures import API_URL, SHOPKEY


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings, independent of the environment."""
    return Settings(
        api_url="https://service.findologic.com/ps/{shopkey}/{endpoint}",
        request_timeout=3.0,
        alivetest_timeout=1.0,
    )


@pytest.fixture
def mock_http_client() -> MagicMock:
    """Create a mock HTTP client exposing request()."""
    client = MagicMock()
    client.request = MagicMock()
    return client


@pytest.fixture
def api(mock_http_client: MagicMock, test_settings: Settings) -> FindologicApi:
    """Create a client wired to the mock HTTP client."""
    return FindologicApi(
        {
            FindologicApi.SHOPKEY: SHOPKEY,
            FindologicApi.HTTP_CLIENT: mock_http_client,
            FindologicApi.API_URL: API_URL,
            FindologicApi.REQUEST_TIMEOUT: 1,
            FindologicApi.ALIVETEST_TIMEOUT: 1,
        },
        settings=test_settings,
    )


@pytest.fixture
def ready_api(api: FindologicApi) -> FindologicApi:
    """Client with every required parameter set."""
    return (
        api.set_shopurl("www.blubbergurken.io")
        .set_userip("127.0.0.1")
        .set_referer("www.blubbergurken.io/blubbergurken-sale")
        .set_revision("1.0.0")
    )
