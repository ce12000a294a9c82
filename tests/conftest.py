"""
Shared test configuration and fixtures for client tests.
"""

import httpx
import pytest

from fixtures.transport import RecordingTransport
from oxr.infrastructure.client import ApiClient

TEST_APP_ID = "test_app_id_12345"


@pytest.fixture
def make_client():
    """Build an ApiClient whose requests are answered by a RecordingTransport"""
    def _make(app_id=TEST_APP_ID, protocol="https", api_url="openexchangerates.org/api", **transport_kwargs):
        transport = RecordingTransport(**transport_kwargs)
        client = ApiClient(app_id, protocol, api_url, client=httpx.Client(transport=transport))
        return client, transport
    return _make
