"""Shared fixtures for integration tests."""

import os

import pytest
import pytest_asyncio

from malapi import MALClient

# Skip all integration tests unless RUN_MALAPI_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_MALAPI_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_MALAPI_NETWORK_TESTS=1 to run",
)


@pytest_asyncio.fixture
async def mal():
    client_id = os.environ.get("MAL_CLIENT_ID")
    if not client_id:
        pytest.skip("MAL_CLIENT_ID is not set")
    async with MALClient(client_id=client_id) as client:
        yield client
