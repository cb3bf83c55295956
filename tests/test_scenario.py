# pragma: no cover # do not include tests modules in coverage metrics
"""Test a client session from discovery to status, with only the transport mocked."""

import json
from unittest.mock import AsyncMock, Mock

import pytest
from aiohttp import ServerTimeoutError
from pydantic import SecretStr
from taxii2_connect import (
    Collection,
    Collections,
    Server,
    Status,
    TaxiiConnect,
)

BUNDLE = {
    "type": "bundle",
    "id": "bundle--1",
    "spec_version": "2.0",
    "objects": [{"type": "indicator", "id": "indicator--1"}],
}

ROUTES = {
    "https://h/taxii/": {"title": "T", "api_roots": ["https://h/a1/", "https://h/a2/"]},
    "https://h/a1/": {"title": "A1"},
    "https://h/a1/collections/": {
        "collections": [{"id": "c1", "title": "C1", "can_read": True, "can_write": True}]
    },
    "https://h/a1/collections/c1/objects/?match%5Btype%5D=indicator": BUNDLE,
    "https://h/a1/collections/c1/objects/": {"id": "s1", "status": "pending"},
    "https://h/a1/status/s1/": {"id": "s1", "status": "complete"},
}


@pytest.fixture
def transport_connection() -> TaxiiConnect:
    """Connection whose _request answers from ROUTES, https://h/a2/ times out."""
    conn = TaxiiConnect("https://h/", "user", SecretStr("*****"))  # noqa: S106

    async def request(method, query_url, data=None):
        if str(query_url) == "https://h/a2/":
            raise ServerTimeoutError("timeout")
        response = Mock()
        response.url = query_url
        response.status = 200
        response.raise_for_status = Mock()
        response.json = AsyncMock(return_value=ROUTES[str(query_url)])
        return response

    conn._request = AsyncMock(side_effect=request)  # type: ignore[method-assign]
    return conn


@pytest.mark.asyncio
async def test_client_session(transport_connection) -> None:
    """Test a read and write session on a server with an unreachable api root."""
    # Given a server whose api root a2 times out
    server = Server("/taxii", transport_connection)

    # When navigating discovery, api roots, collections, objects and status
    api_roots = await server.api_roots()
    api_roots_map = await server.api_roots_map()
    info = await Collections("https://h/a1/", transport_connection).get(0)
    collection = Collection(info, "https://h/a1", transport_connection)
    bundle = await collection.get_objects({"type": "indicator"})
    pending = await collection.add_object(bundle)
    complete = await Status("https://h/a1", pending["id"], transport_connection).get()

    # Then the unreachable api root should be dropped
    assert api_roots == [{"title": "A1"}]  # noqa: S101 # we indeed use assert in unit tests
    assert api_roots_map == {"https://h/a1/": {"title": "A1"}}  # noqa: S101
    # And every other step should succeed
    assert bundle == BUNDLE  # noqa: S101
    assert pending["status"] == "pending"  # noqa: S101
    assert complete["status"] == "complete"  # noqa: S101
    # And the bundle should have been posted as JSON
    post_calls = [
        call for call in transport_connection._request.await_args_list
        if call.args[0] == "POST"
    ]
    assert len(post_calls) == 1  # noqa: S101
    assert json.loads(post_calls[0].args[2]) == BUNDLE  # noqa: S101
