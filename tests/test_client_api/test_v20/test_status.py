# pragma: no cover # do not include tests modules in coverage metrics
"""Test the Status resource module."""

import pytest
from taxii2_connect.client_api.v20.models import StatusInfo
from taxii2_connect.client_api.v20.status import Status
from taxii2_connect.errors import Taxii2InvalidResponseError

STATUS_ID = "2d086da7-4bdc-4f91-900e-d77486753710"


@pytest.mark.asyncio
async def test_status_is_never_cached(connection) -> None:
    """Test that each get performs a request."""
    # Given a pending then complete status
    connection.get.side_effect = [
        {"id": STATUS_ID, "status": "pending", "pending_count": 1},
        {"id": STATUS_ID, "status": "complete", "success_count": 1},
    ]
    status = Status("https://example.com/api1", STATUS_ID, connection)

    # When getting the status twice
    first = await status.get()
    second = await status.get()

    # Then both requests should reach the status endpoint
    assert first["status"] == "pending"  # noqa: S101 # we indeed use assert in unit tests
    assert StatusInfo.model_validate(second).success_count == 1  # noqa: S101
    assert connection.get.await_count == 2  # noqa: S101
    connection.get.assert_awaited_with(f"https://example.com/api1/status/{STATUS_ID}/")


def test_status_invalidate_is_harmless(connection) -> None:
    """Test that invalidate on a Status does nothing."""
    status = Status("/api1/", STATUS_ID, connection)
    status.invalidate()

    assert status.path == f"/api1/status/{STATUS_ID}/"  # noqa: S101


@pytest.mark.asyncio
async def test_status_invalid_response(connection) -> None:
    """Test that a response without status is reported."""
    connection.get.return_value = [{"id": STATUS_ID}]
    status = Status("https://example.com/api1", STATUS_ID, connection)

    with pytest.raises(Taxii2InvalidResponseError):
        await status.get()
