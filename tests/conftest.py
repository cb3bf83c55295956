"""Conftest file for Pytest fixtures."""

from typing import Any
from unittest.mock import AsyncMock

from pydantic import SecretStr
from pytest import fixture
from taxii2_connect.client_api.common import TaxiiConnect


def make_connection(**kwargs: Any) -> TaxiiConnect:
    """Return a TaxiiConnect whose get and post never reach the network."""
    conn = TaxiiConnect(
        "https://example.com/",
        "user",
        SecretStr("*****"),  # noqa: S106  # we indeed harcode a secret here...
        **kwargs,
    )
    conn.get = AsyncMock()  # type: ignore[method-assign]
    conn.post = AsyncMock()  # type: ignore[method-assign]
    return conn


@fixture
def connection() -> TaxiiConnect:
    """Connection with mocked get and post."""
    return make_connection()


@fixture
def filter_keyed_connection() -> TaxiiConnect:
    """Connection with mocked get and post, caching Collections responses by filter."""
    return make_connection(cache_by_filter=True)
