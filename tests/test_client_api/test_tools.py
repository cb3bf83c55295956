# pragma: no cover # do not include tests modules in coverage metrics
"""Test the client API tools module."""

import pytest
from taxii2_connect.client_api.tools import (
    as_query_string,
    is_empty,
    with_last_slash,
    without_last_slash,
)


@pytest.mark.parametrize(
    "filter_, expected",
    [
        pytest.param(
            {"added_after": "2016-02-01T00:00:01.000Z"},
            "added_after=2016-02-01T00%3A00%3A01.000Z",
            id="added_after",
        ),
        pytest.param({"type": "incident"}, "match%5Btype%5D=incident", id="match"),
        pytest.param(
            {"type": ["incident", "ttp", "actor"]},
            "match%5Btype%5D=incident%2Cttp%2Cactor",
            id="list_value",
        ),
        pytest.param(
            {"added_after": "2016", "id": "indicator--1"},
            "added_after=2016&match%5Bid%5D=indicator--1",
            id="several_keys_in_insertion_order",
        ),
        pytest.param({"type": "a b&c"}, "match%5Btype%5D=a%20b%26c", id="escaped_value"),
        pytest.param({}, "", id="empty"),
        pytest.param(None, "", id="none"),
    ],
)
def test_as_query_string(filter_, expected) -> None:
    """Test the filter conversion to a query string."""
    # Given a filter
    # When converting it
    # Then the query string should match the TAXII format
    assert as_query_string(filter_) == expected  # noqa: S101 # we indeed use assert in unit tests


@pytest.mark.parametrize("path", ["/taxii", "/taxii/", "/taxii//"])
def test_with_last_slash_is_idempotent(path) -> None:
    """Test the trailing slash normalization."""
    # Given a path with or without trailing slashes
    # When normalizing it once or twice
    # Then there should be exactly one trailing slash
    assert with_last_slash(path) == "/taxii/"  # noqa: S101
    assert with_last_slash(with_last_slash(path)) == "/taxii/"  # noqa: S101


def test_without_last_slash() -> None:
    """Test the trailing slash removal."""
    assert without_last_slash("https://example.com/") == "https://example.com"  # noqa: S101
    assert without_last_slash("https://example.com") == "https://example.com"  # noqa: S101


@pytest.mark.parametrize(
    "obj, expected",
    [({}, True), (None, True), ({"title": "A1"}, False), ([], False)],
)
def test_is_empty(obj, expected) -> None:
    """Test the empty representation check."""
    assert is_empty(obj) is expected  # noqa: S101
