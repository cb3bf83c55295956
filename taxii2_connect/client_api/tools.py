"""Tools for the TAXII 2.0 client API."""

from typing import Any, Mapping, Optional, Sequence, Union
from urllib.parse import quote

FilterValue = Union[str, Sequence[str]]
Filter = Mapping[str, FilterValue]

# characters left unescaped by JavaScript encodeURIComponent
_URI_COMPONENT_SAFE = "-_.!~*'()"

ADDED_AFTER = "added_after"


def _escape(string: str) -> str:
    return quote(string, safe=_URI_COMPONENT_SAFE)


def _format_value(value: FilterValue) -> str:
    """Serialize a filter value, lists are comma separated (TAXII OR semantics)."""
    if isinstance(value, str):
        return value
    return ",".join(str(item) for item in value)


def as_query_string(filter: Optional[Filter]) -> str:  # noqa: A002
    """Convert a filter mapping into a TAXII 2.0 query string.

    Examples:
        >>> as_query_string({"added_after": "2016-02-01T00:00:01.000Z"})
        'added_after=2016-02-01T00%3A00%3A01.000Z'
        >>> as_query_string({"type": "incident"})
        'match%5Btype%5D=incident'
        >>> as_query_string({"type": ["incident", "ttp"]})
        'match%5Btype%5D=incident%2Cttp'
        >>> as_query_string({})
        ''

    """
    if not filter:
        return ""
    pairs = []
    for key, value in filter.items():
        wire_key = ADDED_AFTER if key == ADDED_AFTER else f"match[{key}]"
        pairs.append(f"{_escape(wire_key)}={_escape(_format_value(value))}")
    return "&".join(pairs)


def with_last_slash(url: str) -> str:
    """Return the url ending with exactly one slash.

    Examples:
        >>> with_last_slash("/taxii")
        '/taxii/'
        >>> with_last_slash("/taxii//")
        '/taxii/'

    """
    return url.rstrip("/") + "/"


def without_last_slash(url: str) -> str:
    """Return the url without trailing slashes."""
    return url.rstrip("/")


def is_empty(obj: Any) -> bool:
    """Check if a fetched representation carries no information."""
    return obj is None or (isinstance(obj, Mapping) and len(obj) == 0)
