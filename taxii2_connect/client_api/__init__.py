"""Offer the TAXII client API."""

from .cache import CachedCell
from .common import TaxiiConnect
from .fan_out import fetch_all
from .tools import as_query_string

__all__ = [
    "CachedCell",
    "TaxiiConnect",
    "as_query_string",
    "fetch_all",
]
