"""TAXII 2.0 client library."""

from taxii2_connect.client_api import CachedCell, TaxiiConnect, as_query_string
from taxii2_connect.client_api.v20 import (
    Collection,
    CollectionInfo,
    Collections,
    Server,
    Status,
)
from taxii2_connect.config import Taxii2Settings, load_settings
from taxii2_connect.errors import (
    DataRetrievalError,
    Taxii2CapabilityError,
    Taxii2InvalidIndexError,
    Taxii2InvalidResponseError,
    Taxii2NotFoundError,
    Taxii2TransportError,
)

__version__ = "0.1.0"

__all__ = [
    "CachedCell",
    "Collection",
    "CollectionInfo",
    "Collections",
    "DataRetrievalError",
    "Server",
    "Status",
    "Taxii2CapabilityError",
    "Taxii2InvalidIndexError",
    "Taxii2InvalidResponseError",
    "Taxii2NotFoundError",
    "Taxii2Settings",
    "Taxii2TransportError",
    "TaxiiConnect",
    "as_query_string",
    "load_settings",
]
