"""Offer python resources and response models for the TAXII 2.0 API."""

from .collections import Collection, Collections
from .models import (
    ApiRoot,
    Bundle,
    CollectionInfo,
    CollectionsResponse,
    Discovery,
    ManifestEntry,
    ManifestResponse,
    StatusInfo,
)
from .server import Server
from .status import Status

__all__ = [
    "ApiRoot",
    "Bundle",
    "Collection",
    "CollectionInfo",
    "Collections",
    "CollectionsResponse",
    "Discovery",
    "ManifestEntry",
    "ManifestResponse",
    "Server",
    "Status",
    "StatusInfo",
]
