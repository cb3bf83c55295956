"""Offer response models for the TAXII 2.0 resources.

Reference: https://docs.oasis-open.org/cti/taxii/v2.0/taxii-v2.0.html
"""

from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseModel(BaseModel):
    """Base model of a TAXII response, unknown fields are kept."""

    model_config = ConfigDict(extra="allow")


class Discovery(ResponseModel):
    """Model /taxii/ discovery response."""

    title: Optional[str] = Field(
        None, description="Human readable plain text name of the server"
    )
    description: Optional[str] = Field(None, description="Description of the server")
    contact: Optional[str] = Field(None, description="Contact information")
    default: Optional[str] = Field(None, description="URL of the default API Root")
    api_roots: list[str] = Field(
        default_factory=list, description="URLs of the API Roots of the server"
    )


class ApiRoot(ResponseModel):
    """Model <api-root>/ response."""

    title: Optional[str] = Field(
        None, description="Human readable plain text name of the API Root"
    )
    description: Optional[str] = Field(None, description="Description of the API Root")
    versions: list[str] = Field(
        default_factory=list, description="TAXII versions supported by the API Root"
    )
    max_content_length: Optional[int] = Field(
        None, description="Maximum size of a request body in octets"
    )


class CollectionInfo(ResponseModel):
    """Model <api-root>/collections/<id>/ response."""

    id: str = Field(..., description="Identifier of the Collection")
    title: str = Field("", description="Human readable plain text title")
    description: Optional[str] = Field(None, description="Description of the Collection")
    can_read: bool = Field(False, description="Whether the caller can read objects")
    can_write: bool = Field(False, description="Whether the caller can write objects")
    media_types: list[str] = Field(
        default_factory=list, description="Media types of the objects"
    )


class CollectionsResponse(ResponseModel):
    """Model <api-root>/collections/ response."""

    collections: list[CollectionInfo] = Field(default_factory=list)


class Bundle(ResponseModel):
    """Model of a STIX 2.0 bundle."""

    type: Literal["bundle"] = "bundle"
    id: Optional[str] = Field(None, description="Identifier of the bundle, bundle--<uuid>")
    spec_version: str = Field("2.0", description="STIX version of the objects")
    objects: list[dict[str, Any]] = Field(default_factory=list)


class ManifestEntry(ResponseModel):
    """Model of one entry of <api-root>/collections/<id>/manifest/ response."""

    id: str = Field(..., description="Identifier of the object")
    date_added: Optional[str] = Field(None, description="Date the object was added")
    versions: list[str] = Field(default_factory=list)
    media_types: list[str] = Field(default_factory=list)


class ManifestResponse(ResponseModel):
    """Model <api-root>/collections/<id>/manifest/ response."""

    objects: list[ManifestEntry] = Field(default_factory=list)


class StatusInfo(ResponseModel):
    """Model <api-root>/status/<status-id>/ response."""

    id: str = Field(..., description="Identifier of the status")
    status: Literal["pending", "complete"] = Field(...)
    request_timestamp: Optional[str] = Field(None)
    total_count: int = Field(0)
    success_count: int = Field(0)
    failure_count: int = Field(0)
    pending_count: int = Field(0)
    successes: list[str] = Field(default_factory=list)
    failures: list[dict[str, Any]] = Field(default_factory=list)
    pendings: list[str] = Field(default_factory=list)
