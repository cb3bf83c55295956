"""Offer python errors for the TAXII 2.0 client."""

from typing import Any, Optional


class DataRetrievalError(Exception):
    """Generic error for data retrieval."""


class Taxii2TransportError(DataRetrievalError):
    """The request could not be performed or its response was not valid JSON.

    Attributes:
        url (str): The requested URL.
        status (Optional[int]): The HTTP status code, None for network-level failures.

    """

    def __init__(
        self, message: str, url: str = "", status: Optional[int] = None
    ) -> None:
        """Initialize the error."""
        super().__init__(message)
        self.url = url
        self.status = status


class Taxii2InvalidResponseError(Taxii2TransportError):
    """The response is JSON but not shaped like the expected TAXII resource."""


class Taxii2CapabilityError(DataRetrievalError):
    """The Collection does not allow the requested read or write.

    Notes:
        * Raised before any request is sent to the server.

    """

    def __init__(self, operation: str, collection_id: Any) -> None:
        """Initialize the error."""
        super().__init__(
            f"Collection {collection_id} does not allow {operation}"
        )
        self.operation = operation
        self.collection_id = collection_id


class Taxii2NotFoundError(DataRetrievalError, LookupError):
    """No object or manifest entry with the requested id was returned."""

    def __init__(self, obj_id: str, url: str = "") -> None:
        """Initialize the error."""
        super().__init__(f"No entry with id {obj_id} found at {url}")
        self.obj_id = obj_id
        self.url = url


class Taxii2InvalidIndexError(DataRetrievalError, IndexError):
    """The requested index is outside the Collections list."""

    def __init__(self, index: Any, length: int) -> None:
        """Initialize the error."""
        super().__init__(
            f"Invalid collections index {index!r}, expected an int in [0, {length})"
        )
        self.index = index
        self.length = length


class ConfigError(Exception):
    """Generic error for configuration loading."""


class ConfigValidationError(ConfigError):
    """The configuration values could not be validated."""
