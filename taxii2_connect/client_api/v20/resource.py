"""Offer the base class of the TAXII 2.0 resources."""

from abc import ABC
from typing import TYPE_CHECKING, Any, Iterable

from taxii2_connect.client_api.cache import CachedCell
from taxii2_connect.client_api.tools import with_last_slash

if TYPE_CHECKING:
    from taxii2_connect.client_api.common import TaxiiConnect


class BaseResource(ABC):  # noqa: B024 # Even though there is no abstract method, it is still an abstract class.
    """Base class of a cacheable TAXII resource endpoint.

    A resource holds the path of its endpoint, the shared connection and the
    cache cells of the representations it fetched. `invalidate` empties every
    cell returned by `_cells` so that the next call performs a server request.
    """

    def __init__(self, path: str, connection: "TaxiiConnect") -> None:
        """Initialize the resource on a path, normalized to end with one slash."""
        self.path = with_last_slash(path)
        self.conn = connection

    def _cells(self) -> Iterable[CachedCell[Any]]:
        """Cache cells owned by the resource, none by default."""
        return ()

    def invalidate(self) -> None:
        """Reset the caches so that a server request will be required."""
        for cell in self._cells():
            cell.invalidate()

    def __repr__(self) -> str:
        """Represent the resource by its endpoint."""
        return f"{type(self).__name__}(path={self.path!r})"
