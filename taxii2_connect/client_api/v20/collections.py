"""Offer the TAXII 2.0 Collections and Collection resources.

A TAXII Collection is an interface to a logical repository of CTI objects
provided by a TAXII Server. A TAXII Server can host multiple Collections per
API Root.
"""

from logging import getLogger
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional, Union

from taxii2_connect.client_api.cache import CachedCell
from taxii2_connect.client_api.common import validate_response
from taxii2_connect.client_api.tools import Filter, as_query_string, with_last_slash
from taxii2_connect.client_api.v20.models import (
    Bundle,
    CollectionInfo,
    CollectionsResponse,
    ManifestResponse,
    StatusInfo,
)
from taxii2_connect.client_api.v20.resource import BaseResource
from taxii2_connect.errors import (
    Taxii2CapabilityError,
    Taxii2InvalidIndexError,
    Taxii2NotFoundError,
)

if TYPE_CHECKING:
    from taxii2_connect.client_api.common import TaxiiConnect

logger = getLogger(__name__)


class Collections(BaseResource):
    """Collections endpoint of an API Root.

    The collections resource is a simple wrapper around a list of collection
    information.
    """

    def __init__(self, api_root_path: str, connection: "TaxiiConnect") -> None:
        """Initialize the Collections of an API Root.

        Args:
            api_root_path (str): The full path to the desired API Root.
            connection (TaxiiConnect): The shared connection.

        """
        self.api_root_path = with_last_slash(api_root_path)
        super().__init__(self.api_root_path + "collections/", connection)
        self._collections: CachedCell[dict[str, Any]] = CachedCell()

    def _cells(self) -> tuple[CachedCell[Any], ...]:
        return (self._collections,)

    async def get(self, index: Optional[int] = None) -> Any:
        """Information about the Collections hosted under this API Root.

        Args:
            index (Optional[int]): Index of the desired collection information,
                None for the list of all of them.

        Returns:
            The list of collection information, or one of them.

        Raises:
            Taxii2InvalidIndexError: If index is not an int in [0, number of collections).
            Taxii2InvalidResponseError: If the response is not a collections list.

        """
        response = await self.conn.fetch_this(
            self.path, self._collections, response_model=CollectionsResponse
        )
        collections = response.get("collections") or []
        if index is None:
            return collections
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(collections)
        ):
            raise Taxii2InvalidIndexError(index, len(collections))
        return collections[index]


class Collection(BaseResource):
    """Collection endpoint.

    The collection information is given by the caller, there is no need to list
    the Collections of the API Root first. Reads and writes are checked against
    `can_read` and `can_write` before any request is sent.

    Notes:
        * `get_objects`, `get_object` and `get_manifests` cache one response per
          endpoint whatever the filter: once fetched, a call with another filter
          returns the cached response until `invalidate` is called. Build the
          connection with `cache_by_filter=True` to cache one response per filter.

    """

    def __init__(
        self,
        collection_info: Union[CollectionInfo, Mapping[str, Any]],
        api_root_path: str,
        connection: "TaxiiConnect",
    ) -> None:
        """Initialize the Collection.

        Args:
            collection_info (CollectionInfo | Mapping): The collection information of this endpoint.
            api_root_path (str): The full path to the desired API Root.
            connection (TaxiiConnect): The shared connection.

        """
        if not isinstance(collection_info, CollectionInfo):
            collection_info = CollectionInfo.model_validate(collection_info)
        self.collection_info = collection_info
        self.api_root_path = with_last_slash(api_root_path)
        super().__init__(
            f"{self.api_root_path}collections/{collection_info.id}/", connection
        )
        self._info: CachedCell[dict[str, Any]] = CachedCell()
        self._objects: dict[str, CachedCell[dict[str, Any]]] = {}
        self._object: dict[str, CachedCell[dict[str, Any]]] = {}
        self._manifests: dict[str, CachedCell[dict[str, Any]]] = {}

    def _cells(self) -> Iterator[CachedCell[Any]]:
        yield self._info
        for cells in (self._objects, self._object, self._manifests):
            yield from cells.values()

    def _cell(
        self, cells: dict[str, CachedCell[Any]], filter: Optional[Filter]  # noqa: A002
    ) -> CachedCell[Any]:
        key = as_query_string(filter) if self.conn.cache_by_filter else ""
        if key not in cells:
            cells[key] = CachedCell()
        return cells[key]

    def _check_can_read(self, operation: str) -> None:
        if not self.collection_info.can_read:
            logger.warning(f"Collection {self.collection_info.id} does not allow reading")
            raise Taxii2CapabilityError(operation, self.collection_info.id)

    def _check_can_write(self, operation: str) -> None:
        if not self.collection_info.can_write:
            logger.warning(f"Collection {self.collection_info.id} does not allow writing")
            raise Taxii2CapabilityError(operation, self.collection_info.id)

    async def get(self) -> dict[str, Any]:
        """Retrieve the Collection information."""
        self._check_can_read("get")
        return await self.conn.fetch_this(  # type: ignore[no-any-return]
            self.path, self._info, response_model=CollectionInfo
        )

    async def get_objects(self, filter: Optional[Filter] = None) -> dict[str, Any]:  # noqa: A002
        """Retrieve the STIX 2 bundle of this Collection.

        Args:
            filter (Optional[Filter]): The filter to add as a query string, e.g.
                {"added_after": "2016-02-01T00:00:01.000Z"} or
                {"type": ["incident", "ttp", "actor"]}

        """
        self._check_can_read("get_objects")
        return await self.conn.fetch_this(  # type: ignore[no-any-return]
            self.path + "objects/",
            self._cell(self._objects, filter),
            filter,
            response_model=Bundle,
        )

    async def get_object(
        self, obj_id: str, filter: Optional[Filter] = None  # noqa: A002
    ) -> dict[str, Any]:
        """Retrieve a specific STIX 2 object of this Collection.

        Args:
            obj_id (str): The STIX object id to retrieve.
            filter (Optional[Filter]): The filter to add as a query string, e.g.
                {"version": "2016-01-01T01:01:01.000Z"}

        Raises:
            Taxii2NotFoundError: If the returned bundle has no object with this id.

        """
        self._check_can_read("get_object")
        url = f"{self.path}objects/{obj_id}/"
        bundle = await self.conn.fetch_this(
            url, self._cell(self._object, filter), filter, response_model=Bundle
        )
        for obj in bundle.get("objects") or []:
            if obj.get("id") == obj_id:
                return obj  # type: ignore[no-any-return]
        raise Taxii2NotFoundError(obj_id, url)

    async def add_object(self, bundle: Union[Bundle, Mapping[str, Any]]) -> dict[str, Any]:
        """Add a STIX 2 bundle to the objects of this Collection.

        Returns:
            The TAXII status of the request.

        """
        self._check_can_write("add_object")
        if isinstance(bundle, Bundle):
            bundle = bundle.model_dump(mode="json", exclude_none=True)
        url = self.path + "objects/"
        response = await self.conn.post(url, dict(bundle))
        return validate_response(response, StatusInfo, url)  # type: ignore[no-any-return]

    async def get_manifests(self, filter: Optional[Filter] = None) -> list[dict[str, Any]]:  # noqa: A002
        """Retrieve the manifest entries, metadata about the objects of this Collection."""
        self._check_can_read("get_manifests")
        response = await self.conn.fetch_this(
            self.path + "manifest/",
            self._cell(self._manifests, filter),
            filter,
            response_model=ManifestResponse,
        )
        return response.get("objects") or []  # type: ignore[no-any-return]

    async def get_manifest(
        self, obj_id: str, filter: Optional[Filter] = None  # noqa: A002
    ) -> dict[str, Any]:
        """Retrieve the manifest entry of a specific object of this Collection.

        Raises:
            Taxii2NotFoundError: If there is no manifest entry for this id.

        """
        self._check_can_read("get_manifest")
        for entry in await self.get_manifests(filter):
            if entry.get("id") == obj_id:
                return entry
        raise Taxii2NotFoundError(obj_id, self.path + "manifest/")
