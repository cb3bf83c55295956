"""Offer the TAXII 2.0 Server resource."""

from logging import getLogger
from typing import TYPE_CHECKING, Any

from taxii2_connect.client_api.cache import CachedCell
from taxii2_connect.client_api.fan_out import fetch_all
from taxii2_connect.client_api.v20.models import ApiRoot, Discovery
from taxii2_connect.client_api.v20.resource import BaseResource

if TYPE_CHECKING:
    from taxii2_connect.client_api.common import TaxiiConnect

logger = getLogger(__name__)


class Server(BaseResource):
    """Server encapsulates the discovery and API Roots endpoints.

    Examples:
        >>> import asyncio
        >>> from taxii2_connect import TaxiiConnect
        >>> conn = TaxiiConnect("https://example.com", "user", "password")
        >>> server = Server("/taxii/", conn)
        >>> server.path
        '/taxii/'
        >>> async def titles(server):
        ...     return [root.get("title") for root in await server.api_roots()]
        >>> asyncio.run(titles(server))  # doctest: +SKIP
        ['Default API Root']

    """

    def __init__(self, path: str, connection: "TaxiiConnect") -> None:
        """Initialize the Server.

        Args:
            path (str): The path to the discovery endpoint, e.g. "/taxii/".
            connection (TaxiiConnect): The shared connection.

        """
        super().__init__(path, connection)
        self._discovery: CachedCell[dict[str, Any]] = CachedCell()
        self._api_roots: CachedCell[dict[str, Any]] = CachedCell()

    def _cells(self) -> tuple[CachedCell[Any], ...]:
        return (self._discovery, self._api_roots)

    async def discovery(self) -> dict[str, Any]:
        """Information about the TAXII Server and the list of its API Roots."""
        return await self.conn.fetch_this(  # type: ignore[no-any-return]
            self.path, self._discovery, response_model=Discovery
        )

    async def _fetch_api_roots(self) -> dict[str, Any]:
        discovery = await self.discovery()
        urls = discovery.get("api_roots") or []
        logger.debug(f"Fetching {len(urls)} API Roots of {self.path}")
        return await fetch_all(self.conn, urls, response_model=ApiRoot)

    async def api_roots_map(self) -> dict[str, Any]:
        """Information of every reachable API Root, keyed by API Root URL.

        API Roots that could not be fetched, answered an empty object or a
        body that is not an API Root, are not in the mapping.
        """
        fetched = await self._api_roots.get_or_fetch(self._fetch_api_roots)
        return dict(fetched)

    async def api_roots(self) -> list[dict[str, Any]]:
        """Information of every reachable API Root.

        API Roots that could not be fetched, or answered an empty object, are
        dropped. The API Roots are fetched concurrently, the order of the list
        is not guaranteed to follow the discovery document.
        """
        return list((await self.api_roots_map()).values())
