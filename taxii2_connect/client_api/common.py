"""Offer the connection shared by every TAXII 2.0 resource."""

import asyncio
import json
from datetime import timedelta
from logging import getLogger
from typing import TYPE_CHECKING, Any, Optional, Union

from aiohttp import (
    BasicAuth,
    ClientError,
    ClientResponseError,
    ClientSession,
    ClientTimeout,
)
from pydantic import BaseModel, SecretStr, ValidationError
from taxii2_connect.client_api.cache import CachedCell
from taxii2_connect.client_api.tools import (
    Filter,
    as_query_string,
    without_last_slash,
)
from taxii2_connect.errors import (
    Taxii2InvalidResponseError,
    Taxii2TransportError,
)
from yarl import URL

if TYPE_CHECKING:
    from aiohttp import ClientResponse
    from taxii2_connect.config import Taxii2Settings

TAXII_MEDIA_TYPE = "application/vnd.oasis.taxii+json"
TAXII_VERSION = "2.0"

logger = getLogger(__name__)


def validate_response(data: Any, response_model: type[BaseModel], url: str = "") -> Any:
    """Check a decoded body against a response model and return it unchanged.

    Raises:
        Taxii2InvalidResponseError: If the body does not validate.

    """
    try:
        response_model.model_validate(data)
    except ValidationError as e:
        logger.debug(f"Received Invalid Data: {data}")
        raise Taxii2InvalidResponseError(
            f"Invalid response from {url}: {e}", url=url
        ) from e
    return data


class TaxiiConnect:
    """Connection to a TAXII 2.0 server.

    Holds the server base URL and the credentials, and performs the authenticated
    requests for the resources built on top of it. The instance is never mutated
    after construction and can be shared by any number of resources.

    Examples:
        >>> conn = TaxiiConnect("https://example.com/", "user", "password")
        >>> conn.base_url
        'https://example.com'
        >>> conn.headers["version"]
        '2.0'

    """

    def __init__(
        self,
        url: str,
        user: str,
        password: Union[str, SecretStr],
        timeout: timedelta = timedelta(seconds=60),
        cache_by_filter: bool = False,
    ) -> None:
        """Initialize the connection.

        Args:
            url (str): The base url of the TAXII server, e.g. https://example.com/
            user (str): The user name required for authentication.
            password (str | SecretStr): The user password required for authentication.
            timeout (timedelta): The total timeout of one request.
            cache_by_filter (bool): Key the objects and manifests caches of the
                Collections by filter. Default False, one cache per endpoint.

        """
        if isinstance(password, str):
            password = SecretStr(password)
        self._base_url = without_last_slash(url)
        self._user = user
        self._password = password
        self._auth = BasicAuth(user, password.get_secret_value())
        timeout_seconds = timeout.total_seconds()
        self._timeout = ClientTimeout(total=timeout_seconds)
        self._cache_by_filter = cache_by_filter

    @classmethod
    def from_settings(cls, settings: "Taxii2Settings") -> "TaxiiConnect":
        """Build a connection from loaded settings."""
        return cls(
            url=str(settings.url),
            user=settings.user,
            password=settings.password,
            timeout=settings.timeout,
            cache_by_filter=settings.cache_by_filter,
        )

    @property
    def base_url(self) -> str:
        """The server base URL, without trailing slash."""
        return self._base_url

    @property
    def user(self) -> str:
        """The user name."""
        return self._user

    @property
    def cache_by_filter(self) -> bool:
        """Whether Collections key their objects and manifests caches by filter."""
        return self._cache_by_filter

    @property
    def headers(self) -> dict[str, str]:
        """Headers of a read request."""
        return {
            "Accept": TAXII_MEDIA_TYPE,
            "version": TAXII_VERSION,
            "Authorization": self._auth.encode(),
        }

    @property
    def post_headers(self) -> dict[str, str]:
        """Headers of a write request."""
        return {**self.headers, "Content-Type": TAXII_MEDIA_TYPE}

    def resolve(self, path: str) -> str:
        """Return the absolute URL of a path.

        Examples:
            >>> conn = TaxiiConnect("https://example.com", "user", "password")
            >>> conn.resolve("/taxii/")
            'https://example.com/taxii/'
            >>> conn.resolve("taxii/")
            'https://example.com/taxii/'
            >>> conn.resolve("https://other.com/api1/")
            'https://other.com/api1/'

        """
        if URL(path).is_absolute():
            return path
        if not path.startswith("/"):
            path = "/" + path
        return self._base_url + path

    def format_query(self, path: str, filter: Optional[Filter] = None) -> URL:  # noqa: A002
        """Format a query URL, the query string is omitted for an empty filter."""
        url = self.resolve(path)
        query = as_query_string(filter)
        if query:
            url = f"{url}?{query}"
        return URL(url, encoded=True)

    async def _request(
        self, method: str, query_url: URL, data: Optional[str] = None
    ) -> "ClientResponse":
        """Perform a request and consume its body."""
        headers = self.post_headers if method == "POST" else self.headers
        async with ClientSession(timeout=self._timeout) as session:
            async with session.request(
                method, query_url, headers=headers, data=data
            ) as resp:
                _ = await resp.read()  # consume the response
                return resp

    async def _process_raw_response(self, response: "ClientResponse") -> Any:
        """Check the status of the response and decode its JSON body.

        Raises:
            Taxii2TransportError: If the status is not a success or the body is not JSON.

        """
        try:
            response.raise_for_status()
        except ClientResponseError as e:
            message = f"{e.status} {e.message} - query: {response.url}"
            logger.error(f"TAXII request failed: {message}")
            raise Taxii2TransportError(
                message, url=str(response.url), status=e.status
            ) from e
        try:
            data = await response.json(content_type=None)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Error while decoding JSON from {response.url}: {e}")
            raise Taxii2TransportError(
                "Error while decoding JSON",
                url=str(response.url),
                status=response.status,
            ) from e
        if data is None:
            logger.error(f"Empty response body from {response.url}")
            raise Taxii2TransportError(
                "Empty response body",
                url=str(response.url),
                status=response.status,
            )
        return data

    async def _send(self, method: str, query_url: URL, data: Optional[str] = None) -> Any:
        logger.debug(f"{method} {query_url}")
        try:
            response = await self._request(method, query_url, data)
        except (ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Unable to reach {query_url}: {e!r}")
            raise Taxii2TransportError(
                f"Unable to reach {query_url}: {e!r}", url=str(query_url)
            ) from e
        return await self._process_raw_response(response)

    async def get(self, url: str, filter: Optional[Filter] = None) -> Any:  # noqa: A002
        """Perform an authenticated GET request.

        Args:
            url (str): An absolute URL, or a path relative to the base URL.
            filter (Optional[Filter]): The filter to send as a query string.

        Returns:
            Any: The decoded JSON body.

        Raises:
            Taxii2TransportError: If the request fails or the body is not JSON.

        """
        return await self._send("GET", self.format_query(url, filter))

    async def post(self, url: str, body: Any) -> Any:
        """Perform an authenticated POST request with a JSON body.

        Returns:
            Any: The decoded JSON body.

        Raises:
            Taxii2TransportError: If the request fails or the body is not JSON.

        """
        return await self._send("POST", self.format_query(url), json.dumps(body))

    async def fetch_this(
        self,
        url: str,
        cell: CachedCell[Any],
        filter: Optional[Filter] = None,  # noqa: A002
        response_model: Optional[type[BaseModel]] = None,
    ) -> Any:
        """Perform a GET request once, then serve the cached result until the cell is invalidated.

        A response not validating against response_model raises and is not cached.
        """
        if cell.populated:
            logger.debug(f"Serving {url} from cache")

        async def fetch() -> Any:
            data = await self.get(url, filter)
            if response_model is not None:
                validate_response(data, response_model, url)
            return data

        return await cell.get_or_fetch(fetch)

    def __repr__(self) -> str:
        """Represent the connection without its password."""
        return f"{type(self).__name__}(url={self._base_url!r}, user={self._user!r})"
