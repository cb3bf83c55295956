"""Fetch several TAXII resources concurrently."""

import asyncio
from logging import getLogger
from typing import TYPE_CHECKING, Any, Iterable, Optional

from taxii2_connect.client_api.common import validate_response
from taxii2_connect.client_api.tools import is_empty

if TYPE_CHECKING:
    from pydantic import BaseModel
    from taxii2_connect.client_api.common import TaxiiConnect

logger = getLogger(__name__)


async def fetch_all(
    connection: "TaxiiConnect",
    urls: Iterable[str],
    response_model: Optional[type["BaseModel"]] = None,
) -> dict[str, Any]:
    """GET every url concurrently and keep the successful, non-empty results.

    Every request is awaited, a failure never cancels the others.
    Failed requests are logged and dropped, as are results not validating
    against response_model. Empty results are dropped.

    Args:
        connection (TaxiiConnect): The connection used for the requests.
        urls (Iterable[str]): The urls to fetch, duplicates are fetched once.
        response_model (Optional[type[BaseModel]]): The model every result must validate.

    Returns:
        dict[str, Any]: The decoded results keyed by url.

    """
    unique_urls = list(dict.fromkeys(urls))

    async def fetch(url: str) -> Any:
        data = await connection.get(url)
        if response_model is not None:
            validate_response(data, response_model, url)
        return data

    results = await asyncio.gather(
        *(fetch(url) for url in unique_urls), return_exceptions=True
    )
    fetched: dict[str, Any] = {}
    for url, result in zip(unique_urls, results):
        if isinstance(result, Exception):
            logger.warning(f"Could not fetch {url}, skipping: {result}")
            continue
        if isinstance(result, BaseException):
            raise result
        if is_empty(result):
            logger.warning(f"Empty response from {url}, skipping")
            continue
        fetched[url] = result
    logger.debug(f"Fetched {len(fetched)} of {len(unique_urls)} resources")
    return fetched
