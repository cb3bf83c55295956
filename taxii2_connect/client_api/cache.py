"""Offer the lazy-once cache used by the TAXII resources."""

import asyncio
from logging import getLogger
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")

logger = getLogger(__name__)


class CachedCell(Generic[T]):
    """Hold the result of one fetch until invalidated.

    The cell is either EMPTY or POPULATED. Concurrent callers of
    `get_or_fetch` wait on a lock, so only one fetch is in flight at a time and
    the waiting callers receive its result. A failed fetch leaves the cell EMPTY
    and the exception goes to the caller.

    Examples:
        >>> cell = CachedCell()
        >>> async def fetch():
        ...     return {"title": "T"}
        >>> asyncio.run(cell.get_or_fetch(fetch))
        {'title': 'T'}

    """

    def __init__(self) -> None:
        """Initialize an EMPTY cell."""
        self._value: Optional[T] = None
        self._populated = False
        self._generation = 0
        self._lock = asyncio.Lock()

    @property
    def populated(self) -> bool:
        """Whether the cell holds a value."""
        return self._populated

    async def get_or_fetch(self, fetch: Callable[[], Awaitable[T]]) -> T:
        """Return the cached value, fetching it first if the cell is EMPTY."""
        if self._populated:
            return self._value  # type: ignore[return-value]
        async with self._lock:
            # another caller may have populated the cell while we waited
            if self._populated:
                return self._value  # type: ignore[return-value]
            generation = self._generation
            value = await fetch()
            # an invalidate() during the fetch wins, the value is not stored
            if generation == self._generation:
                self._value = value
                self._populated = True
            else:
                logger.debug("Cell invalidated during fetch, result not cached")
            return value

    def invalidate(self) -> None:
        """Reset the cell to EMPTY."""
        self._generation += 1
        self._value = None
        self._populated = False
