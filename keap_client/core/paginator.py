"""
Paginator for collection responses.

A Paginator wraps exactly one page (items, total count, next/previous
cursors) and fetches adjacent pages on demand. Every fetched page is a new
Paginator; an existing one never changes.
"""

import logging
from enum import Enum
from typing import Any, AsyncIterator, Callable, Generic, TypeVar

from .api import RequestEngine
from .models import InvalidResponseError

logger = logging.getLogger(__name__)

T = TypeVar("T")

PAGINATION_FIELDS = ("next", "previous", "count")


class PaginationPolicy(Enum):
    """
    How strictly pagination metadata is validated.

    STRICT requires next, previous and count to be present and non-null.
    An empty-string cursor still counts as present and means there is no
    such page, and a count of 0 is valid. This is looser than a plain
    truthiness check, which would reject the empty cursors Keap returns on
    the first and last pages and every empty collection.

    LENIENT lets cursors be missing or null; count is still required.
    """
    STRICT = "strict"
    LENIENT = "lenient"


class Paginator(Generic[T]):
    """
    One page of a homogeneous collection.

    The item key, item decoder and validation policy given to wrap() are
    reused for every page reached through next()/previous().
    """

    def __init__(
        self,
        engine: RequestEngine,
        items: list[T],
        next_url: str | None,
        previous_url: str | None,
        count: int,
        item_key: str,
        decoder: Callable[[Any], T] | None = None,
        policy: PaginationPolicy = PaginationPolicy.STRICT,
    ):
        self._engine = engine
        self._items = items
        self._count = count
        self._item_key = item_key
        self._decoder = decoder
        self._policy = policy
        self._next_url = self._relative(next_url)
        self._previous_url = self._relative(previous_url)

    @classmethod
    def wrap(
        cls,
        engine: RequestEngine,
        response: Any,
        item_key: str,
        decoder: Callable[[Any], T] | None = None,
        policy: PaginationPolicy = PaginationPolicy.STRICT,
    ) -> "Paginator[T]":
        """
        Create a Paginator from a raw API response.

        Args:
            engine: Engine used to fetch adjacent pages
            response: Parsed JSON page, e.g. {"contacts": [...], "count": 2,
                "next": "...", "previous": "..."}
            item_key: Key holding the item array
            decoder: Optional callable turning each raw item into a record
            policy: Validation policy for the pagination metadata

        Returns:
            Paginator over the page

        Raises:
            InvalidResponseError: If the items or pagination metadata are
                missing or malformed
        """
        if not item_key:
            raise InvalidResponseError("Invalid API response: no item key given")
        if not isinstance(response, dict):
            raise InvalidResponseError(
                f"Invalid API response: expected an object, got {type(response).__name__}"
            )

        items = response.get(item_key)
        if not isinstance(items, list):
            raise InvalidResponseError(
                f"Invalid API response: '{item_key}' is missing or not an array"
            )

        if policy is PaginationPolicy.STRICT:
            missing = [key for key in PAGINATION_FIELDS if response.get(key) is None]
        else:
            missing = ["count"] if response.get("count") is None else []
        if missing:
            raise InvalidResponseError(
                f"Invalid API response: missing pagination fields {', '.join(missing)}"
            )

        count = response["count"]
        if isinstance(count, bool) or not isinstance(count, int):
            raise InvalidResponseError(
                f"Invalid API response: count must be an integer, got {count!r}"
            )

        if decoder is not None:
            items = [decoder(item) for item in items]

        return cls(
            engine,
            items,
            response.get("next"),
            response.get("previous"),
            count,
            item_key,
            decoder=decoder,
            policy=policy,
        )

    def _relative(self, url: Any) -> str | None:
        # Cursors come back as fully-qualified URLs under the base URL
        if not url:
            return None
        if not isinstance(url, str):
            raise InvalidResponseError(f"Invalid API response: cursor {url!r} is not a string")

        base_url = self._engine.base_url
        if url.startswith(base_url):
            return url[len(base_url):]
        if url.startswith(("http://", "https://")):
            raise InvalidResponseError(
                f"Invalid API response: cursor {url} is outside {base_url}"
            )
        return url

    @property
    def item_key(self) -> str:
        return self._item_key

    @property
    def has_next(self) -> bool:
        return self._next_url is not None

    @property
    def has_previous(self) -> bool:
        return self._previous_url is not None

    def get_items(self) -> list[T]:
        """Items of the current page, in server order."""
        return self._items

    def get_count(self) -> int:
        """Total number of items across all pages, as reported by the server."""
        return self._count

    async def next(self) -> "Paginator[T] | None":
        """Fetch the next page, or return None on the last page."""
        return await self._follow(self._next_url)

    async def previous(self) -> "Paginator[T] | None":
        """Fetch the previous page, or return None on the first page."""
        return await self._follow(self._previous_url)

    async def _follow(self, cursor: str | None) -> "Paginator[T] | None":
        if cursor is None:
            return None
        logger.debug(f"Following cursor {cursor}")
        response = await self._engine.get(cursor)
        return Paginator.wrap(
            self._engine,
            response,
            self._item_key,
            decoder=self._decoder,
            policy=self._policy,
        )

    async def iter_pages(self, max_pages: int | None = None) -> AsyncIterator["Paginator[T]"]:
        """
        Yield this page and every following page.

        Stops on the last page, after max_pages pages, or when the server
        hands back a cursor that was already followed.
        """
        page: Paginator[T] | None = self
        seen: set[str] = set()
        yielded = 0

        while page is not None:
            yield page
            yielded += 1

            if max_pages is not None and yielded >= max_pages:
                logger.info(f"Stopping pagination after {yielded} pages (max_pages)")
                return
            if page._next_url is None:
                return
            if page._next_url in seen:
                logger.warning(f"Cursor {page._next_url} repeated, stopping pagination")
                return

            seen.add(page._next_url)
            page = await page.next()

    async def iter_items(self, max_pages: int | None = None) -> AsyncIterator[T]:
        """Yield the items of this page and every following page."""
        async for page in self.iter_pages(max_pages=max_pages):
            for item in page.get_items():
                yield item

    def __repr__(self) -> str:
        return (
            f"Paginator(item_key={self._item_key!r}, items={len(self._items)}, "
            f"count={self._count}, next={self._next_url!r}, previous={self._previous_url!r})"
        )
