"""Walking paged Bitbucket collections.

Bitbucket Cloud collection endpoints answer with one page at a time::

    {"pagelen": 10, "page": 1, "size": 42, "values": [...],
     "next": "https://api.bitbucket.org/2.0/...?page=2"}

``next`` is a fully qualified URL carrying every query parameter of the
original request and is absent on the last page.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from ..exceptions import BitbucketCloudError, BitbucketNotFoundError
from ..models.base import ApiModel
from .constants import MAX_PAGE_LEN

if TYPE_CHECKING:
    from .client import BitbucketClient, QueryParams

logger = logging.getLogger("bitbucket-cloud.pagination")

T = TypeVar("T")


class PageResponse(ApiModel):
    """One page of a Bitbucket collection."""

    values: list[Any] = []
    next: str | None = None
    page: int | None = None
    pagelen: int | None = None
    size: int | None = None

    @classmethod
    def from_api_response(cls, data: dict[str, Any], **kwargs: Any) -> "PageResponse":
        if not isinstance(data, dict):
            raise BitbucketCloudError(
                f"Expected a paged collection, got {type(data).__name__}"
            )
        values = data.get("values") or []
        if not isinstance(values, list):
            raise BitbucketCloudError("Paged collection 'values' is not a list")
        return cls(
            values=values,
            next=data.get("next") or None,
            page=data.get("page"),
            pagelen=data.get("pagelen"),
            size=data.get("size"),
        )

    @property
    def is_last(self) -> bool:
        return self.next is None


def page_len_for(max_items: int | None, default: int) -> int:
    """Page size to request so that small bounded listings fit one page."""
    if max_items is None:
        return min(default, MAX_PAGE_LEN)
    return max(1, min(max_items, default, MAX_PAGE_LEN))


def has_param(params: "QueryParams", name: str) -> bool:
    if not params:
        return False
    if isinstance(params, dict):
        return name in params
    return any(key == name for key, _ in params)


def with_param(params: "QueryParams", name: str, value: Any) -> list[tuple[str, Any]]:
    """Return ``params`` as a list of pairs with ``name=value`` appended."""
    if not params:
        pairs: list[tuple[str, Any]] = []
    elif isinstance(params, dict):
        pairs = list(params.items())
    else:
        pairs = list(params)
    pairs.append((name, value))
    return pairs


class PagedCollectionWalker(Generic[T]):
    """
    Collect the items of a paged collection into one list.

    Pages are fetched one after the other and their items appended in server
    order. The walk stops on the last page, or as soon as ``max_items`` items
    are collected, in which case no further page is requested.
    """

    def __init__(
        self,
        client: "BitbucketClient",
        decoder: Callable[[dict[str, Any]], T],
        max_items: int | None = None,
        soft_not_found: bool = False,
    ) -> None:
        """
        Args:
            client: Client used to issue the requests
            decoder: Turns one raw item into a typed item
            max_items: Upper bound on the number of items (None for all)
            soft_not_found: Return an empty list when the first page is a 404
                or comes back with an empty body
        """
        if max_items is not None and max_items < 0:
            raise ValueError("max_items must be a non-negative integer")
        self.client = client
        self.decoder = decoder
        self.max_items = max_items
        self.soft_not_found = soft_not_found

    def walk(self, endpoint: str, params: "QueryParams" = None) -> list[T]:
        """Walk the collection starting at ``endpoint``.

        Args:
            endpoint: First page endpoint, relative to the API root
            params: Query parameters of the first request only

        Returns:
            The decoded items, at most ``max_items`` of them

        Raises:
            BitbucketNotFoundError: If the collection does not exist and the
                walker is not soft
            BitbucketApiError: For any other API failure
        """
        if self.max_items == 0:
            return []

        if not has_param(params, "pagelen"):
            params = with_param(
                params,
                "pagelen",
                page_len_for(self.max_items, self.client.config.page_len),
            )

        items: list[T] = []
        next_url: str | None = endpoint
        page_count = 0
        while next_url:
            try:
                data = self.client._get(next_url, params=params)
            except BitbucketNotFoundError:
                if self.soft_not_found and page_count == 0:
                    logger.debug(f"Collection {endpoint} not found, returning []")
                    return []
                raise

            if data is None and self.soft_not_found and page_count == 0:
                logger.debug(f"Collection {endpoint} came back empty, returning []")
                return []

            page = PageResponse.from_api_response(data)
            page_count += 1
            items.extend(self.decoder(value) for value in page.values)

            if self.max_items is not None and len(items) >= self.max_items:
                del items[self.max_items :]
                break

            if page.is_last:
                break
            next_url = page.next
            # the next link already carries the original query string
            params = None

        logger.debug(
            f"Collected {len(items)} items from {endpoint} in {page_count} page(s)"
        )
        return items
