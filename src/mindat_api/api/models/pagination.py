"""
Envelopes wrapping the list endpoints of the Mindat API.

Two shapes are served upstream:
    - PaginatedResponse: page-number pagination with a total `count` (countries, geomaterials, IMA list, ...)
    - CursorPaginatedResponse: opaque cursor pagination without a count (localities)

`next` and `previous` hold the absolute URLs returned by the API. The navigation helpers only read those
URLs; an envelope never issues a request on its own.
"""
from __future__ import annotations
from typing import Generic, Iterator, List, Optional, TypeVar
from pydantic import BaseModel, ConfigDict
from mindat_api.utils.helpers import get_query_parameter, try_int

T = TypeVar("T")


class PageNavigation:
    """Navigation helpers shared by both envelope types. Subclasses provide `next` and `previous` URL fields."""

    def has_next(self) -> bool:
        return self.next is not None

    def has_previous(self) -> bool:
        return self.previous is not None

    def next_cursor(self) -> Optional[str]:
        """
        Extracts the `cursor` parameter from the next-page URL.

        Examples:
            >>> page = CursorPaginatedResponse[dict](
            ...     next="https://api.mindat.org/v1/localities/?cursor=abc123&page_size=10", results=[])
            >>> page.next_cursor()
            'abc123'
        """
        return get_query_parameter(self.next, "cursor")

    def previous_cursor(self) -> Optional[str]:
        return get_query_parameter(self.previous, "cursor")

    def next_page(self) -> Optional[int]:
        """Extracts the `page` number from the next-page URL, or None when missing or not an integer"""
        return try_int(get_query_parameter(self.next, "page"))

    def previous_page(self) -> Optional[int]:
        return try_int(get_query_parameter(self.previous, "page"))


class PaginatedResponse(PageNavigation, BaseModel, Generic[T]):
    """A page of results from an offset/page-number paginated endpoint"""

    model_config = ConfigDict(frozen=True)

    count: Optional[int] = None
    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[T]

    def total_pages(self, page_size: int) -> Optional[int]:
        """
        Computes the number of pages needed to hold `count` records.

        Args:
            page_size (int): The number of records per page used for the request

        Returns:
            Optional[int]: ceil(count / page_size), or None when the API did not report a count

        Raises:
            ValueError: if page_size is less than 1
        """
        if page_size < 1:
            raise ValueError(f"page_size must be at least 1, received {page_size}")
        if self.count is None:
            return None
        return -(-self.count // page_size)

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


class CursorPaginatedResponse(PageNavigation, BaseModel, Generic[T]):
    """A page of results from a cursor-paginated endpoint. The total count is not reported."""

    model_config = ConfigDict(frozen=True)

    next: Optional[str] = None
    previous: Optional[str] = None
    results: List[T]

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)


__all__ = ["PageNavigation", "PaginatedResponse", "CursorPaginatedResponse"]
