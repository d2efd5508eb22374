"""Pagination — clamping and page metadata for every listing operation.

Invariants:
    - 1 <= page_size <= max_page_size and 1 <= page <= max_page_for(page_size)
      after clamping (never rejected)
    - offset never exceeds MAX_SQL_OFFSET (signed 64-bit LIMIT/OFFSET)
    - offset == (page - 1) * page_size
    - total_pages == max(1, ceil(total / page_size)), so an empty listing has 1 page
    - has_next == page < total_pages; has_prev == page > 1

Design Decisions:
    - Pure functions, no IO: the service computes the request first, the store
      runs it, then page_info() builds the metadata from the store's total
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
MAX_SQL_OFFSET = 2**63 - 1

T = TypeVar("T")


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PageInfo:
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class Page(Generic[T]):
    """A listing result: the rows of one page plus its metadata."""
    items: list[T]
    info: PageInfo


def clamp_page_request(
    page: int | None,
    page_size: int | None,
    *,
    default_page_size: int = DEFAULT_PAGE_SIZE,
    max_page_size: int = MAX_PAGE_SIZE,
) -> PageRequest:
    """Clamp raw page/page_size into the valid range."""
    if page is None:
        page = 1
    if page_size is None:
        page_size = default_page_size
    page_size = min(max(page_size, 1), max_page_size)
    page = min(max(page, 1), max_page_for(page_size))
    return PageRequest(page=page, page_size=page_size)


def max_page_for(page_size: int) -> int:
    # offset must fit a signed 64-bit SQL integer
    return MAX_SQL_OFFSET // page_size + 1


def total_pages_for(total: int, page_size: int) -> int:
    # ceiling division; zero rows still render as one (empty) page
    return max(1, -(-total // page_size))


def page_info(request: PageRequest, total: int) -> PageInfo:
    pages = total_pages_for(total, request.page_size)
    return PageInfo(
        page=request.page,
        limit=request.page_size,
        total=total,
        total_pages=pages,
        has_next=request.page < pages,
        has_prev=request.page > 1,
    )
