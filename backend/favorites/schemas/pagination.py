"""Pagination Schema — the `pagination` object shared by all listing responses."""

from pydantic import BaseModel

from favorites.core.pagination import PageInfo


class PaginationResponse(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_info(cls, info: PageInfo) -> "PaginationResponse":
        return cls(
            page=info.page,
            limit=info.limit,
            total=info.total,
            total_pages=info.total_pages,
            has_next=info.has_next,
            has_prev=info.has_prev,
        )
