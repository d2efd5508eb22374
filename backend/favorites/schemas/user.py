"""User Schemas — response shapes for the users API."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from favorites.core.domain_types import UserRecord
from favorites.core.pagination import Page
from favorites.schemas.pagination import PaginationResponse


class UserResponse(BaseModel):
    id: UUID
    created_at: datetime

    @classmethod
    def from_record(cls, user: UserRecord) -> "UserResponse":
        return cls(id=user.id, created_at=user.created_at)


class UserListResponse(BaseModel):
    users: list[UserResponse]
    pagination: PaginationResponse

    @classmethod
    def from_page(cls, page: Page[UserRecord]) -> "UserListResponse":
        return cls(
            users=[UserResponse.from_record(u) for u in page.items],
            pagination=PaginationResponse.from_info(page.info),
        )
