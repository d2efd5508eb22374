"""Users — create, list and delete users.

Invariants:
    - Routes never contain business logic; FavoritesService does the checks
    - Deleting a user hard-deletes all of its favorites (FK cascade)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Response, status

from favorites.api.dependencies import get_favorites_service
from favorites.core.domain_types import UserId
from favorites.schemas.user import UserListResponse, UserResponse
from favorites.services.favorites_service import FavoritesService

router = APIRouter(prefix="/api/v1/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    service: FavoritesService = Depends(get_favorites_service),
):
    """Create a new user with a server-generated id."""
    user = await service.create_user()
    return UserResponse.from_record(user)


@router.get("", response_model=UserListResponse)
async def list_users(
    page: int = Query(1),
    limit: int | None = Query(None),
    service: FavoritesService = Depends(get_favorites_service),
):
    """List users newest first. limit=0 means the default page size."""
    result = await service.list_users(page, limit or None)
    return UserListResponse.from_page(result)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    service: FavoritesService = Depends(get_favorites_service),
):
    await service.delete_user(UserId(user_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
