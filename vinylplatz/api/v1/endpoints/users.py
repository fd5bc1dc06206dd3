"""
User endpoints - admin account management, public lookup, own profile updates.
"""

import uuid

from fastapi import APIRouter, Response, status

from vinylplatz.core.dependencies import AdminUser, CurrentUser, MarketplaceDep
from vinylplatz.schemas.user import ProfileUpdate, UserResponse, UserUpdate

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_users(mp: MarketplaceDep, admin: AdminUser):
    return await mp.users.list_users()


@router.patch("/me/profile", response_model=UserResponse)
async def update_profile(mp: MarketplaceDep, user: CurrentUser, data: ProfileUpdate):
    """Partial profile update. A new password is hashed before it is stored."""
    return await mp.users.update_profile(user.id, data)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(mp: MarketplaceDep, user_id: uuid.UUID):
    return await mp.users.get_user(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(mp: MarketplaceDep, admin: AdminUser, user_id: uuid.UUID, data: UserUpdate):
    return await mp.users.update_user(user_id, data)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(mp: MarketplaceDep, admin: AdminUser, user_id: uuid.UUID):
    """Remove an account with its listings and favorites. 409 when it has orders."""
    await mp.users.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
