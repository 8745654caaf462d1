"""사용자 라우터 — 현재 사용자 프로필 및 관리자용 사용자 조회.

User Router — Current user profile and admin user listing.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import get_current_user, require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.user import ProfileUpdate, UserResponse
from travel_org.services.user_service import user_service

router: APIRouter = APIRouter()


@router.get("/current", response_model=UserResponse)
async def get_current(
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """현재 사용자 프로필 조회 (Current user's profile)."""
    return user_service.get_current(current_user)


@router.put("/profile", response_model=UserResponse)
async def update_profile(
    data: ProfileUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> UserResponse:
    """프로필 수정 (Update the current user's profile)."""
    result: UserResponse = await user_service.update_profile(db, current_user, data)
    await db.commit()
    return result


@router.get("/all", response_model=list[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[UserResponse]:
    """모든 사용자 목록 (All users, admin only)."""
    return await user_service.list_users(db)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> UserResponse:
    """사용자 조회 (Single user, admin only)."""
    return await user_service.get_user(db, user_id)
