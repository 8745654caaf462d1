"""사용자 서비스 — 프로필 조회/수정 및 관리자용 사용자 조회.

User Service — Profile read/update for the current user and user lookups
for administrators.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.user import User
from travel_org.repositories.user_repository import user_repository
from travel_org.schemas.user import ProfileUpdate, UserResponse
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import DuplicateError, NotFoundError


class UserService:
    """사용자 관련 비즈니스 로직을 처리하는 서비스."""

    def _to_response(self, user: User) -> UserResponse:
        """사용자 모델을 응답 스키마로 변환합니다 (Convert a User to UserResponse)."""
        return UserResponse(
            id=str(user.id),
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            phone_number=user.phone_number,
            address=user.address,
            is_admin=user.is_admin,
            full_name=user.full_name,
        )

    def get_current(self, user: User) -> UserResponse:
        """현재 사용자 프로필 (Current user's profile)."""
        return self._to_response(user)

    async def update_profile(
        self,
        db: AsyncSession,
        user: User,
        data: ProfileUpdate,
    ) -> UserResponse:
        """현재 사용자의 프로필을 수정합니다.

        Update the current user's profile fields.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 현재 사용자 (Authenticated user)
            data: 프로필 수정 데이터 (Profile update data)

        Returns:
            UserResponse: 수정된 프로필 (Updated profile)

        Raises:
            DuplicateError: 다른 사용자가 이미 사용 중인 이메일 (Email used by another user)
        """
        if await user_repository.email_taken(db, data.email, exclude_user_id=user.id):
            raise DuplicateError("Email already exists")

        updated: User | None = await user_repository.update(db, user.id, data.model_dump())
        if updated is None:
            raise NotFoundError("User not found")
        await log_service.information(db, f"User '{updated.username}' updated profile")
        return self._to_response(updated)

    async def list_users(self, db: AsyncSession) -> list[UserResponse]:
        """모든 사용자 목록 (All users, admin only)."""
        users: list[User] = await user_repository.get_ordered(db)
        return [self._to_response(u) for u in users]

    async def get_user(self, db: AsyncSession, user_id: UUID) -> UserResponse:
        """단일 사용자 조회.

        Raises:
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        user: User | None = await user_repository.get_by_id(db, user_id)
        if user is None:
            raise NotFoundError("User not found")
        return self._to_response(user)


# 싱글턴 인스턴스: Singleton instance
user_service: UserService = UserService()
