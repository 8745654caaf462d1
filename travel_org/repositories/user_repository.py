"""사용자 레포지토리 — 사용자명/이메일 기반 조회.

User Repository — Lookups by username and email used by authentication
and profile updates.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.registration import TripRegistration
from travel_org.models.user import User
from travel_org.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """users 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(User)

    async def get_by_username(self, db: AsyncSession, username: str) -> User | None:
        """사용자명으로 사용자를 조회합니다 (Retrieve a user by username)."""
        result = await db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def email_taken(
        self,
        db: AsyncSession,
        email: str,
        exclude_user_id: UUID | None = None,
    ) -> bool:
        """이메일이 (다른 사용자에 의해) 사용 중인지 확인합니다.

        Check whether an email is already used, optionally ignoring one user.
        """
        query: Select = select(User.id).where(User.email == email)
        if exclude_user_id is not None:
            query = query.where(User.id != exclude_user_id)
        result = await db.execute(query.limit(1))
        return result.first() is not None

    async def get_ordered(self, db: AsyncSession) -> list[User]:
        """모든 사용자를 사용자명순으로 조회합니다 (All users ordered by username)."""
        result = await db.execute(select(User).order_by(User.username))
        return list(result.scalars().all())

    async def has_registrations(self, db: AsyncSession, user_id: UUID) -> bool:
        """사용자에게 예약이 있는지 확인합니다 (Whether the user has any registration)."""
        result = await db.execute(
            select(TripRegistration.id).where(TripRegistration.user_id == user_id).limit(1)
        )
        return result.first() is not None


# 싱글턴 인스턴스: Singleton instance
user_repository: UserRepository = UserRepository()
