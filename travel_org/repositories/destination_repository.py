"""여행지 레포지토리 — 여행지 CRUD 및 종속 여행 확인.

Destination Repository — CRUD plus the dependent-trip check used to
enforce the RESTRICT delete rule.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.destination import Destination
from travel_org.models.trip import Trip
from travel_org.repositories.base import BaseRepository


class DestinationRepository(BaseRepository[Destination]):
    """destinations 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Destination)

    async def get_ordered(self, db: AsyncSession) -> list[Destination]:
        """모든 여행지를 이름순으로 조회합니다 (All destinations ordered by name)."""
        query: Select = select(Destination).order_by(Destination.name, Destination.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def has_trips(self, db: AsyncSession, destination_id: UUID) -> bool:
        """여행지에 연결된 여행이 있는지 확인합니다.

        Check whether any trip still references the destination.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            destination_id: 여행지 ID (Destination UUID)

        Returns:
            bool: 종속 여행 존재 여부 (Whether dependent trips exist)
        """
        result = await db.execute(
            select(Trip.id).where(Trip.destination_id == destination_id).limit(1)
        )
        return result.first() is not None


# 싱글턴 인스턴스: Singleton instance
destination_repository: DestinationRepository = DestinationRepository()
