"""가이드 레포지토리 — 가이드 CRUD 및 여행별 가이드 조회.

Guide Repository — CRUD and per-trip guide lookups.
"""

from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.guide import Guide
from travel_org.models.trip import TripGuide
from travel_org.repositories.base import BaseRepository


class GuideRepository(BaseRepository[Guide]):
    """guides 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(Guide)

    async def get_ordered(self, db: AsyncSession) -> list[Guide]:
        """모든 가이드를 이름순으로 조회합니다 (All guides ordered by name)."""
        result = await db.execute(select(Guide).order_by(Guide.name, Guide.id))
        return list(result.scalars().all())

    async def get_by_trip(self, db: AsyncSession, trip_id: UUID) -> list[Guide]:
        """여행에 배정된 가이드 목록을 조회합니다.

        Retrieve the guides assigned to a trip through trip_guides.
        """
        query: Select = (
            select(Guide)
            .join(TripGuide, TripGuide.guide_id == Guide.id)
            .where(TripGuide.trip_id == trip_id)
            .order_by(Guide.name)
        )
        result = await db.execute(query)
        return list(result.scalars().all())


# 싱글턴 인스턴스: Singleton instance
guide_repository: GuideRepository = GuideRepository()
