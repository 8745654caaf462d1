"""여행 예약 레포지토리 — 예약 조회 및 정원 계산용 집계.

Trip Registration Repository — Registration queries with user/trip/destination
eager loading, plus the participant sum used for capacity checks.
"""

from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from travel_org.models.registration import TripRegistration
from travel_org.models.trip import Trip
from travel_org.repositories.base import BaseRepository


class RegistrationRepository(BaseRepository[TripRegistration]):
    """trip_registrations 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리."""

    def __init__(self) -> None:
        super().__init__(TripRegistration)

    def _detail_query(self) -> Select:
        return select(TripRegistration).execution_options(populate_existing=True).options(
            selectinload(TripRegistration.user),
            selectinload(TripRegistration.trip).selectinload(Trip.destination),
        )

    async def get_detail(self, db: AsyncSession, registration_id: UUID) -> TripRegistration | None:
        """예약 상세를 사용자/여행/여행지와 함께 조회합니다."""
        result = await db.execute(self._detail_query().where(TripRegistration.id == registration_id))
        return result.scalar_one_or_none()

    async def list_detailed(
        self,
        db: AsyncSession,
        user_id: UUID | None = None,
        trip_id: UUID | None = None,
    ) -> list[TripRegistration]:
        """예약 목록을 최신순으로 조회합니다.

        List registrations newest first, optionally filtered by user and/or trip.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 사용자 필터 (User filter, optional)
            trip_id: 여행 필터 (Trip filter, optional)

        Returns:
            list[TripRegistration]: 예약 목록 (Registrations with relations loaded)
        """
        query: Select = self._detail_query()
        if user_id is not None:
            query = query.where(TripRegistration.user_id == user_id)
        if trip_id is not None:
            query = query.where(TripRegistration.trip_id == trip_id)
        query = query.order_by(TripRegistration.registration_date.desc(), TripRegistration.id)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def sum_participants(
        self,
        db: AsyncSession,
        trip_id: UUID,
        exclude_id: UUID | None = None,
    ) -> int:
        """여행의 예약 인원 합계를 계산합니다.

        Sum participants already booked on a trip.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            trip_id: 여행 ID (Trip UUID)
            exclude_id: 제외할 예약 ID — 수정 시 자기 자신 제외 (Registration to leave out, used on update)

        Returns:
            int: 예약 인원 합계 (Booked participants)
        """
        query: Select = select(func.coalesce(func.sum(TripRegistration.number_of_participants), 0)).where(
            TripRegistration.trip_id == trip_id
        )
        if exclude_id is not None:
            query = query.where(TripRegistration.id != exclude_id)
        return int((await db.execute(query)).scalar() or 0)


# 싱글턴 인스턴스: Singleton instance
registration_repository: RegistrationRepository = RegistrationRepository()
