"""여행 레포지토리 — 여행 조회/검색, 가이드 배정, 예약 인원 집계.

Trip Repository — Trip detail loading, search, guide assignment rows,
and booked-participant aggregation used for capacity.
"""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from travel_org.models.guide import Guide
from travel_org.models.registration import TripRegistration
from travel_org.models.trip import Trip, TripGuide
from travel_org.repositories.base import BaseRepository


class TripRepository(BaseRepository[Trip]):
    """trips 및 trip_guides 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the trips and trip_guides tables.
    """

    def __init__(self) -> None:
        super().__init__(Trip)

    def _detail_query(self) -> Select:
        """여행지와 가이드를 미리 로드하는 기본 쿼리 (Base query with destination and guides eager-loaded)."""
        return select(Trip).execution_options(populate_existing=True).options(
            selectinload(Trip.destination),
            selectinload(Trip.trip_guides).selectinload(TripGuide.guide),
        )

    async def get_detail(self, db: AsyncSession, trip_id: UUID) -> Trip | None:
        """여행 상세 정보를 여행지/가이드와 함께 조회합니다.

        Retrieve a trip with its destination and guides eagerly loaded.
        """
        result = await db.execute(self._detail_query().where(Trip.id == trip_id))
        return result.scalar_one_or_none()

    async def list_detailed(
        self,
        db: AsyncSession,
        destination_id: UUID | None = None,
    ) -> list[Trip]:
        """여행 목록을 출발일순으로 조회합니다.

        List trips ordered by start date, optionally for one destination.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            destination_id: 여행지 필터 (Destination filter, optional)

        Returns:
            list[Trip]: 여행 목록 (Trips with destination and guides loaded)
        """
        query: Select = self._detail_query()
        if destination_id is not None:
            query = query.where(Trip.destination_id == destination_id)
        query = query.order_by(Trip.start_date, Trip.name)
        result = await db.execute(query)
        return list(result.scalars().all())

    async def search(
        self,
        db: AsyncSession,
        name: str | None,
        description: str | None,
        page: int,
        count: int,
    ) -> tuple[list[Trip], int]:
        """이름/설명 부분 일치로 여행을 검색합니다.

        Search trips by case-insensitive name/description substring, paginated.
        "%" and "_" in the terms match literally.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 이름 검색어 (Name substring, blank means no filter)
            description: 설명 검색어 (Description substring, blank means no filter)
            page: 페이지 번호, 1부터 (Page number, 1-based)
            count: 페이지 크기 (Page size)

        Returns:
            tuple[list[Trip], int]: (여행 목록, 전체 개수) (Trips on the page, total matches)
        """
        query: Select = self._detail_query()
        if name and name.strip():
            query = query.where(Trip.name.icontains(name.strip(), autoescape=True))
        if description and description.strip():
            query = query.where(
                Trip.description.is_not(None),
                Trip.description.icontains(description.strip(), autoescape=True),
            )
        query = query.order_by(Trip.start_date, Trip.name, Trip.id)
        items, total = await self.get_paginated(db, query, page=page, per_page=count)
        return list(items), total

    async def get_booked_counts(
        self,
        db: AsyncSession,
        trip_ids: Iterable[UUID],
    ) -> dict[UUID, int]:
        """여행별 예약 인원 합계를 조회합니다.

        Sum booked participants per trip in one grouped query.

        Returns:
            dict[UUID, int]: {여행 ID: 예약 인원 합계} (Trip UUID -> booked participants)
        """
        ids: list[UUID] = list(trip_ids)
        if not ids:
            return {}
        result = await db.execute(
            select(TripRegistration.trip_id, func.sum(TripRegistration.number_of_participants))
            .where(TripRegistration.trip_id.in_(ids))
            .group_by(TripRegistration.trip_id)
        )
        return {trip_id: int(total or 0) for trip_id, total in result.all()}

    async def has_registrations(self, db: AsyncSession, trip_id: UUID) -> bool:
        """여행에 예약이 있는지 확인합니다 (Whether any registration references the trip)."""
        result = await db.execute(
            select(TripRegistration.id).where(TripRegistration.trip_id == trip_id).limit(1)
        )
        return result.first() is not None

    async def get_trip_guide(
        self,
        db: AsyncSession,
        trip_id: UUID,
        guide_id: UUID,
    ) -> TripGuide | None:
        """여행-가이드 연결 행을 조회합니다 (Fetch one trip/guide association row)."""
        result = await db.execute(
            select(TripGuide).where(TripGuide.trip_id == trip_id, TripGuide.guide_id == guide_id)
        )
        return result.scalar_one_or_none()

    async def add_guide(self, db: AsyncSession, trip: Trip, guide: Guide) -> TripGuide:
        """여행에 가이드를 연결합니다.

        Insert an association row attached to both parents, so the
        delete-orphan cascade on either side sees it.
        """
        link: TripGuide = TripGuide(trip=trip, guide=guide)
        db.add(link)
        await db.flush()
        return link

    async def remove_guide(self, db: AsyncSession, link: TripGuide) -> None:
        """여행-가이드 연결을 삭제합니다 (Delete an association row)."""
        await db.delete(link)
        await db.flush()


# 싱글턴 인스턴스: Singleton instance
trip_repository: TripRepository = TripRepository()
