"""여행 서비스 — 여행 CRUD, 검색, 가이드 배정 비즈니스 로직.

Trip Service — Business logic for trip CRUD, search and guide assignment.
Responses carry destination data, remaining capacity and assigned guides.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.trip import Trip, TripGuide
from travel_org.repositories.destination_repository import destination_repository
from travel_org.repositories.guide_repository import guide_repository
from travel_org.repositories.trip_repository import trip_repository
from travel_org.schemas.destination import ImageUrlUpdate
from travel_org.schemas.trip import TripCreate, TripResponse, TripUpdate
from travel_org.services.guide_service import guide_to_response
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import BadRequestError, ConflictError, NotFoundError

# 검색 페이지 크기 상한: Upper bound for the search page size
MAX_SEARCH_COUNT: int = 100


class TripService:
    """여행 관련 비즈니스 로직을 처리하는 서비스.

    Service handling trip business logic.
    """

    def _to_response(self, trip: Trip, booked: int) -> TripResponse:
        """여행 모델을 응답 스키마로 변환합니다.

        Convert a Trip (destination and guides loaded) to a TripResponse.
        The image falls back to the destination's image.

        Args:
            trip: 여행 모델 (Trip model instance)
            booked: 예약된 참가 인원 합계 (Participants already booked)

        Returns:
            TripResponse: 여행 응답 (Trip response)
        """
        destination = trip.destination
        image_url: str = trip.image_url or (destination.image_url if destination else None) or ""
        return TripResponse(
            id=str(trip.id),
            name=trip.name,
            description=trip.description or "",
            start_date=trip.start_date,
            end_date=trip.end_date,
            price=trip.price,
            image_url=image_url,
            max_participants=trip.max_participants,
            destination_id=str(trip.destination_id),
            destination_name=destination.name if destination else "",
            country=destination.country if destination else "",
            city=destination.city if destination else "",
            available_spots=trip.max_participants - booked,
            guides=[guide_to_response(tg.guide) for tg in trip.trip_guides if tg.guide is not None],
        )

    async def _to_responses(self, db: AsyncSession, trips: list[Trip]) -> list[TripResponse]:
        booked: dict[UUID, int] = await trip_repository.get_booked_counts(db, [t.id for t in trips])
        return [self._to_response(t, booked.get(t.id, 0)) for t in trips]

    async def _detail_response(self, db: AsyncSession, trip_id: UUID) -> TripResponse:
        trip: Trip | None = await trip_repository.get_detail(db, trip_id)
        if trip is None:
            raise NotFoundError("Trip not found")
        return (await self._to_responses(db, [trip]))[0]

    async def _ensure_destination(self, db: AsyncSession, destination_id: UUID) -> None:
        if await destination_repository.get_by_id(db, destination_id) is None:
            raise NotFoundError("Destination not found")

    async def list_trips(self, db: AsyncSession) -> list[TripResponse]:
        """모든 여행 목록 (All trips ordered by start date)."""
        trips: list[Trip] = await trip_repository.list_detailed(db)
        return await self._to_responses(db, trips)

    async def get_trip(self, db: AsyncSession, trip_id: UUID) -> TripResponse:
        """여행 상세 조회.

        Raises:
            NotFoundError: 여행을 찾을 수 없을 때 (Trip not found)
        """
        return await self._detail_response(db, trip_id)

    async def get_trips_by_destination(
        self,
        db: AsyncSession,
        destination_id: UUID,
    ) -> list[TripResponse]:
        """여행지별 여행 목록.

        Trips of one destination.

        Raises:
            NotFoundError: 여행지를 찾을 수 없을 때 (Destination not found)
        """
        await self._ensure_destination(db, destination_id)
        trips: list[Trip] = await trip_repository.list_detailed(db, destination_id=destination_id)
        return await self._to_responses(db, trips)

    async def search_trips(
        self,
        db: AsyncSession,
        name: str | None,
        description: str | None,
        page: int,
        count: int,
    ) -> list[TripResponse]:
        """이름/설명으로 여행을 검색합니다.

        Search trips by name/description substring with paging.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            name: 이름 검색어 (Name substring)
            description: 설명 검색어 (Description substring)
            page: 페이지 번호, 1 이상 (Page number, >= 1)
            count: 페이지 크기, 1~100 (Page size, 1..100)

        Returns:
            list[TripResponse]: 해당 페이지의 여행 목록 (Trips on the requested page)

        Raises:
            BadRequestError: 잘못된 페이지 파라미터 (Invalid paging parameters)
        """
        if page < 1:
            raise BadRequestError("Page must be at least 1")
        if count < 1 or count > MAX_SEARCH_COUNT:
            raise BadRequestError(f"Count must be between 1 and {MAX_SEARCH_COUNT}")
        trips, _total = await trip_repository.search(db, name, description, page, count)
        return await self._to_responses(db, trips)

    async def create_trip(self, db: AsyncSession, data: TripCreate) -> TripResponse:
        """새 여행을 생성합니다.

        Create a trip for an existing destination.

        Raises:
            NotFoundError: 여행지를 찾을 수 없을 때 (Destination not found)
        """
        await self._ensure_destination(db, data.destination_id)
        trip: Trip = await trip_repository.create(db, data.model_dump())
        await log_service.information(db, f"Trip '{trip.name}' created")
        return await self._detail_response(db, trip.id)

    async def update_trip(
        self,
        db: AsyncSession,
        trip_id: UUID,
        data: TripUpdate,
    ) -> TripResponse:
        """여행 정보를 수정합니다.

        Replace a trip's fields. Capacity may not drop below the participants
        already booked.

        Raises:
            NotFoundError: 여행 또는 여행지를 찾을 수 없을 때 (Trip or destination not found)
            BadRequestError: 정원이 예약 인원보다 적을 때 (Capacity below booked participants)
        """
        if await trip_repository.get_by_id(db, trip_id) is None:
            raise NotFoundError("Trip not found")
        await self._ensure_destination(db, data.destination_id)

        booked: int = (await trip_repository.get_booked_counts(db, [trip_id])).get(trip_id, 0)
        if data.max_participants < booked:
            raise BadRequestError(
                f"Max participants cannot be lower than the {booked} participants already booked"
            )

        trip: Trip | None = await trip_repository.update(db, trip_id, data.model_dump())
        await log_service.information(db, f"Trip '{trip.name}' updated")
        return await self._detail_response(db, trip_id)

    async def update_image(
        self,
        db: AsyncSession,
        trip_id: UUID,
        data: ImageUrlUpdate,
    ) -> TripResponse:
        """여행 이미지 URL만 변경합니다 (Set only the image URL)."""
        trip: Trip | None = await trip_repository.update(db, trip_id, {"image_url": data.image_url})
        if trip is None:
            raise NotFoundError("Trip not found")
        await log_service.information(db, f"Trip '{trip.name}' image updated")
        return await self._detail_response(db, trip_id)

    async def delete_trip(self, db: AsyncSession, trip_id: UUID) -> None:
        """여행을 삭제합니다 — 가이드 배정은 함께 삭제.

        Delete a trip and its guide assignments. Refused while registrations exist.

        Raises:
            NotFoundError: 여행을 찾을 수 없을 때 (Trip not found)
            ConflictError: 예약이 있을 때 (Trip still has registrations)
        """
        trip: Trip | None = await trip_repository.get_by_id(db, trip_id)
        if trip is None:
            raise NotFoundError("Trip not found")
        if await trip_repository.has_registrations(db, trip_id):
            await log_service.warning(
                db, f"Refused to delete trip '{trip.name}': it has registrations", persist=True
            )
            raise ConflictError("Cannot delete a trip that has registrations")

        name: str = trip.name
        await trip_repository.delete(db, trip_id)
        await log_service.information(db, f"Trip '{name}' deleted")

    async def assign_guide(self, db: AsyncSession, trip_id: UUID, guide_id: UUID) -> TripResponse:
        """여행에 가이드를 배정합니다 — 이미 배정된 경우 변경 없음.

        Assign a guide to a trip. Assigning twice is a no-op.

        Raises:
            NotFoundError: 여행 또는 가이드를 찾을 수 없을 때 (Trip or guide not found)
        """
        trip: Trip | None = await trip_repository.get_by_id(db, trip_id)
        if trip is None:
            raise NotFoundError("Trip not found")
        guide = await guide_repository.get_by_id(db, guide_id)
        if guide is None:
            raise NotFoundError("Guide not found")

        if await trip_repository.get_trip_guide(db, trip_id, guide_id) is None:
            await trip_repository.add_guide(db, trip, guide)
            await log_service.information(db, f"Guide '{guide.name}' assigned to trip '{trip.name}'")
        return await self._detail_response(db, trip_id)

    async def remove_guide(self, db: AsyncSession, trip_id: UUID, guide_id: UUID) -> None:
        """여행에서 가이드 배정을 해제합니다.

        Remove a guide assignment.

        Raises:
            NotFoundError: 배정이 없을 때 (Assignment does not exist)
        """
        link: TripGuide | None = await trip_repository.get_trip_guide(db, trip_id, guide_id)
        if link is None:
            raise NotFoundError("Guide is not assigned to this trip")
        await trip_repository.remove_guide(db, link)
        await log_service.information(db, f"Guide {guide_id} removed from trip {trip_id}")


# 싱글턴 인스턴스: Singleton instance
trip_service: TripService = TripService()
