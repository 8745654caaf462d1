"""여행 예약 서비스 — 예약 생성/수정/취소 비즈니스 로직.

Trip Registration Service — Booking business logic.

Invariants:
    - total_price = trip.price * number_of_participants (서버에서 계산, computed here)
    - 여행별 참가 인원 합계 <= max_participants (Booked participants never exceed capacity)
    - 일반 사용자는 자신의 예약만 접근 가능 (Users only touch their own bookings)
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.registration import DEFAULT_STATUS, TripRegistration
from travel_org.models.trip import Trip
from travel_org.models.user import User
from travel_org.repositories.registration_repository import registration_repository
from travel_org.repositories.trip_repository import trip_repository
from travel_org.repositories.user_repository import user_repository
from travel_org.schemas.registration import (
    RegistrationCreate,
    RegistrationResponse,
    RegistrationStatusUpdate,
    RegistrationUpdate,
)
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import BadRequestError, ForbiddenError, NotFoundError


class RegistrationService:
    """여행 예약 관련 비즈니스 로직을 처리하는 서비스.

    Service handling trip registration business logic.
    """

    def _to_response(self, registration: TripRegistration) -> RegistrationResponse:
        """예약 모델을 응답 스키마로 변환합니다.

        Convert a TripRegistration (user, trip and destination loaded) to a response.
        """
        trip: Trip | None = registration.trip
        return RegistrationResponse(
            id=str(registration.id),
            user_id=str(registration.user_id),
            username=registration.user.username if registration.user else "",
            trip_id=str(registration.trip_id),
            trip_name=trip.name if trip else "",
            destination_name=trip.destination.name if trip and trip.destination else "",
            start_date=trip.start_date if trip else None,
            end_date=trip.end_date if trip else None,
            registration_date=registration.registration_date,
            number_of_participants=registration.number_of_participants,
            total_price=registration.total_price,
            status=registration.status,
        )

    async def _get_owned(
        self,
        db: AsyncSession,
        registration_id: UUID,
        current_user: User,
    ) -> TripRegistration:
        """예약을 조회하고 소유자/관리자 여부를 확인합니다.

        Load a registration and check the caller owns it or is an admin.

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Registration not found)
            ForbiddenError: 다른 사용자의 예약일 때 (Someone else's registration)
        """
        registration: TripRegistration | None = await registration_repository.get_detail(db, registration_id)
        if registration is None:
            raise NotFoundError("Registration not found")
        if not current_user.is_admin and registration.user_id != current_user.id:
            raise ForbiddenError("You can only access your own registrations")
        return registration

    async def _check_capacity(
        self,
        db: AsyncSession,
        trip: Trip,
        participants: int,
        exclude_id: UUID | None = None,
    ) -> None:
        """정원 초과 여부를 확인합니다.

        Raises:
            BadRequestError: 남은 자리보다 많이 예약할 때 (Not enough spots left)
        """
        booked: int = await registration_repository.sum_participants(db, trip.id, exclude_id=exclude_id)
        available: int = trip.max_participants - booked
        if participants > available:
            raise BadRequestError(f"Not enough spots available. Only {max(available, 0)} spots left.")

    async def list_registrations(self, db: AsyncSession) -> list[RegistrationResponse]:
        """모든 예약 목록 (All registrations, admin only)."""
        registrations = await registration_repository.list_detailed(db)
        return [self._to_response(r) for r in registrations]

    async def get_registration(
        self,
        db: AsyncSession,
        registration_id: UUID,
        current_user: User,
    ) -> RegistrationResponse:
        """예약 상세 조회 — 소유자 또는 관리자 (Owner or admin)."""
        registration = await self._get_owned(db, registration_id, current_user)
        return self._to_response(registration)

    async def get_user_registrations(
        self,
        db: AsyncSession,
        user_id: UUID,
        current_user: User,
    ) -> list[RegistrationResponse]:
        """사용자별 예약 목록.

        Registrations of one user. Users may only list their own.

        Raises:
            ForbiddenError: 다른 사용자의 목록 요청 (Listing someone else's bookings)
            NotFoundError: 사용자를 찾을 수 없을 때 (User not found)
        """
        if not current_user.is_admin and user_id != current_user.id:
            raise ForbiddenError("You can only view your own registrations")
        if await user_repository.get_by_id(db, user_id) is None:
            raise NotFoundError("User not found")
        registrations = await registration_repository.list_detailed(db, user_id=user_id)
        return [self._to_response(r) for r in registrations]

    async def get_trip_registrations(self, db: AsyncSession, trip_id: UUID) -> list[RegistrationResponse]:
        """여행별 예약 목록 (Registrations of one trip, admin only).

        Raises:
            NotFoundError: 여행을 찾을 수 없을 때 (Trip not found)
        """
        if await trip_repository.get_by_id(db, trip_id) is None:
            raise NotFoundError("Trip not found")
        registrations = await registration_repository.list_detailed(db, trip_id=trip_id)
        return [self._to_response(r) for r in registrations]

    async def create_registration(
        self,
        db: AsyncSession,
        current_user: User,
        data: RegistrationCreate,
    ) -> RegistrationResponse:
        """여행을 예약합니다.

        Book a trip. The booking user is the caller unless an admin names
        another user. Status starts as "Pending" and the total price is
        computed from the trip price.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            current_user: 현재 사용자 (Authenticated user)
            data: 예약 생성 데이터 (Registration creation data)

        Returns:
            RegistrationResponse: 생성된 예약 (Created registration)

        Raises:
            NotFoundError: 여행 또는 지정된 사용자를 찾을 수 없을 때 (Trip or user not found)
            BadRequestError: 정원 초과 (Not enough spots)
        """
        user: User = current_user
        if current_user.is_admin and data.user_id is not None and data.user_id != current_user.id:
            target: User | None = await user_repository.get_by_id(db, data.user_id)
            if target is None:
                raise NotFoundError("User not found")
            user = target

        trip: Trip | None = await trip_repository.get_by_id(db, data.trip_id)
        if trip is None:
            raise NotFoundError("Trip not found")
        await self._check_capacity(db, trip, data.number_of_participants)

        total_price: Decimal = trip.price * data.number_of_participants
        registration: TripRegistration = await registration_repository.create(
            db,
            {
                "user_id": user.id,
                "trip_id": trip.id,
                "number_of_participants": data.number_of_participants,
                "total_price": total_price,
                "status": DEFAULT_STATUS,
            },
        )
        await log_service.information(
            db,
            f"User '{user.username}' booked trip '{trip.name}' for {data.number_of_participants} participant(s)",
        )
        return self._to_response(await registration_repository.get_detail(db, registration.id))

    async def update_registration(
        self,
        db: AsyncSession,
        registration_id: UUID,
        current_user: User,
        data: RegistrationUpdate,
    ) -> RegistrationResponse:
        """예약의 참가 인원과 상태를 수정합니다.

        Update participants and status. Capacity is re-checked without this
        registration's own participants and the price is recomputed.

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Registration not found)
            ForbiddenError: 다른 사용자의 예약일 때 (Someone else's registration)
            BadRequestError: 정원 초과 (Not enough spots)
        """
        registration = await self._get_owned(db, registration_id, current_user)
        trip: Trip = registration.trip

        if data.number_of_participants != registration.number_of_participants:
            await self._check_capacity(db, trip, data.number_of_participants, exclude_id=registration.id)
            registration.number_of_participants = data.number_of_participants
            registration.total_price = trip.price * data.number_of_participants
        registration.status = data.status
        await db.flush()

        await log_service.information(db, f"Registration {registration.id} updated")
        return self._to_response(await registration_repository.get_detail(db, registration.id))

    async def update_status(
        self,
        db: AsyncSession,
        registration_id: UUID,
        data: RegistrationStatusUpdate,
    ) -> RegistrationResponse:
        """예약 상태만 변경합니다 (Set status only, admin).

        Raises:
            NotFoundError: 예약을 찾을 수 없을 때 (Registration not found)
        """
        registration: TripRegistration | None = await registration_repository.get_detail(db, registration_id)
        if registration is None:
            raise NotFoundError("Registration not found")
        registration.status = data.status
        await db.flush()
        await log_service.information(db, f"Registration {registration.id} status set to '{data.status}'")
        return self._to_response(registration)

    async def delete_registration(
        self,
        db: AsyncSession,
        registration_id: UUID,
        current_user: User,
    ) -> None:
        """예약을 취소(삭제)합니다 — 소유자 또는 관리자.

        Cancel (delete) a registration.
        """
        registration = await self._get_owned(db, registration_id, current_user)
        trip_name: str = registration.trip.name if registration.trip else str(registration.trip_id)
        await registration_repository.delete(db, registration.id)
        await log_service.information(db, f"Registration {registration_id} for trip '{trip_name}' cancelled")


# 싱글턴 인스턴스: Singleton instance
registration_service: RegistrationService = RegistrationService()
