"""여행 예약 라우터 — 예약 생성/조회/수정/취소 엔드포인트.

Trip Registration Router — Booking endpoints. Every endpoint needs a bearer
token; listing all bookings and status changes need Admin.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import get_current_user, require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.registration import (
    RegistrationCreate,
    RegistrationResponse,
    RegistrationStatusUpdate,
    RegistrationUpdate,
)
from travel_org.services.registration_service import registration_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[RegistrationResponse])
async def list_registrations(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[RegistrationResponse]:
    """모든 예약 목록 (All registrations, admin only)."""
    return await registration_service.list_registrations(db)


@router.get("/user/{user_id}", response_model=list[RegistrationResponse])
async def list_user_registrations(
    user_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> list[RegistrationResponse]:
    """사용자별 예약 목록 — 본인 또는 관리자 (Self or admin)."""
    return await registration_service.get_user_registrations(db, user_id, current_user)


@router.get("/trip/{trip_id}", response_model=list[RegistrationResponse])
async def list_trip_registrations(
    trip_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[RegistrationResponse]:
    """여행별 예약 목록 (Registrations of one trip, admin only)."""
    return await registration_service.get_trip_registrations(db, trip_id)


@router.get("/{registration_id}", response_model=RegistrationResponse)
async def get_registration(
    registration_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RegistrationResponse:
    """예약 상세 — 소유자 또는 관리자 (Owner or admin)."""
    return await registration_service.get_registration(db, registration_id, current_user)


@router.post("/", response_model=RegistrationResponse, status_code=201)
async def create_registration(
    data: RegistrationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RegistrationResponse:
    """여행을 예약합니다.

    Book a trip. Over capacity returns 400, an unknown trip 404.
    """
    result: RegistrationResponse = await registration_service.create_registration(db, current_user, data)
    await db.commit()
    return result


@router.put("/{registration_id}", response_model=RegistrationResponse)
async def update_registration(
    registration_id: UUID,
    data: RegistrationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> RegistrationResponse:
    """예약을 수정합니다 — 소유자 또는 관리자 (Owner or admin)."""
    result: RegistrationResponse = await registration_service.update_registration(
        db, registration_id, current_user, data
    )
    await db.commit()
    return result


@router.patch("/{registration_id}/status", response_model=RegistrationResponse)
async def update_registration_status(
    registration_id: UUID,
    data: RegistrationStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> RegistrationResponse:
    """예약 상태 변경 (Set status, admin only)."""
    result: RegistrationResponse = await registration_service.update_status(db, registration_id, data)
    await db.commit()
    return result


@router.delete("/{registration_id}", status_code=204)
async def delete_registration(
    registration_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(get_current_user)],
) -> None:
    """예약 취소 — 소유자 또는 관리자 (Cancel a booking, owner or admin)."""
    await registration_service.delete_registration(db, registration_id, current_user)
    await db.commit()
