"""여행 라우터 — 여행 CRUD, 검색, 가이드 배정 엔드포인트.

Trip Router — CRUD, search and guide assignment endpoints.
Reads are public, writes need Admin.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.destination import ImageUrlUpdate
from travel_org.schemas.trip import TripCreate, TripResponse, TripUpdate
from travel_org.services.trip_service import trip_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[TripResponse])
async def list_trips(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TripResponse]:
    """여행 목록을 조회합니다 (List all trips)."""
    return await trip_service.list_trips(db)


# /search, /destination/{id}는 /{trip_id}보다 먼저 등록
# (Literal routes are registered before the /{trip_id} catch-all)
@router.get("/search", response_model=list[TripResponse])
async def search_trips(
    db: Annotated[AsyncSession, Depends(get_db)],
    name: str | None = None,
    description: str | None = None,
    page: Annotated[int, Query()] = 1,
    count: Annotated[int, Query()] = 10,
) -> list[TripResponse]:
    """이름/설명으로 여행을 검색합니다.

    Search trips by name/description substring. Invalid paging returns 400.
    """
    return await trip_service.search_trips(db, name, description, page, count)


@router.get("/destination/{destination_id}", response_model=list[TripResponse])
async def list_trips_by_destination(
    destination_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[TripResponse]:
    """여행지별 여행 목록 (Trips of one destination)."""
    return await trip_service.get_trips_by_destination(db, destination_id)


@router.get("/{trip_id}", response_model=TripResponse)
async def get_trip(
    trip_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> TripResponse:
    """여행 상세 조회 (Retrieve one trip)."""
    return await trip_service.get_trip(db, trip_id)


@router.post("/", response_model=TripResponse, status_code=201)
async def create_trip(
    data: TripCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> TripResponse:
    """새 여행을 생성합니다 (Create a trip)."""
    result: TripResponse = await trip_service.create_trip(db, data)
    await db.commit()
    return result


@router.put("/{trip_id}", response_model=TripResponse)
async def update_trip(
    trip_id: UUID,
    data: TripUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> TripResponse:
    """여행 정보를 수정합니다 (Update a trip)."""
    result: TripResponse = await trip_service.update_trip(db, trip_id, data)
    await db.commit()
    return result


@router.put("/{trip_id}/image", response_model=TripResponse)
async def update_trip_image(
    trip_id: UUID,
    data: ImageUrlUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> TripResponse:
    """여행 이미지 URL을 변경합니다 (Set the trip's image URL)."""
    result: TripResponse = await trip_service.update_image(db, trip_id, data)
    await db.commit()
    return result


@router.delete("/{trip_id}", status_code=204)
async def delete_trip(
    trip_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """여행을 삭제합니다 — 예약이 있으면 409.

    Delete a trip and its guide assignments. Returns 409 while registrations exist.
    """
    await trip_service.delete_trip(db, trip_id)
    await db.commit()


@router.post("/{trip_id}/guides/{guide_id}", response_model=TripResponse)
async def assign_guide(
    trip_id: UUID,
    guide_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> TripResponse:
    """여행에 가이드를 배정합니다 (Assign a guide to a trip)."""
    result: TripResponse = await trip_service.assign_guide(db, trip_id, guide_id)
    await db.commit()
    return result


@router.delete("/{trip_id}/guides/{guide_id}", status_code=204)
async def remove_guide(
    trip_id: UUID,
    guide_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """여행에서 가이드 배정을 해제합니다 (Remove a guide assignment)."""
    await trip_service.remove_guide(db, trip_id, guide_id)
    await db.commit()
