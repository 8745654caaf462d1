"""여행지 라우터 — 여행지 CRUD 엔드포인트.

Destination Router — CRUD endpoints. Reads are public, writes need Admin.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.destination import (
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
    ImageUrlUpdate,
)
from travel_org.services.destination_service import destination_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[DestinationResponse])
async def list_destinations(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[DestinationResponse]:
    """여행지 목록을 조회합니다 (List all destinations)."""
    return await destination_service.list_destinations(db)


@router.get("/{destination_id}", response_model=DestinationResponse)
async def get_destination(
    destination_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DestinationResponse:
    """여행지를 조회합니다 (Retrieve one destination)."""
    return await destination_service.get_destination(db, destination_id)


@router.post("/", response_model=DestinationResponse, status_code=201)
async def create_destination(
    data: DestinationCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DestinationResponse:
    """새 여행지를 생성합니다 (Create a destination)."""
    result: DestinationResponse = await destination_service.create_destination(db, data)
    await db.commit()
    return result


@router.put("/{destination_id}", response_model=DestinationResponse)
async def update_destination(
    destination_id: UUID,
    data: DestinationUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DestinationResponse:
    """여행지 정보를 수정합니다 (Update a destination)."""
    result: DestinationResponse = await destination_service.update_destination(db, destination_id, data)
    await db.commit()
    return result


@router.put("/{destination_id}/image", response_model=DestinationResponse)
async def update_destination_image(
    destination_id: UUID,
    data: ImageUrlUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> DestinationResponse:
    """여행지 이미지 URL을 변경합니다 (Set the destination's image URL)."""
    result: DestinationResponse = await destination_service.update_image(db, destination_id, data)
    await db.commit()
    return result


@router.delete("/{destination_id}", status_code=204)
async def delete_destination(
    destination_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """여행지를 삭제합니다 — 여행이 있으면 409.

    Delete a destination. Returns 409 while trips still reference it.
    """
    await destination_service.delete_destination(db, destination_id)
    await db.commit()
