"""가이드 라우터 — 가이드 CRUD 엔드포인트.

Guide Router — CRUD endpoints. Reads are public, writes need Admin.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.guide import GuideCreate, GuideResponse, GuideUpdate
from travel_org.services.guide_service import guide_service

router: APIRouter = APIRouter()


@router.get("/", response_model=list[GuideResponse])
async def list_guides(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[GuideResponse]:
    """가이드 목록 (List all guides)."""
    return await guide_service.list_guides(db)


@router.get("/trip/{trip_id}", response_model=list[GuideResponse])
async def list_guides_by_trip(
    trip_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[GuideResponse]:
    """여행에 배정된 가이드 목록 (Guides assigned to a trip)."""
    return await guide_service.get_guides_by_trip(db, trip_id)


@router.get("/{guide_id}", response_model=GuideResponse)
async def get_guide(
    guide_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> GuideResponse:
    """가이드 조회 (Retrieve one guide)."""
    return await guide_service.get_guide(db, guide_id)


@router.post("/", response_model=GuideResponse, status_code=201)
async def create_guide(
    data: GuideCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> GuideResponse:
    """새 가이드를 생성합니다 (Create a guide)."""
    result: GuideResponse = await guide_service.create_guide(db, data)
    await db.commit()
    return result


@router.put("/{guide_id}", response_model=GuideResponse)
async def update_guide(
    guide_id: UUID,
    data: GuideUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> GuideResponse:
    """가이드 정보를 수정합니다 (Update a guide)."""
    result: GuideResponse = await guide_service.update_guide(db, guide_id, data)
    await db.commit()
    return result


@router.delete("/{guide_id}", status_code=204)
async def delete_guide(
    guide_id: UUID,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> None:
    """가이드를 삭제합니다 — 여행 배정도 함께 삭제.

    Delete a guide; its trip assignments go with it.
    """
    await guide_service.delete_guide(db, guide_id)
    await db.commit()
