"""감사 로그 라우터 — 관리자 전용 (Audit log router, admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.api.deps import require_admin
from travel_org.database import get_db
from travel_org.models.user import User
from travel_org.schemas.log import LogCountResponse, LogResponse
from travel_org.services.log_service import log_service

router: APIRouter = APIRouter()


@router.get("/get/{count}", response_model=list[LogResponse])
async def get_logs(
    count: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> list[LogResponse]:
    """최신 로그 조회 — count가 0 이하이면 400 (Newest rows; count <= 0 is 400)."""
    return await log_service.get_logs(db, count)


@router.get("/count", response_model=LogCountResponse)
async def get_log_count(
    db: Annotated[AsyncSession, Depends(get_db)],
    current_user: Annotated[User, Depends(require_admin)],
) -> LogCountResponse:
    """전체 로그 개수 (Total audit rows)."""
    return await log_service.get_count(db)
