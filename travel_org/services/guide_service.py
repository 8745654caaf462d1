"""가이드 서비스 — 가이드 CRUD 비즈니스 로직.

Guide Service — Business logic for guide CRUD. Deleting a guide removes
its trip assignments and leaves the trips untouched.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.guide import Guide
from travel_org.repositories.guide_repository import guide_repository
from travel_org.repositories.trip_repository import trip_repository
from travel_org.schemas.guide import (
    DEFAULT_GUIDE_PROFILE_IMAGE,
    GuideCreate,
    GuideResponse,
    GuideUpdate,
)
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import NotFoundError


def guide_to_response(guide: Guide) -> GuideResponse:
    """가이드 모델을 응답 스키마로 변환합니다.

    Convert a Guide to GuideResponse; guides without a photo get the default
    profile image. Shared with the trip service.
    """
    return GuideResponse(
        id=str(guide.id),
        name=guide.name,
        bio=guide.bio or "",
        email=guide.email,
        phone=guide.phone or "",
        image_url=guide.image_url or DEFAULT_GUIDE_PROFILE_IMAGE,
        years_of_experience=guide.years_of_experience,
    )


class GuideService:
    """가이드 관련 비즈니스 로직을 처리하는 서비스."""

    async def list_guides(self, db: AsyncSession) -> list[GuideResponse]:
        """모든 가이드 목록 (All guides ordered by name)."""
        guides: list[Guide] = await guide_repository.get_ordered(db)
        return [guide_to_response(g) for g in guides]

    async def get_guide(self, db: AsyncSession, guide_id: UUID) -> GuideResponse:
        """가이드를 조회합니다.

        Raises:
            NotFoundError: 가이드를 찾을 수 없을 때 (Guide not found)
        """
        guide: Guide | None = await guide_repository.get_by_id(db, guide_id)
        if guide is None:
            raise NotFoundError("Guide not found")
        return guide_to_response(guide)

    async def get_guides_by_trip(self, db: AsyncSession, trip_id: UUID) -> list[GuideResponse]:
        """여행에 배정된 가이드 목록.

        Guides assigned to a trip.

        Raises:
            NotFoundError: 여행을 찾을 수 없을 때 (Trip not found)
        """
        if await trip_repository.get_by_id(db, trip_id) is None:
            raise NotFoundError("Trip not found")
        guides: list[Guide] = await guide_repository.get_by_trip(db, trip_id)
        return [guide_to_response(g) for g in guides]

    async def create_guide(self, db: AsyncSession, data: GuideCreate) -> GuideResponse:
        """새 가이드를 생성합니다 (Create a guide)."""
        guide: Guide = await guide_repository.create(db, data.model_dump())
        await log_service.information(db, f"Guide '{guide.name}' created")
        return guide_to_response(guide)

    async def update_guide(
        self,
        db: AsyncSession,
        guide_id: UUID,
        data: GuideUpdate,
    ) -> GuideResponse:
        """가이드 정보를 수정합니다.

        Replace a guide's fields.

        Raises:
            NotFoundError: 가이드를 찾을 수 없을 때 (Guide not found)
        """
        guide: Guide | None = await guide_repository.update(db, guide_id, data.model_dump())
        if guide is None:
            raise NotFoundError("Guide not found")
        await log_service.information(db, f"Guide '{guide.name}' updated")
        return guide_to_response(guide)

    async def delete_guide(self, db: AsyncSession, guide_id: UUID) -> None:
        """가이드를 삭제합니다 — 여행 배정도 함께 삭제.

        Delete a guide together with its trip assignments.

        Raises:
            NotFoundError: 가이드를 찾을 수 없을 때 (Guide not found)
        """
        guide: Guide | None = await guide_repository.get_by_id(db, guide_id)
        if guide is None:
            raise NotFoundError("Guide not found")
        name: str = guide.name
        await guide_repository.delete(db, guide_id)
        await log_service.information(db, f"Guide '{name}' deleted")


# 싱글턴 인스턴스: Singleton instance
guide_service: GuideService = GuideService()
