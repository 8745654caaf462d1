"""여행지 서비스 — 여행지 CRUD 비즈니스 로직.

Destination Service — Business logic for destination CRUD.
Deleting a destination that still has trips is refused with 409.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from travel_org.models.destination import Destination
from travel_org.repositories.destination_repository import destination_repository
from travel_org.schemas.destination import (
    DestinationCreate,
    DestinationResponse,
    DestinationUpdate,
    ImageUrlUpdate,
)
from travel_org.services.log_service import log_service
from travel_org.utils.exceptions import ConflictError, NotFoundError


class DestinationService:
    """여행지 관련 비즈니스 로직을 처리하는 서비스.

    Service handling destination business logic.
    """

    def _to_response(self, destination: Destination) -> DestinationResponse:
        """여행지 모델을 응답 스키마로 변환합니다.

        Convert a Destination model instance to a DestinationResponse schema.

        Args:
            destination: 여행지 모델 (Destination model instance)

        Returns:
            DestinationResponse: 여행지 응답 (Destination response)
        """
        return DestinationResponse(
            id=str(destination.id),
            name=destination.name,
            description=destination.description or "",
            country=destination.country,
            city=destination.city,
            image_url=destination.image_url,
        )

    async def list_destinations(self, db: AsyncSession) -> list[DestinationResponse]:
        """모든 여행지 목록을 조회합니다 (List all destinations)."""
        destinations: list[Destination] = await destination_repository.get_ordered(db)
        return [self._to_response(d) for d in destinations]

    async def get_destination(self, db: AsyncSession, destination_id: UUID) -> DestinationResponse:
        """여행지를 조회합니다.

        Raises:
            NotFoundError: 여행지를 찾을 수 없을 때 (Destination not found)
        """
        destination: Destination | None = await destination_repository.get_by_id(db, destination_id)
        if destination is None:
            raise NotFoundError("Destination not found")
        return self._to_response(destination)

    async def create_destination(
        self,
        db: AsyncSession,
        data: DestinationCreate,
    ) -> DestinationResponse:
        """새 여행지를 생성합니다.

        Create a new destination.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 여행지 생성 데이터 (Destination creation data)

        Returns:
            DestinationResponse: 생성된 여행지 (Created destination)
        """
        destination: Destination = await destination_repository.create(db, data.model_dump())
        await log_service.information(db, f"Destination '{destination.name}' created")
        return self._to_response(destination)

    async def update_destination(
        self,
        db: AsyncSession,
        destination_id: UUID,
        data: DestinationUpdate,
    ) -> DestinationResponse:
        """여행지 정보를 수정합니다.

        Replace a destination's fields.

        Raises:
            NotFoundError: 여행지를 찾을 수 없을 때 (Destination not found)
        """
        destination: Destination | None = await destination_repository.update(
            db, destination_id, data.model_dump()
        )
        if destination is None:
            raise NotFoundError("Destination not found")
        await log_service.information(db, f"Destination '{destination.name}' updated")
        return self._to_response(destination)

    async def update_image(
        self,
        db: AsyncSession,
        destination_id: UUID,
        data: ImageUrlUpdate,
    ) -> DestinationResponse:
        """여행지 이미지 URL만 변경합니다 (Set only the image URL)."""
        destination: Destination | None = await destination_repository.update(
            db, destination_id, {"image_url": data.image_url}
        )
        if destination is None:
            raise NotFoundError("Destination not found")
        await log_service.information(db, f"Destination '{destination.name}' image updated")
        return self._to_response(destination)

    async def delete_destination(self, db: AsyncSession, destination_id: UUID) -> None:
        """여행지를 삭제합니다.

        Delete a destination. Refused while any trip references it.

        Raises:
            NotFoundError: 여행지를 찾을 수 없을 때 (Destination not found)
            ConflictError: 연결된 여행이 있을 때 (Destination still has trips)
        """
        destination: Destination | None = await destination_repository.get_by_id(db, destination_id)
        if destination is None:
            raise NotFoundError("Destination not found")
        if await destination_repository.has_trips(db, destination_id):
            await log_service.warning(
                db, f"Refused to delete destination '{destination.name}': it still has trips", persist=True
            )
            raise ConflictError("Cannot delete a destination that still has trips")

        name: str = destination.name
        await destination_repository.delete(db, destination_id)
        await log_service.information(db, f"Destination '{name}' deleted")


# 싱글턴 인스턴스: Singleton instance
destination_service: DestinationService = DestinationService()
