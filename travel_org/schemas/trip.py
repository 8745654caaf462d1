"""여행 Pydantic 요청/응답 스키마 정의.

Trip request/response schema definitions.
"""

from datetime import date
from uuid import UUID
from decimal import Decimal
from pydantic import BaseModel, Field, model_validator

from travel_org.schemas.guide import GuideResponse


class TripCreate(BaseModel):
    """여행 생성 요청 스키마.

    Trip creation request. end_date may equal start_date (single-day trip)
    but never precede it.
    """

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    start_date: date
    end_date: date
    price: Decimal = Field(gt=0, max_digits=10, decimal_places=2)
    image_url: str | None = Field(default=None, max_length=500)
    max_participants: int = Field(ge=1)
    destination_id: UUID

    @model_validator(mode="after")
    def _dates_ordered(self) -> "TripCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class TripUpdate(TripCreate):
    """여행 수정 요청 스키마 — 전체 필드 교체 (Full replacement update)."""


class TripResponse(BaseModel):
    """여행 응답 스키마.

    Trip response enriched with destination data, remaining capacity,
    and the assigned guides.

    Attributes:
        image_url: 여행 이미지, 없으면 여행지 이미지 (Trip image, or the destination's)
        available_spots: 남은 자리 = 정원 - 예약 인원 합계 (Capacity minus booked participants)
    """

    id: str
    name: str
    description: str = ""
    start_date: date
    end_date: date
    price: Decimal
    image_url: str = ""
    max_participants: int
    destination_id: str
    destination_name: str = ""
    country: str = ""
    city: str = ""
    available_spots: int
    guides: list[GuideResponse] = []
