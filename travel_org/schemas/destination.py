"""여행지 Pydantic 요청/응답 스키마 정의.

Destination request/response schema definitions.
"""

from pydantic import BaseModel, Field


class DestinationCreate(BaseModel):
    """여행지 생성 요청 스키마 (Destination creation request)."""

    name: str = Field(min_length=1, max_length=100)
    description: str | None = Field(default=None, max_length=500)
    country: str = Field(min_length=1, max_length=100)
    city: str = Field(min_length=1, max_length=100)
    image_url: str | None = Field(default=None, max_length=500)


class DestinationUpdate(DestinationCreate):
    """여행지 수정 요청 스키마 — 전체 필드 교체 (Full replacement update)."""


class ImageUrlUpdate(BaseModel):
    """이미지 URL만 변경하는 요청 스키마 (Image-only update for destinations and trips)."""

    image_url: str = Field(min_length=1, max_length=500)


class DestinationResponse(BaseModel):
    """여행지 응답 스키마 (Destination response)."""

    id: str
    name: str
    description: str = ""
    country: str
    city: str
    image_url: str | None = None
