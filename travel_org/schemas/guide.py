"""가이드 Pydantic 요청/응답 스키마 정의.

Guide request/response schema definitions.
"""

from pydantic import BaseModel, Field

from travel_org.schemas.auth import EMAIL_PATTERN, PHONE_PATTERN

# 프로필 이미지가 없는 가이드의 기본 이미지: Default image for guides without a photo
DEFAULT_GUIDE_PROFILE_IMAGE: str = "/static/images/default-guide-profile.svg"


class GuideCreate(BaseModel):
    """가이드 생성 요청 스키마 (Guide creation request)."""

    name: str = Field(min_length=1, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    phone: str | None = Field(default=None, max_length=20, pattern=PHONE_PATTERN)
    image_url: str | None = Field(default=None, max_length=500)
    years_of_experience: int | None = Field(default=None, ge=0)


class GuideUpdate(GuideCreate):
    """가이드 수정 요청 스키마 — 전체 필드 교체 (Full replacement update)."""


class GuideResponse(BaseModel):
    """가이드 응답 스키마 (Guide response)."""

    id: str
    name: str
    bio: str = ""
    email: str
    phone: str = ""
    image_url: str = DEFAULT_GUIDE_PROFILE_IMAGE
    years_of_experience: int | None = None
