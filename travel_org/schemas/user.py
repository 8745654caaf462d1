"""사용자 관련 Pydantic 요청/응답 스키마 정의.

User profile request/response schema definitions.
"""

from pydantic import BaseModel, Field

from travel_org.schemas.auth import EMAIL_PATTERN, PHONE_PATTERN


class UserResponse(BaseModel):
    """사용자 응답 스키마 — 비밀번호 해시는 절대 포함하지 않음.

    User response schema. The password hash is never exposed.
    """

    id: str
    username: str
    email: str
    first_name: str | None = None
    last_name: str | None = None
    phone_number: str | None = None
    address: str | None = None
    is_admin: bool
    full_name: str  # "이름 성" 또는 사용자명 ("first last", or the username when both are empty)


class ProfileUpdate(BaseModel):
    """프로필 수정 요청 스키마.

    Profile update request. Username and admin flag cannot be changed here.
    """

    email: str = Field(max_length=100, pattern=EMAIL_PATTERN)
    first_name: str | None = Field(default=None, max_length=100)
    last_name: str | None = Field(default=None, max_length=100)
    phone_number: str | None = Field(default=None, max_length=20, pattern=PHONE_PATTERN)
    address: str | None = Field(default=None, max_length=200)
