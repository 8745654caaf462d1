"""여행 예약 Pydantic 요청/응답 스키마 정의.

Trip registration request/response schema definitions.
Total price is never accepted from clients; the server computes it.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Any
from uuid import UUID
from pydantic import BaseModel, Field, field_validator


class RegistrationCreate(BaseModel):
    """예약 생성 요청 스키마.

    Registration creation request.

    Attributes:
        trip_id: 여행 UUID (Trip to book)
        user_id: 예약자 UUID — 관리자만 지정 가능 (Honoured for admins only)
        number_of_participants: 참가 인원 (Participants, >= 1)
    """

    trip_id: UUID
    user_id: UUID | None = None
    number_of_participants: int = Field(default=1, ge=1)


class RegistrationUpdate(BaseModel):
    """예약 수정 요청 스키마 (Participants and status update)."""

    number_of_participants: int = Field(ge=1)
    status: str = Field(min_length=1, max_length=20)

    @field_validator("status", mode="before")
    @classmethod
    def _strip_status(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class RegistrationStatusUpdate(BaseModel):
    """예약 상태 변경 요청 스키마 (Status-only update, admin)."""

    status: str = Field(min_length=1, max_length=20)

    @field_validator("status", mode="before")
    @classmethod
    def _strip_status(cls, value: Any) -> Any:
        """공백만 있는 상태는 빈 값으로 취급 (Whitespace-only counts as empty)."""
        return value.strip() if isinstance(value, str) else value


class RegistrationResponse(BaseModel):
    """예약 응답 스키마 — 여행/사용자 요약 포함.

    Registration response with trip and user summary fields.
    """

    id: str
    user_id: str
    username: str = ""
    trip_id: str
    trip_name: str = ""
    destination_name: str = ""
    start_date: date | None = None
    end_date: date | None = None
    registration_date: datetime
    number_of_participants: int
    total_price: Decimal
    status: str
