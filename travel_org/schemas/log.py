"""감사 로그 Pydantic 응답 스키마 (Audit log response schemas)."""

from datetime import datetime
from pydantic import BaseModel


class LogResponse(BaseModel):
    """로그 응답 스키마 (Audit log row)."""

    id: int
    timestamp: datetime
    level: str
    message: str


class LogCountResponse(BaseModel):
    """로그 개수 응답 스키마 (Audit log row count)."""

    count: int
