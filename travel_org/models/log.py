"""감사 로그 SQLAlchemy ORM 모델 정의.

Audit log SQLAlchemy ORM model definition.

Tables:
    - logs: 애플리케이션 감사 로그 (Application audit log rows, readable by admins)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Text, DateTime, Integer
from sqlalchemy.orm import Mapped, mapped_column

from travel_org.database import Base


class Log(Base):
    """감사 로그 모델.

    Audit log row. Integer primary key keeps rows in insertion order.

    Attributes:
        id: 자동 증가 ID (Auto-increment identifier)
        timestamp: 기록 일시 UTC (When the event happened)
        level: 로그 레벨 (Information | Warning | Error)
        message: 로그 메시지 (Human-readable message)
    """

    __tablename__ = "logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    timestamp: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), index=True)
    level: Mapped[str] = mapped_column(String(50), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
