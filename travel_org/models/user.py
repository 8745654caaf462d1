"""사용자 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
Authorization is role-string based: is_admin maps to "Admin", otherwise "User".

Tables:
    - users: 사용자 계정 (User accounts, globally unique username/email)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, Boolean, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_org.database import Base


class User(Base):
    """사용자 모델 — 로그인 계정 및 프로필.

    User model — Login account and profile details.
    A user with registrations cannot be deleted (RESTRICT).

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        username: 로그인 아이디 (Login username, unique)
        email: 이메일 (Email address, unique)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        first_name: 이름 (First name, optional)
        last_name: 성 (Last name, optional)
        phone_number: 전화번호 (Phone number, optional)
        address: 주소 (Postal address, optional)
        is_admin: 관리자 여부 (Administrator flag)

    Relationships:
        registrations: 여행 예약 목록 (Trip registrations, RESTRICT on delete)
    """

    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # 비밀번호 해시: bcrypt (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(500), nullable=False)
    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    phone_number: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(String(200), nullable=True)
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    registrations = relationship("TripRegistration", back_populates="user", passive_deletes="all")

    @property
    def full_name(self) -> str:
        """표시용 이름 — 이름/성이 모두 비어 있으면 사용자명.

        Display name: "first last" trimmed, or the username when both are empty.
        """
        if not self.first_name and not self.last_name:
            return self.username
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
