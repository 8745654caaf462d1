"""가이드 SQLAlchemy ORM 모델 정의.

Guide SQLAlchemy ORM model definition.

Tables:
    - guides: 여행 가이드 (Tour guides assignable to many trips)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_org.database import Base


class Guide(Base):
    """가이드 모델 — 여러 여행에 배정될 수 있는 인솔자.

    Guide model. Linked to trips through TripGuide; deleting a guide
    removes the links and leaves the trips untouched.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 이름 (Full name)
        bio: 소개 (Short biography, optional)
        email: 이메일 (Contact email)
        phone: 전화번호 (Phone number, optional)
        image_url: 프로필 이미지 URL (Profile image URL, optional)
        years_of_experience: 경력 연수 (Years of experience, optional)
    """

    __tablename__ = "guides"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[str | None] = mapped_column(String(500), nullable=True)
    email: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    years_of_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    trip_guides = relationship("TripGuide", back_populates="guide", cascade="all, delete-orphan")
