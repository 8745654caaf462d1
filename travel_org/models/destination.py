"""여행지 SQLAlchemy ORM 모델 정의.

Destination SQLAlchemy ORM model definition.

Tables:
    - destinations: 여행지 (Travel destinations, parent of trips)
"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_org.database import Base


class Destination(Base):
    """여행지 모델 — 여행 상품이 속하는 장소.

    Destination model — A place trips are organised to.
    Deletion is restricted while any trip references the destination.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        name: 여행지 이름 (Destination name)
        description: 설명 (Free-text description, optional)
        country: 국가 (Country)
        city: 도시 (City)
        image_url: 대표 이미지 URL (Cover image URL, optional)
        created_at: 생성 일시 UTC (Creation timestamp)
        updated_at: 수정 일시 UTC (Last update timestamp)

    Relationships:
        trips: 이 여행지의 여행 목록 (Trips to this destination, RESTRICT on delete)
    """

    __tablename__ = "destinations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    country: Mapped[str] = mapped_column(String(100), nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    # passive_deletes="all": ORM이 자식 FK를 NULL로 바꾸지 않음: DB의 RESTRICT에 맡김
    # The ORM never nulls out trips.destination_id; the RESTRICT FK decides
    trips = relationship("Trip", back_populates="destination", passive_deletes="all")
