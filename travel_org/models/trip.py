"""여행 및 여행-가이드 연결 SQLAlchemy ORM 모델 정의.

Trip and Trip-Guide association SQLAlchemy ORM model definitions.

Tables:
    - trips: 여행 상품 (Scheduled trips with price and capacity)
    - trip_guides: 여행-가이드 다대다 연결 (Many-to-many association, CASCADE both sides)
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal
from sqlalchemy import String, Date, DateTime, Integer, Numeric, ForeignKey, CheckConstraint, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_org.database import Base


class Trip(Base):
    """여행 모델 — 특정 여행지로 가는 일정, 가격, 정원.

    Trip model — A dated, priced, capacity-limited trip to one destination.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        destination_id: 여행지 FK (Destination foreign key, RESTRICT)
        name: 여행 이름 (Trip name)
        description: 설명 (Description, optional)
        start_date: 출발일 (First day of the trip)
        end_date: 종료일 (Last day of the trip)
        price: 1인당 가격 (Price per participant)
        image_url: 이미지 URL (Image URL, optional; falls back to the destination's)
        max_participants: 최대 참가 인원 (Capacity)

    Relationships:
        destination: 여행지 (Parent destination)
        trip_guides: 가이드 연결 (Guide links, deleted with the trip)
        registrations: 예약 목록 (Registrations, RESTRICT on delete)
    """

    __tablename__ = "trips"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    # 여행지 FK: 여행이 남아있으면 여행지 삭제 불가 (RESTRICT)
    destination_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("destinations.id", ondelete="RESTRICT"), nullable=False)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    max_participants: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        CheckConstraint("price > 0", name="ck_trip_price_positive"),
        CheckConstraint("max_participants > 0", name="ck_trip_capacity_positive"),
        CheckConstraint("end_date >= start_date", name="ck_trip_dates_ordered"),
        Index("ix_trips_destination", "destination_id"),
    )

    # 관계: Relationships
    destination = relationship("Destination", back_populates="trips")
    trip_guides = relationship("TripGuide", back_populates="trip", cascade="all, delete-orphan")
    registrations = relationship("TripRegistration", back_populates="trip", passive_deletes="all")


class TripGuide(Base):
    """여행-가이드 연결 모델 — 복합 기본키 (trip_id, guide_id).

    Trip-Guide association. Either side being deleted removes the link only.
    """

    __tablename__ = "trip_guides"

    trip_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("trips.id", ondelete="CASCADE"), primary_key=True)
    guide_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("guides.id", ondelete="CASCADE"), primary_key=True)

    trip = relationship("Trip", back_populates="trip_guides")
    guide = relationship("Guide", back_populates="trip_guides")
