"""여행 예약 SQLAlchemy ORM 모델 정의.

Trip registration SQLAlchemy ORM model definition.

Tables:
    - trip_registrations: 사용자의 여행 예약 (A user's booking on a trip)
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from sqlalchemy import String, DateTime, Integer, Numeric, ForeignKey, CheckConstraint, Index, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from travel_org.database import Base

# 예약 상태 기본값: Default status for new registrations
DEFAULT_STATUS: str = "Pending"


class TripRegistration(Base):
    """여행 예약 모델 — 참가 인원과 계산된 총액을 기록.

    Trip registration model — Records participant count and the total price
    computed on the server as trip.price * number_of_participants.
    Both parent FKs are RESTRICT so financial records are never orphaned.

    Attributes:
        id: 고유 식별자 UUID (Unique identifier)
        user_id: 예약자 FK (Booking user foreign key)
        trip_id: 여행 FK (Booked trip foreign key)
        registration_date: 예약 일시 (When the booking was made)
        number_of_participants: 참가 인원 (Participants, >= 1)
        total_price: 총액 (Total price, > 0)
        status: 예약 상태 (Status string, e.g. "Pending", "Confirmed", "Cancelled")
    """

    __tablename__ = "trip_registrations"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("users.id", ondelete="RESTRICT"), nullable=False)
    trip_id: Mapped[uuid.UUID] = mapped_column(Uuid, ForeignKey("trips.id", ondelete="RESTRICT"), nullable=False)
    registration_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc))
    number_of_participants: Mapped[int] = mapped_column(Integer, nullable=False)
    total_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=DEFAULT_STATUS)

    __table_args__ = (
        CheckConstraint("number_of_participants > 0", name="ck_registration_participants_positive"),
        CheckConstraint("total_price > 0", name="ck_registration_total_positive"),
        Index("ix_trip_registrations_user", "user_id"),
        Index("ix_trip_registrations_trip", "trip_id"),
    )

    user = relationship("User", back_populates="registrations")
    trip = relationship("Trip", back_populates="registrations")
