"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package registers every model with the metadata,
which Alembic and relationship resolution rely on.

Modules:
    destination: 여행지 (Destinations)
    trip: 여행 및 여행-가이드 연결 (Trips and the Trip-Guide association)
    guide: 가이드 (Guides)
    user: 사용자 (Users)
    registration: 여행 예약 (Trip registrations)
    log: 감사 로그 (Audit log)
"""

from travel_org.models.destination import Destination
from travel_org.models.trip import Trip, TripGuide
from travel_org.models.guide import Guide
from travel_org.models.user import User
from travel_org.models.registration import TripRegistration
from travel_org.models.log import Log

__all__ = [
    "Destination",
    "Trip", "TripGuide",
    "Guide",
    "User",
    "TripRegistration",
    "Log",
]
