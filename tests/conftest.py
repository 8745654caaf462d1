"""테스트 인프라 — 테스트별 임시 DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — Per-test database, session, and httpx client fixtures.
Each test gets a fresh SQLite file (aiosqlite) with foreign keys enforced;
set TEST_DATABASE_URL to run against another database such as PostgreSQL.
"""

import os
from collections.abc import AsyncGenerator
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from travel_org.database import Base, get_db
from travel_org.main import app
from travel_org.models import *  # noqa: F401,F403: register all models with metadata
from travel_org.models import Destination, Guide, Trip, TripGuide, TripRegistration, User
from travel_org.utils.jwt import create_access_token, role_for
from travel_org.utils.password import hash_password
from travel_org.web.client import get_http_client

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL: str | None = os.environ.get("TEST_DATABASE_URL")


def _configure_sqlite(eng: AsyncEngine) -> None:
    """SQLite 연결 설정 — 외래키 활성화, 트랜잭션/세이브포인트 직접 관리.

    Enable foreign keys and let SQLAlchemy emit BEGIN itself so that
    SAVEPOINTs nest inside the request transaction.
    """
    @event.listens_for(eng.sync_engine, "connect")
    def _on_connect(dbapi_connection, connection_record):
        dbapi_connection.isolation_level = None
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    @event.listens_for(eng.sync_engine, "begin")
    def _on_begin(conn):
        conn.exec_driver_sql("BEGIN")


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진 — 스키마를 생성하고 종료 시 삭제합니다."""
    url: str = TEST_DATABASE_URL or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"
    eng = create_async_engine(url, echo=False)
    if eng.dialect.name == "sqlite":
        _configure_sqlite(eng)

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션과 웹 프론트엔드의 API 클라이언트를 오버라이드합니다.

    The web pages reach the API through an in-process ASGI transport, so a
    single client exercises both layers against the test database.
    """
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    async def _override_http_client() -> AsyncGenerator[AsyncClient, None]:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as api:
            yield api

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_http_client] = _override_http_client

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _make_user(db: AsyncSession, username: str, password: str, is_admin: bool = False, **fields) -> User:
    user = User(
        username=username,
        email=f"{username}@test.com",
        password_hash=hash_password(password),
        is_admin=is_admin,
        **fields,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await _make_user(db, "admin", "admin123!", is_admin=True, first_name="Test", last_name="Admin")


@pytest_asyncio.fixture
async def regular_user(db: AsyncSession) -> User:
    """일반 사용자를 생성합니다."""
    return await _make_user(db, "traveler", "travel123!", first_name="Tina", last_name="Traveler")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    """두 번째 일반 사용자를 생성합니다."""
    return await _make_user(db, "wanderer", "wander123!")


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    token, _expires_at = create_access_token({
        "sub": str(user.id),
        "name": user.username,
        "role": role_for(user.is_admin),
    })
    return token


@pytest.fixture
def admin_token(admin_user: User) -> str:
    return make_token(admin_user)


@pytest.fixture
def user_token(regular_user: User) -> str:
    return make_token(regular_user)


@pytest.fixture
def other_token(other_user: User) -> str:
    return make_token(other_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def destination(db: AsyncSession) -> Destination:
    """테스트 여행지를 생성합니다."""
    d = Destination(
        name="Paris",
        country="France",
        city="Paris",
        description="City of light",
        image_url="https://img.test/paris.jpg",
    )
    db.add(d)
    await db.flush()
    await db.refresh(d)
    return d


@pytest_asyncio.fixture
async def trip(db: AsyncSession, destination: Destination) -> Trip:
    """정원 10명, 1인 100.00의 테스트 여행을 생성합니다."""
    t = Trip(
        destination_id=destination.id,
        name="Paris Discovery",
        description="A week in Paris",
        start_date=date(2027, 6, 1),
        end_date=date(2027, 6, 7),
        price=Decimal("100.00"),
        max_participants=10,
    )
    db.add(t)
    await db.flush()
    await db.refresh(t)
    return t


@pytest_asyncio.fixture
async def guide(db: AsyncSession) -> Guide:
    """테스트 가이드를 생성합니다."""
    g = Guide(name="Marie Laurent", email="marie@test.com", bio="Art historian", years_of_experience=8)
    db.add(g)
    await db.flush()
    await db.refresh(g)
    return g


@pytest_asyncio.fixture
async def assigned_guide(db: AsyncSession, trip: Trip, guide: Guide) -> Guide:
    """테스트 여행에 가이드를 배정합니다."""
    db.add(TripGuide(trip=trip, guide=guide))
    await db.flush()
    return guide


@pytest_asyncio.fixture
async def registration(db: AsyncSession, trip: Trip, regular_user: User) -> TripRegistration:
    """일반 사용자의 2인 예약을 생성합니다."""
    r = TripRegistration(
        user_id=regular_user.id,
        trip_id=trip.id,
        number_of_participants=2,
        total_price=Decimal("200.00"),
    )
    db.add(r)
    await db.flush()
    await db.refresh(r)
    return r
