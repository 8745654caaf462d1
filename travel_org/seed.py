"""초기 데이터 시드 스크립트 — 관리자 계정과 샘플 여행지/여행/가이드 생성.

Seed script — Creates the administrator account and sample destinations,
trips and guides. Run once to bootstrap a fresh database.

Usage:
    python -m travel_org.seed

Creates:
    - 1개 관리자 계정: admin / admin123 (1 admin user)
    - 3개 여행지, 각 여행지별 여행 1개 (3 destinations with one trip each)
    - 2명의 가이드, 각 여행에 배정 (2 guides assigned to the trips)
"""

import asyncio
from datetime import date
from decimal import Decimal

from sqlalchemy import select

from travel_org.database import async_session, engine, Base
from travel_org.models import Destination, Guide, Trip, TripGuide, User
from travel_org.utils.password import hash_password

_DESTINATIONS: list[dict[str, str]] = [
    {
        "name": "Paris",
        "country": "France",
        "city": "Paris",
        "description": "The city of light, art and cafés.",
        "image_url": "https://images.unsplash.com/photo-1502602898657-3e91760cbb34",
    },
    {
        "name": "Kyoto",
        "country": "Japan",
        "city": "Kyoto",
        "description": "Temples, gardens and traditional tea houses.",
        "image_url": "https://images.unsplash.com/photo-1493976040374-85c8e12f0c0e",
    },
    {
        "name": "Dubrovnik",
        "country": "Croatia",
        "city": "Dubrovnik",
        "description": "Walled old town on the Adriatic coast.",
        "image_url": "https://images.unsplash.com/photo-1555990538-c3d9d2d4c3b1",
    },
]


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Idempotent: 관리자 계정이 이미 있으면 건너뜁니다 (Skips if the admin exists).
    """
    # 테이블 생성: DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(select(User).where(User.username == "admin"))
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        admin: User = User(
            username="admin",
            email="admin@travel.local",
            password_hash=hash_password("admin123"),
            first_name="System",
            last_name="Admin",
            is_admin=True,
        )
        db.add(admin)

        guides: list[Guide] = [
            Guide(name="Marie Laurent", email="marie@travel.local", bio="Art historian and Paris native.", years_of_experience=8),
            Guide(name="Kenji Sato", email="kenji@travel.local", bio="Licensed guide for the Kansai region.", years_of_experience=12),
        ]
        db.add_all(guides)

        for index, data in enumerate(_DESTINATIONS):
            destination: Destination = Destination(**data)
            db.add(destination)
            await db.flush()  # flush로 destination.id 생성 (Flush to generate destination.id)

            trip: Trip = Trip(
                destination_id=destination.id,
                name=f"{data['name']} Discovery",
                description=f"A guided week exploring {data['city']}.",
                start_date=date(2027, 5 + index, 1),
                end_date=date(2027, 5 + index, 7),
                price=Decimal("1200.00") + Decimal(index * 150),
                max_participants=20,
            )
            db.add(trip)
            await db.flush()
            db.add(TripGuide(trip=trip, guide=guides[index % len(guides)]))

        await db.commit()
        print("Seeded: admin user=admin/admin123, 3 destinations, 3 trips, 2 guides")


if __name__ == "__main__":
    asyncio.run(seed())
