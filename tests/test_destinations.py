"""여행지 API 테스트 — CRUD, 이미지 변경, 삭제 제한.

Destination API tests — CRUD, image update, and the restrict-on-delete rule.
"""

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import auth_header
from travel_org.models import Destination, Trip

DESTINATIONS = "/api/destinations"

NEW_DESTINATION = {
    "name": "Kyoto",
    "country": "Japan",
    "city": "Kyoto",
    "description": "Temples and gardens",
}


class TestDestinationRead:
    """여행지 조회 테스트 — 인증 불필요."""

    async def test_list_public(self, client: AsyncClient, destination):
        """목록은 공개."""
        res = await client.get(f"{DESTINATIONS}/")
        assert res.status_code == 200
        assert [d["name"] for d in res.json()] == ["Paris"]

    async def test_get_by_id(self, client: AsyncClient, destination):
        """단일 조회."""
        res = await client.get(f"{DESTINATIONS}/{destination.id}")
        assert res.status_code == 200
        data = res.json()
        assert data["country"] == "France"
        assert data["image_url"] == "https://img.test/paris.jpg"

    async def test_get_unknown(self, client: AsyncClient):
        """존재하지 않는 여행지 — 404."""
        res = await client.get(f"{DESTINATIONS}/00000000-0000-0000-0000-000000000000")
        assert res.status_code == 404


class TestDestinationWrite:
    """여행지 생성/수정 테스트 — 관리자 전용."""

    async def test_create_as_admin(self, client: AsyncClient, admin_token):
        """관리자 생성 — 201."""
        res = await client.post(f"{DESTINATIONS}/", json=NEW_DESTINATION, headers=auth_header(admin_token))
        assert res.status_code == 201
        data = res.json()
        assert data["name"] == "Kyoto"
        assert data["id"]

    async def test_create_requires_token(self, client: AsyncClient):
        """토큰 없음 — 401."""
        res = await client.post(f"{DESTINATIONS}/", json=NEW_DESTINATION)
        assert res.status_code == 401

    async def test_create_as_user_forbidden(self, client: AsyncClient, user_token):
        """일반 사용자 — 403."""
        res = await client.post(f"{DESTINATIONS}/", json=NEW_DESTINATION, headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_create_missing_required(self, client: AsyncClient, admin_token):
        """필수 필드 누락 — 422."""
        res = await client.post(f"{DESTINATIONS}/", json={"name": "Nowhere"}, headers=auth_header(admin_token))
        assert res.status_code == 422

    async def test_update(self, client: AsyncClient, admin_token, destination):
        """전체 필드 수정."""
        res = await client.put(
            f"{DESTINATIONS}/{destination.id}",
            json={"name": "Paris Centre", "country": "France", "city": "Paris", "description": "Updated"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["name"] == "Paris Centre"
        assert res.json()["description"] == "Updated"

    async def test_update_unknown(self, client: AsyncClient, admin_token):
        """존재하지 않는 여행지 수정 — 404."""
        res = await client.put(
            f"{DESTINATIONS}/00000000-0000-0000-0000-000000000000",
            json=NEW_DESTINATION,
            headers=auth_header(admin_token),
        )
        assert res.status_code == 404

    async def test_update_image_only(self, client: AsyncClient, admin_token, destination):
        """이미지 URL만 변경 — 다른 필드 유지."""
        res = await client.put(
            f"{DESTINATIONS}/{destination.id}/image",
            json={"image_url": "https://img.test/new.jpg"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["image_url"] == "https://img.test/new.jpg"
        assert res.json()["name"] == "Paris"


class TestDestinationDelete:
    """여행지 삭제 테스트 — 여행이 있으면 제한."""

    async def test_delete_empty_destination(self, client: AsyncClient, admin_token, destination, db: AsyncSession):
        """여행이 없는 여행지 삭제 — 204."""
        res = await client.delete(f"{DESTINATIONS}/{destination.id}", headers=auth_header(admin_token))
        assert res.status_code == 204
        assert (await db.execute(select(Destination))).scalars().all() == []

    async def test_delete_with_trips_conflict(self, client: AsyncClient, admin_token, destination, trip, db: AsyncSession):
        """여행이 있는 여행지 삭제 — 409, 여행지와 여행 유지."""
        res = await client.delete(f"{DESTINATIONS}/{destination.id}", headers=auth_header(admin_token))
        assert res.status_code == 409

        assert (await db.execute(select(Destination))).scalar_one().id == destination.id
        assert (await db.execute(select(Trip))).scalar_one().id == trip.id

    async def test_delete_as_user_forbidden(self, client: AsyncClient, user_token, destination):
        """일반 사용자 삭제 — 403."""
        res = await client.delete(f"{DESTINATIONS}/{destination.id}", headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_delete_unknown(self, client: AsyncClient, admin_token):
        """존재하지 않는 여행지 삭제 — 404."""
        res = await client.delete(
            f"{DESTINATIONS}/00000000-0000-0000-0000-000000000000", headers=auth_header(admin_token)
        )
        assert res.status_code == 404
