"""감사 로그 API 테스트 (Audit log API tests)."""

from datetime import datetime, timedelta, timezone

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import auth_header
from travel_org.models import Log


async def _add_logs(db: AsyncSession, messages: list[str]) -> None:
    base = datetime(2026, 1, 1, tzinfo=timezone.utc)
    for i, message in enumerate(messages):
        db.add(Log(timestamp=base + timedelta(minutes=i), level="Information", message=message))
    await db.flush()


class TestLogs:
    """로그 조회 테스트 — 관리자 전용."""

    async def test_latest_newest_first(self, client: AsyncClient, admin_token, db: AsyncSession):
        """최신순 조회."""
        await _add_logs(db, ["first", "second", "third"])
        res = await client.get("/api/logs/get/2", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert [log["message"] for log in res.json()] == ["third", "second"]

    async def test_count(self, client: AsyncClient, admin_token, db: AsyncSession):
        """로그 개수."""
        await _add_logs(db, ["a", "b"])
        res = await client.get("/api/logs/count", headers=auth_header(admin_token))
        assert res.json() == {"count": 2}

    async def test_non_positive_count(self, client: AsyncClient, admin_token):
        """count가 0 이하 — 400."""
        assert (await client.get("/api/logs/get/0", headers=auth_header(admin_token))).status_code == 400
        assert (await client.get("/api/logs/get/-5", headers=auth_header(admin_token))).status_code == 400

    async def test_user_forbidden(self, client: AsyncClient, user_token):
        """일반 사용자 — 403."""
        res = await client.get("/api/logs/count", headers=auth_header(user_token))
        assert res.status_code == 403

    async def test_state_change_writes_log(self, client: AsyncClient, admin_token):
        """생성 작업은 Information 로그를 남김."""
        await client.post(
            "/api/destinations/",
            json={"name": "Lisbon", "country": "Portugal", "city": "Lisbon"},
            headers=auth_header(admin_token),
        )
        res = await client.get("/api/logs/get/1", headers=auth_header(admin_token))
        entry = res.json()[0]
        assert entry["level"] == "Information"
        assert "Lisbon" in entry["message"]
