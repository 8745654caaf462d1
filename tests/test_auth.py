"""인증 API 테스트 — 회원가입, 로그인, 비밀번호 변경, 토큰 검증.

Auth API tests — Registration, login, password change and token checks.
"""

from httpx import AsyncClient
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tests.conftest import auth_header
from travel_org.models import Log, User
from travel_org.utils.jwt import decode_token

AUTH = "/api/auth"


def _register_body(**overrides) -> dict:
    body = {
        "username": "newbie",
        "email": "newbie@test.com",
        "password": "secret123",
        "confirm_password": "secret123",
    }
    body.update(overrides)
    return body


class TestRegister:
    """회원가입 테스트."""

    async def test_register_success(self, client: AsyncClient, db: AsyncSession):
        """회원가입 성공 — 일반 사용자로 생성."""
        res = await client.post(f"{AUTH}/register", json=_register_body(first_name="New"))
        assert res.status_code == 201
        assert "message" in res.json()

        user = (await db.execute(select(User).where(User.username == "newbie"))).scalar_one()
        assert user.is_admin is False
        assert user.password_hash != "secret123"

    async def test_register_duplicate_username(self, client: AsyncClient, regular_user):
        """중복 사용자명 — 409."""
        res = await client.post(f"{AUTH}/register", json=_register_body(username="traveler"))
        assert res.status_code == 409

    async def test_register_duplicate_email(self, client: AsyncClient, regular_user):
        """중복 이메일 — 409."""
        res = await client.post(f"{AUTH}/register", json=_register_body(email="traveler@test.com"))
        assert res.status_code == 409

    async def test_register_password_mismatch(self, client: AsyncClient):
        """비밀번호 확인 불일치 — 422."""
        res = await client.post(f"{AUTH}/register", json=_register_body(confirm_password="different"))
        assert res.status_code == 422

    async def test_register_short_username_and_password(self, client: AsyncClient):
        """짧은 사용자명/비밀번호 — 422."""
        res = await client.post(f"{AUTH}/register", json=_register_body(username="ab"))
        assert res.status_code == 422
        res = await client.post(f"{AUTH}/register", json=_register_body(password="123", confirm_password="123"))
        assert res.status_code == 422

    async def test_register_invalid_email(self, client: AsyncClient):
        """잘못된 이메일 형식 — 422."""
        res = await client.post(f"{AUTH}/register", json=_register_body(email="not-an-email"))
        assert res.status_code == 422


class TestLogin:
    """로그인 테스트."""

    async def test_login_success(self, client: AsyncClient, admin_user):
        """로그인 성공 — 토큰, 사용자명, 관리자 여부, 만료 시각 반환."""
        res = await client.post(f"{AUTH}/login", json={"username": "admin", "password": "admin123!"})
        assert res.status_code == 200
        data = res.json()
        assert data["username"] == "admin"
        assert data["is_admin"] is True
        assert data["expires_at"]

        payload = decode_token(data["token"])
        assert payload["sub"] == str(admin_user.id)
        assert payload["role"] == "Admin"

    async def test_login_regular_user_role(self, client: AsyncClient, regular_user):
        """일반 사용자 토큰의 역할은 User."""
        res = await client.post(f"{AUTH}/login", json={"username": "traveler", "password": "travel123!"})
        assert res.status_code == 200
        assert res.json()["is_admin"] is False
        assert decode_token(res.json()["token"])["role"] == "User"

    async def test_login_wrong_password(self, client: AsyncClient, regular_user, db: AsyncSession):
        """잘못된 비밀번호 — 401, 경고 로그 기록."""
        res = await client.post(f"{AUTH}/login", json={"username": "traveler", "password": "nope"})
        assert res.status_code == 401

        logs = (await db.execute(select(Log).where(Log.level == "Warning"))).scalars().all()
        assert any("traveler" in log.message for log in logs)

    async def test_login_unknown_user(self, client: AsyncClient):
        """존재하지 않는 사용자 — 401."""
        res = await client.post(f"{AUTH}/login", json={"username": "ghost", "password": "whatever"})
        assert res.status_code == 401


class TestChangePassword:
    """비밀번호 변경 테스트."""

    async def test_change_password_success(self, client: AsyncClient, regular_user, user_token):
        """비밀번호 변경 후 새 비밀번호로 로그인."""
        res = await client.post(
            f"{AUTH}/changepassword",
            json={
                "current_password": "travel123!",
                "new_password": "fresh456!",
                "confirm_new_password": "fresh456!",
            },
            headers=auth_header(user_token),
        )
        assert res.status_code == 200

        old = await client.post(f"{AUTH}/login", json={"username": "traveler", "password": "travel123!"})
        assert old.status_code == 401
        new = await client.post(f"{AUTH}/login", json={"username": "traveler", "password": "fresh456!"})
        assert new.status_code == 200

    async def test_change_password_wrong_current(self, client: AsyncClient, user_token):
        """현재 비밀번호 불일치 — 400."""
        res = await client.post(
            f"{AUTH}/changepassword",
            json={
                "current_password": "wrong",
                "new_password": "fresh456!",
                "confirm_new_password": "fresh456!",
            },
            headers=auth_header(user_token),
        )
        assert res.status_code == 400

    async def test_change_password_mismatch(self, client: AsyncClient, user_token):
        """새 비밀번호 확인 불일치 — 422."""
        res = await client.post(
            f"{AUTH}/changepassword",
            json={
                "current_password": "travel123!",
                "new_password": "fresh456!",
                "confirm_new_password": "other789!",
            },
            headers=auth_header(user_token),
        )
        assert res.status_code == 422

    async def test_change_password_requires_token(self, client: AsyncClient):
        """토큰 없음 — 401."""
        res = await client.post(
            f"{AUTH}/changepassword",
            json={"current_password": "a", "new_password": "bbbbbb", "confirm_new_password": "bbbbbb"},
        )
        assert res.status_code == 401


class TestTokenValidation:
    """토큰 검증 테스트."""

    async def test_invalid_token(self, client: AsyncClient):
        """위조된 토큰 — 401."""
        res = await client.get("/api/users/current", headers=auth_header("not.a.jwt"))
        assert res.status_code == 401

    async def test_missing_token(self, client: AsyncClient):
        """토큰 없음 — 401."""
        res = await client.get("/api/users/current")
        assert res.status_code == 401
