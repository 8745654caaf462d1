"""여행 예약 API 테스트 — 가격 계산, 정원, 소유권, 상태 변경.

Trip registration API tests.
"""

from decimal import Decimal

from httpx import AsyncClient

from tests.conftest import auth_header

REGISTRATIONS = "/api/registrations"


class TestCreateRegistration:
    """예약 생성 테스트."""

    async def test_book_trip(self, client: AsyncClient, user_token, trip, regular_user):
        """예약 — 가격 = 1인 가격 × 인원, 상태 Pending."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 3},
            headers=auth_header(user_token),
        )
        assert res.status_code == 201
        data = res.json()
        assert Decimal(data["total_price"]) == Decimal("300.00")
        assert data["status"] == "Pending"
        assert data["user_id"] == str(regular_user.id)
        assert data["trip_name"] == "Paris Discovery"
        assert data["destination_name"] == "Paris"

    async def test_client_price_ignored(self, client: AsyncClient, user_token, trip):
        """클라이언트가 보낸 가격은 무시."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 1, "total_price": "1.00"},
            headers=auth_header(user_token),
        )
        assert res.status_code == 201
        assert Decimal(res.json()["total_price"]) == Decimal("100.00")

    async def test_book_reduces_available_spots(self, client: AsyncClient, user_token, trip):
        """예약 후 남은 자리 감소."""
        await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 4},
            headers=auth_header(user_token),
        )
        res = await client.get(f"/api/trips/{trip.id}")
        assert res.json()["available_spots"] == 6

    async def test_over_capacity(self, client: AsyncClient, user_token, trip, registration):
        """정원 초과 — 400 (2명 예약됨, 9명 요청)."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 9},
            headers=auth_header(user_token),
        )
        assert res.status_code == 400

    async def test_fill_to_capacity(self, client: AsyncClient, user_token, trip, registration):
        """남은 자리를 정확히 채우는 예약은 허용."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 8},
            headers=auth_header(user_token),
        )
        assert res.status_code == 201

    async def test_unknown_trip(self, client: AsyncClient, user_token):
        """존재하지 않는 여행 — 404."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": "00000000-0000-0000-0000-000000000000", "number_of_participants": 1},
            headers=auth_header(user_token),
        )
        assert res.status_code == 404

    async def test_zero_participants(self, client: AsyncClient, user_token, trip):
        """인원 0 — 422."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 0},
            headers=auth_header(user_token),
        )
        assert res.status_code == 422

    async def test_requires_token(self, client: AsyncClient, trip):
        """토큰 없음 — 401."""
        res = await client.post(f"{REGISTRATIONS}/", json={"trip_id": str(trip.id), "number_of_participants": 1})
        assert res.status_code == 401

    async def test_user_id_ignored_for_regular_user(self, client: AsyncClient, user_token, trip, regular_user, other_user):
        """일반 사용자가 지정한 user_id는 무시."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 1, "user_id": str(other_user.id)},
            headers=auth_header(user_token),
        )
        assert res.json()["user_id"] == str(regular_user.id)

    async def test_admin_books_for_user(self, client: AsyncClient, admin_token, trip, other_user):
        """관리자는 다른 사용자 대신 예약 가능."""
        res = await client.post(
            f"{REGISTRATIONS}/",
            json={"trip_id": str(trip.id), "number_of_participants": 1, "user_id": str(other_user.id)},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 201
        assert res.json()["username"] == "wanderer"


class TestReadRegistration:
    """예약 조회 테스트 — 소유자 또는 관리자."""

    async def test_owner_reads(self, client: AsyncClient, user_token, registration):
        """소유자 조회."""
        res = await client.get(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(user_token))
        assert res.status_code == 200
        assert res.json()["number_of_participants"] == 2

    async def test_other_user_forbidden(self, client: AsyncClient, other_token, registration):
        """다른 사용자 — 403."""
        res = await client.get(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(other_token))
        assert res.status_code == 403

    async def test_admin_reads_any(self, client: AsyncClient, admin_token, registration):
        """관리자는 모두 조회."""
        res = await client.get(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(admin_token))
        assert res.status_code == 200

    async def test_list_all_admin_only(self, client: AsyncClient, admin_token, user_token, registration):
        """전체 목록 — 관리자만."""
        assert (await client.get(f"{REGISTRATIONS}/", headers=auth_header(user_token))).status_code == 403
        res = await client.get(f"{REGISTRATIONS}/", headers=auth_header(admin_token))
        assert len(res.json()) == 1

    async def test_user_lists_own(self, client: AsyncClient, user_token, regular_user, registration):
        """본인 예약 목록."""
        res = await client.get(f"{REGISTRATIONS}/user/{regular_user.id}", headers=auth_header(user_token))
        assert res.status_code == 200
        assert [r["id"] for r in res.json()] == [str(registration.id)]

    async def test_user_lists_other_forbidden(self, client: AsyncClient, other_token, regular_user, registration):
        """다른 사용자의 예약 목록 — 403."""
        res = await client.get(f"{REGISTRATIONS}/user/{regular_user.id}", headers=auth_header(other_token))
        assert res.status_code == 403

    async def test_trip_registrations(self, client: AsyncClient, admin_token, trip, registration):
        """여행별 예약 목록 — 관리자."""
        res = await client.get(f"{REGISTRATIONS}/trip/{trip.id}", headers=auth_header(admin_token))
        assert res.status_code == 200
        assert len(res.json()) == 1


class TestUpdateRegistration:
    """예약 수정 테스트."""

    async def test_update_recomputes_price(self, client: AsyncClient, user_token, registration):
        """인원 변경 — 가격 재계산."""
        res = await client.put(
            f"{REGISTRATIONS}/{registration.id}",
            json={"number_of_participants": 5, "status": "Pending"},
            headers=auth_header(user_token),
        )
        assert res.status_code == 200
        assert Decimal(res.json()["total_price"]) == Decimal("500.00")

    async def test_update_capacity_excludes_self(self, client: AsyncClient, user_token, registration):
        """정원 확인 시 자기 인원 제외 — 10명까지 허용, 11명은 400."""
        ok = await client.put(
            f"{REGISTRATIONS}/{registration.id}",
            json={"number_of_participants": 10, "status": "Pending"},
            headers=auth_header(user_token),
        )
        assert ok.status_code == 200

        too_many = await client.put(
            f"{REGISTRATIONS}/{registration.id}",
            json={"number_of_participants": 11, "status": "Pending"},
            headers=auth_header(user_token),
        )
        assert too_many.status_code == 400

    async def test_update_other_user_forbidden(self, client: AsyncClient, other_token, registration):
        """다른 사용자 수정 — 403."""
        res = await client.put(
            f"{REGISTRATIONS}/{registration.id}",
            json={"number_of_participants": 1, "status": "Pending"},
            headers=auth_header(other_token),
        )
        assert res.status_code == 403

    async def test_status_patch_admin(self, client: AsyncClient, admin_token, registration):
        """관리자 상태 변경."""
        res = await client.patch(
            f"{REGISTRATIONS}/{registration.id}/status",
            json={"status": "Confirmed"},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "Confirmed"
        assert Decimal(res.json()["total_price"]) == Decimal("200.00")

    async def test_status_patch_user_forbidden(self, client: AsyncClient, user_token, registration):
        """일반 사용자 상태 변경 — 403."""
        res = await client.patch(
            f"{REGISTRATIONS}/{registration.id}/status",
            json={"status": "Confirmed"},
            headers=auth_header(user_token),
        )
        assert res.status_code == 403

    async def test_status_patch_empty(self, client: AsyncClient, admin_token, registration):
        """빈 상태 — 422."""
        res = await client.patch(
            f"{REGISTRATIONS}/{registration.id}/status",
            json={"status": ""},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 422


    async def test_status_patch_whitespace_only(self, client: AsyncClient, admin_token, registration):
        """공백만 있는 상태 — 422."""
        res = await client.patch(
            f"{REGISTRATIONS}/{registration.id}/status",
            json={"status": "   "},
            headers=auth_header(admin_token),
        )
        assert res.status_code == 422

    async def test_status_is_trimmed(self, client: AsyncClient, user_token, registration):
        """상태 앞뒤 공백 제거."""
        res = await client.put(
            f"{REGISTRATIONS}/{registration.id}",
            json={"number_of_participants": 2, "status": "  Pending  "},
            headers=auth_header(user_token),
        )
        assert res.status_code == 200
        assert res.json()["status"] == "Pending"


class TestDeleteRegistration:
    """예약 취소 테스트."""

    async def test_owner_cancels(self, client: AsyncClient, user_token, admin_token, trip, registration):
        """소유자 취소 — 204, 이후 여행 삭제 가능."""
        res = await client.delete(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(user_token))
        assert res.status_code == 204

        gone = await client.get(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(user_token))
        assert gone.status_code == 404

        trip_delete = await client.delete(f"/api/trips/{trip.id}", headers=auth_header(admin_token))
        assert trip_delete.status_code == 204

    async def test_other_user_cannot_cancel(self, client: AsyncClient, other_token, registration):
        """다른 사용자 취소 — 403."""
        res = await client.delete(f"{REGISTRATIONS}/{registration.id}", headers=auth_header(other_token))
        assert res.status_code == 403
