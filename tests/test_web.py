"""웹 페이지 테스트 — 로그인 흐름, 페이지 접근 제어, API 경유 예약.

Server-rendered page tests. The pages call the REST API through the
in-process transport set up in conftest.
"""

from httpx import AsyncClient

from travel_org.web.session import safe_return_url


async def _login(client: AsyncClient, username: str, password: str, return_url: str = "") -> None:
    res = await client.post(
        "/account/login",
        data={"username": username, "password": password, "return_url": return_url},
    )
    assert res.status_code == 303


class TestSafeReturnUrl:
    """return_url 검증 테스트."""

    def test_local_path_allowed(self):
        """로컬 경로 허용."""
        assert safe_return_url("/trips/my-bookings") == "/trips/my-bookings"

    def test_external_rejected(self):
        """외부 주소 거부."""
        assert safe_return_url("https://evil.test/") == "/"
        assert safe_return_url("//evil.test/path") == "/"
        assert safe_return_url("trips") == "/"

    def test_empty_uses_default(self):
        """빈 값은 기본값."""
        assert safe_return_url(None) == "/"
        assert safe_return_url("", "/home") == "/home"


class TestPublicPages:
    """공개 페이지 테스트."""

    async def test_home(self, client: AsyncClient, destination):
        """홈 — 추천 여행지 표시."""
        res = await client.get("/")
        assert res.status_code == 200
        assert "Paris" in res.text

    async def test_trip_list_and_details(self, client: AsyncClient, trip):
        """여행 목록/상세."""
        listing = await client.get("/trips")
        assert listing.status_code == 200
        assert "Paris Discovery" in listing.text

        details = await client.get(f"/trips/{trip.id}")
        assert details.status_code == 200
        assert "A week in Paris" in details.text

    async def test_unknown_trip_redirects_with_flash(self, client: AsyncClient):
        """존재하지 않는 여행 — 목록으로 리다이렉트 후 메시지 표시."""
        res = await client.get("/trips/00000000-0000-0000-0000-000000000000")
        assert res.status_code == 303
        assert res.headers["location"] == "/trips"

        followed = await client.get("/trips")
        assert "Trip not found" in followed.text

    async def test_health(self, client: AsyncClient):
        """헬스 체크."""
        res = await client.get("/health")
        assert res.json() == {"status": "ok"}


class TestLoginFlow:
    """로그인/로그아웃 흐름 테스트."""

    async def test_login_redirects_to_return_url(self, client: AsyncClient, regular_user):
        """로그인 성공 — return_url로 이동하고 세션 유지."""
        res = await client.post(
            "/account/login",
            data={"username": "traveler", "password": "travel123!", "return_url": "/account/profile"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/account/profile"

        profile = await client.get("/account/profile")
        assert profile.status_code == 200
        assert "traveler@test.com" in profile.text

    async def test_login_ignores_external_return_url(self, client: AsyncClient, regular_user):
        """외부 return_url은 무시하고 홈으로."""
        res = await client.post(
            "/account/login",
            data={"username": "traveler", "password": "travel123!", "return_url": "https://evil.test/"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/"

    async def test_login_wrong_password(self, client: AsyncClient, regular_user):
        """잘못된 비밀번호 — 폼 재표시."""
        res = await client.post("/account/login", data={"username": "traveler", "password": "nope123"})
        assert res.status_code == 400
        assert "Invalid username or password." in res.text

    async def test_logout(self, client: AsyncClient, regular_user):
        """로그아웃 후 보호 페이지 접근 불가."""
        await _login(client, "traveler", "travel123!")
        res = await client.post("/account/logout")
        assert res.status_code == 303

        profile = await client.get("/account/profile")
        assert profile.status_code == 303

    async def test_register_then_login(self, client: AsyncClient):
        """회원가입 후 로그인 페이지로 이동."""
        res = await client.post(
            "/account/register",
            data={
                "username": "newbie",
                "email": "newbie@test.com",
                "password": "secret123",
                "confirm_password": "secret123",
            },
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/account/login"
        await _login(client, "newbie", "secret123")


class TestAccessControl:
    """페이지 접근 제어 테스트."""

    async def test_anonymous_redirected_to_login(self, client: AsyncClient):
        """비로그인 — return_url과 함께 로그인 페이지로."""
        res = await client.get("/trips/my-bookings")
        assert res.status_code == 303
        assert res.headers["location"] == "/account/login?return_url=/trips/my-bookings"

    async def test_non_admin_redirected_home(self, client: AsyncClient, regular_user):
        """일반 사용자의 관리자 페이지 접근 — 홈으로."""
        await _login(client, "traveler", "travel123!")
        for path in ("/admin/guides", "/admin/logs", "/destinations/create"):
            res = await client.get(path)
            assert res.status_code == 303
            assert res.headers["location"] == "/"

    async def test_admin_pages(self, client: AsyncClient, admin_user, guide, trip):
        """관리자 페이지 접근."""
        await _login(client, "admin", "admin123!")
        guides = await client.get("/admin/guides")
        assert guides.status_code == 200
        assert "Marie Laurent" in guides.text

        assignments = await client.get("/admin/guide-assignments")
        assert assignments.status_code == 200

        logs = await client.get("/admin/logs")
        assert logs.status_code == 200


class TestBookingPages:
    """웹 예약 흐름 테스트."""

    async def test_book_trip(self, client: AsyncClient, regular_user, trip):
        """예약 후 내 예약 목록에 표시."""
        await _login(client, "traveler", "travel123!")

        res = await client.post(f"/trips/{trip.id}/book", data={"number_of_participants": "2"})
        assert res.status_code == 303
        assert res.headers["location"] == "/trips/my-bookings"

        bookings = await client.get("/trips/my-bookings")
        assert bookings.status_code == 200
        assert "Paris Discovery" in bookings.text
        assert "for 2 participant(s)" in bookings.text

    async def test_cancel_booking(self, client: AsyncClient, regular_user, registration):
        """예약 취소 — 내 예약 목록에서 사라짐."""
        await _login(client, "traveler", "travel123!")

        res = await client.post(f"/trips/bookings/{registration.id}/cancel")
        assert res.status_code == 303
        assert res.headers["location"] == "/trips/my-bookings"

        bookings = await client.get("/trips/my-bookings")
        assert "Booking cancelled." in bookings.text
        assert "You have no bookings yet." in bookings.text

    async def test_over_capacity_flashes_error(self, client: AsyncClient, regular_user, trip):
        """정원 초과 — 예약 폼으로 돌아가 오류 표시."""
        await _login(client, "traveler", "travel123!")

        res = await client.post(f"/trips/{trip.id}/book", data={"number_of_participants": "11"})
        assert res.status_code == 303
        assert res.headers["location"] == f"/trips/{trip.id}/book"

        form = await client.get(f"/trips/{trip.id}/book")
        assert "Not enough spots available" in form.text

    async def test_admin_creates_destination(self, client: AsyncClient, admin_user):
        """관리자 여행지 생성 페이지."""
        await _login(client, "admin", "admin123!")
        res = await client.post(
            "/destinations/create",
            data={"name": "Lisbon", "country": "Portugal", "city": "Lisbon", "description": "", "image_url": ""},
        )
        assert res.status_code == 303

        listing = await client.get("/destinations")
        assert "Lisbon" in listing.text


class TestAccountForms:
    """프로필/비밀번호 폼 제출 테스트."""

    async def test_profile_update(self, client: AsyncClient, regular_user):
        """프로필 수정 — 새 이메일 표시."""
        await _login(client, "traveler", "travel123!")
        res = await client.post(
            "/account/profile",
            data={"email": "tina@travel.test", "first_name": "Tina", "last_name": "T.", "phone_number": "", "address": ""},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/account/profile"

        profile = await client.get("/account/profile")
        assert "Profile updated." in profile.text
        assert "tina@travel.test" in profile.text

    async def test_change_password(self, client: AsyncClient, regular_user):
        """비밀번호 변경 후 새 비밀번호로 로그인."""
        await _login(client, "traveler", "travel123!")
        res = await client.post(
            "/account/change-password",
            data={"current_password": "travel123!", "new_password": "fresh456!", "confirm_new_password": "fresh456!"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/account/profile"

        await client.post("/account/logout")
        old = await client.post("/account/login", data={"username": "traveler", "password": "travel123!"})
        assert old.status_code == 400
        await _login(client, "traveler", "fresh456!")

    async def test_change_password_wrong_current(self, client: AsyncClient, regular_user):
        """현재 비밀번호 불일치 — 폼으로 돌아가 오류 표시."""
        await _login(client, "traveler", "travel123!")
        res = await client.post(
            "/account/change-password",
            data={"current_password": "wrong-one", "new_password": "fresh456!", "confirm_new_password": "fresh456!"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/account/change-password"

        form = await client.get("/account/change-password")
        assert "Current password is incorrect" in form.text


class TestAdminGuidePages:
    """관리자 가이드 페이지 제출 테스트."""

    async def test_create_guide(self, client: AsyncClient, admin_user):
        """가이드 생성 폼 제출."""
        await _login(client, "admin", "admin123!")
        res = await client.post(
            "/admin/guides/create",
            data={"name": "Kenji Sato", "email": "kenji@test.com", "bio": "", "phone": "", "image_url": "", "years_of_experience": "5"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == "/admin/guides"

        listing = await client.get("/admin/guides")
        assert "Kenji Sato" in listing.text
        guides = (await client.get("/api/guides/")).json()
        assert [g["name"] for g in guides] == ["Kenji Sato"]
        assert guides[0]["years_of_experience"] == 5

    async def test_edit_guide(self, client: AsyncClient, admin_user, guide):
        """가이드 수정 폼 제출 — 상세 페이지로 이동."""
        await _login(client, "admin", "admin123!")
        res = await client.post(
            f"/admin/guides/{guide.id}/edit",
            data={"name": "Marie L.", "email": "marie@test.com", "bio": "Art historian", "phone": "", "image_url": "", "years_of_experience": "9"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == f"/admin/guides/{guide.id}"

        details = await client.get(f"/admin/guides/{guide.id}")
        assert details.status_code == 200
        assert "Marie L." in details.text

    async def test_edit_guide_invalid_email(self, client: AsyncClient, admin_user, guide):
        """잘못된 이메일 — 수정 폼으로 돌아감."""
        await _login(client, "admin", "admin123!")
        res = await client.post(
            f"/admin/guides/{guide.id}/edit",
            data={"name": "Marie", "email": "not-an-email"},
        )
        assert res.status_code == 303
        assert res.headers["location"] == f"/admin/guides/{guide.id}/edit"

    async def test_delete_guide(self, client: AsyncClient, admin_user, guide):
        """가이드 삭제 폼 제출."""
        await _login(client, "admin", "admin123!")
        res = await client.post(f"/admin/guides/{guide.id}/delete")
        assert res.status_code == 303
        assert res.headers["location"] == "/admin/guides"

        assert (await client.get(f"/api/guides/{guide.id}")).status_code == 404


class TestAdminGuideAssignmentPages:
    """관리자 가이드 배정 폼 제출 테스트."""

    async def test_assign_and_remove(self, client: AsyncClient, admin_user, trip, guide):
        """배정 후 해제."""
        await _login(client, "admin", "admin123!")
        form = {"trip_id": str(trip.id), "guide_id": str(guide.id)}

        assigned = await client.post("/admin/guide-assignments/assign", data=form)
        assert assigned.status_code == 303
        assert assigned.headers["location"] == "/admin/guide-assignments"
        by_trip = await client.get(f"/api/guides/trip/{trip.id}")
        assert [g["id"] for g in by_trip.json()] == [str(guide.id)]

        removed = await client.post("/admin/guide-assignments/remove", data=form)
        assert removed.status_code == 303
        by_trip = await client.get(f"/api/guides/trip/{trip.id}")
        assert by_trip.json() == []

    async def test_remove_missing_assignment_flashes(self, client: AsyncClient, admin_user, trip, guide):
        """배정되지 않은 가이드 해제 — 오류 메시지."""
        await _login(client, "admin", "admin123!")
        res = await client.post(
            "/admin/guide-assignments/remove",
            data={"trip_id": str(trip.id), "guide_id": str(guide.id)},
        )
        assert res.status_code == 303

        page = await client.get("/admin/guide-assignments")
        assert "Guide is not assigned to this trip" in page.text
