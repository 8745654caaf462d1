"""여행 페이지 — 목록, 상세, 예약, 내 예약, 관리자 CRUD.

Trip pages. Listing and details are public, booking needs a login, and
create, edit and delete are admin pages.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from travel_org.web.client import ApiClient, ApiError, get_api_client
from travel_org.web.forms import blank_to_none
from travel_org.web.session import api_error_redirect, flash, require_admin_page, require_login
from travel_org.web.templating import render

router: APIRouter = APIRouter(prefix="/trips")


class TripForm:
    """여행 생성/수정 폼 필드 (Trip create/edit form fields)."""

    def __init__(
        self,
        name: Annotated[str, Form()] = "",
        description: Annotated[str, Form()] = "",
        start_date: Annotated[str, Form()] = "",
        end_date: Annotated[str, Form()] = "",
        price: Annotated[str, Form()] = "",
        max_participants: Annotated[str, Form()] = "",
        image_url: Annotated[str, Form()] = "",
        destination_id: Annotated[str, Form()] = "",
    ) -> None:
        self.name = name
        self.description = description
        self.start_date = start_date
        self.end_date = end_date
        self.price = price
        self.max_participants = max_participants
        self.image_url = image_url
        self.destination_id = destination_id

    def to_payload(self) -> dict[str, Any]:
        """API 요청 본문 — 값 검증은 API가 담당 (The API validates the values)."""
        return {
            "name": self.name.strip(),
            "description": blank_to_none(self.description),
            "start_date": blank_to_none(self.start_date),
            "end_date": blank_to_none(self.end_date),
            "price": blank_to_none(self.price),
            "max_participants": blank_to_none(self.max_participants),
            "image_url": blank_to_none(self.image_url),
            "destination_id": blank_to_none(self.destination_id),
        }


async def _render_form(
    request: Request,
    api: ApiClient,
    trip: dict[str, Any],
    action: str,
) -> Response:
    try:
        destinations: list[dict[str, Any]] = await api.get("/api/destinations/")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    return render(request, "trips/form.html", {"trip": trip, "destinations": destinations, "action": action})


@router.get("")
async def list_trips(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    destination_id: UUID | None = None,
) -> Response:
    """여행 목록 — 여행지 필터 선택 가능 (Trips, optionally for one destination)."""
    try:
        if destination_id is not None:
            trips: list[dict[str, Any]] = await api.get(f"/api/trips/destination/{destination_id}")
        else:
            trips = await api.get("/api/trips/")
        destinations: list[dict[str, Any]] = await api.get("/api/destinations/")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(
        request,
        "trips/index.html",
        {
            "trips": trips,
            "destinations": destinations,
            "selected_destination": str(destination_id) if destination_id else "",
        },
    )


@router.get("/my-bookings", dependencies=[Depends(require_login)])
async def my_bookings(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """내 예약 목록 (The signed-in user's bookings)."""
    try:
        bookings: list[dict[str, Any]] = await api.get(f"/api/registrations/user/{request.session['user_id']}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    return render(request, "trips/my_bookings.html", {"bookings": bookings})


@router.post("/bookings/{registration_id}/cancel", dependencies=[Depends(require_login)])
async def cancel_booking(
    registration_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """예약 취소 (Cancel one of the user's bookings)."""
    try:
        await api.delete(f"/api/registrations/{registration_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips/my-bookings")
    flash(request, "Booking cancelled.", "success")
    return RedirectResponse("/trips/my-bookings", status_code=303)


@router.get("/create", dependencies=[Depends(require_admin_page)])
async def create_page(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    destination_id: str | None = None,
) -> Response:
    """여행 생성 폼 (Create form, optionally preselecting a destination)."""
    return await _render_form(request, api, {"destination_id": destination_id or ""}, "/trips/create")


@router.post("/create", dependencies=[Depends(require_admin_page)])
async def create_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    form: Annotated[TripForm, Depends()],
) -> Response:
    """여행 생성 처리 (Create through the API)."""
    try:
        created: dict[str, Any] = await api.post("/api/trips/", json=form.to_payload())
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips/create")
    flash(request, f"Trip '{created['name']}' created.", "success")
    return RedirectResponse(f"/trips/{created['id']}", status_code=303)


@router.get("/{trip_id}")
async def details(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행 상세 (Trip details with guides and remaining spots)."""
    try:
        trip: dict[str, Any] = await api.get(f"/api/trips/{trip_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    return render(request, "trips/details.html", {"trip": trip})


@router.get("/{trip_id}/edit", dependencies=[Depends(require_admin_page)])
async def edit_page(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행 수정 폼 (Edit form)."""
    try:
        trip: dict[str, Any] = await api.get(f"/api/trips/{trip_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    return await _render_form(request, api, trip, f"/trips/{trip_id}/edit")


@router.post("/{trip_id}/edit", dependencies=[Depends(require_admin_page)])
async def edit_submit(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    form: Annotated[TripForm, Depends()],
) -> Response:
    """여행 수정 처리 (Update through the API)."""
    try:
        await api.put(f"/api/trips/{trip_id}", json=form.to_payload())
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/trips/{trip_id}/edit")
    flash(request, "Trip updated.", "success")
    return RedirectResponse(f"/trips/{trip_id}", status_code=303)


@router.get("/{trip_id}/delete", dependencies=[Depends(require_admin_page)])
async def delete_page(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행 삭제 확인 (Delete confirmation)."""
    try:
        trip: dict[str, Any] = await api.get(f"/api/trips/{trip_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    return render(request, "trips/delete.html", {"trip": trip})


@router.post("/{trip_id}/delete", dependencies=[Depends(require_admin_page)])
async def delete_submit(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행 삭제 처리 — 예약이 있으면 오류 표시 (Refused while bookings exist)."""
    try:
        await api.delete(f"/api/trips/{trip_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/trips/{trip_id}")
    flash(request, "Trip deleted.", "success")
    return RedirectResponse("/trips", status_code=303)


@router.get("/{trip_id}/book", dependencies=[Depends(require_login)])
async def book_page(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """예약 폼 (Booking form)."""
    try:
        trip: dict[str, Any] = await api.get(f"/api/trips/{trip_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/trips")
    if trip["available_spots"] <= 0:
        flash(request, "Sorry, this trip is fully booked.", "warning")
        return RedirectResponse(f"/trips/{trip_id}", status_code=303)
    return render(request, "trips/book.html", {"trip": trip})


@router.post("/{trip_id}/book", dependencies=[Depends(require_login)])
async def book_submit(
    trip_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    number_of_participants: Annotated[str, Form()] = "1",
) -> Response:
    """예약 처리 — 정원 초과 시 오류 표시 (Book through the API)."""
    try:
        booking: dict[str, Any] = await api.post(
            "/api/registrations/",
            json={"trip_id": str(trip_id), "number_of_participants": blank_to_none(number_of_participants)},
        )
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/trips/{trip_id}/book")
    flash(
        request,
        f"Booked '{booking['trip_name']}' for {booking['number_of_participants']} participant(s). "
        f"Total: {booking['total_price']}",
        "success",
    )
    return RedirectResponse("/trips/my-bookings", status_code=303)
