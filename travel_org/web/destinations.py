"""여행지 페이지 — 목록/상세는 공개, 생성/수정/삭제는 관리자.

Destination pages. Listing and details are public; create, edit and
delete are admin pages.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from travel_org.web.client import ApiClient, ApiError, get_api_client
from travel_org.web.forms import blank_to_none
from travel_org.web.session import api_error_redirect, flash, require_admin_page
from travel_org.web.templating import render

router: APIRouter = APIRouter(prefix="/destinations")


def _payload(name: str, description: str, country: str, city: str, image_url: str) -> dict[str, Any]:
    return {
        "name": name.strip(),
        "description": blank_to_none(description),
        "country": country.strip(),
        "city": city.strip(),
        "image_url": blank_to_none(image_url),
    }


@router.get("")
async def list_destinations(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행지 목록 (All destinations)."""
    try:
        destinations: list[dict[str, Any]] = await api.get("/api/destinations/")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(request, "destinations/index.html", {"destinations": destinations})


@router.get("/create", dependencies=[Depends(require_admin_page)])
async def create_page(request: Request) -> Response:
    """여행지 생성 폼 (Create form)."""
    return render(request, "destinations/form.html", {"destination": {}, "action": "/destinations/create"})


@router.post("/create", dependencies=[Depends(require_admin_page)])
async def create_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    name: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
    country: Annotated[str, Form()] = "",
    city: Annotated[str, Form()] = "",
    image_url: Annotated[str, Form()] = "",
) -> Response:
    """여행지 생성 처리 (Create through the API)."""
    try:
        created: dict[str, Any] = await api.post(
            "/api/destinations/", json=_payload(name, description, country, city, image_url)
        )
    except ApiError as exc:
        return api_error_redirect(request, exc, "/destinations/create")
    flash(request, f"Destination '{created['name']}' created.", "success")
    return RedirectResponse(f"/destinations/{created['id']}", status_code=303)


@router.get("/{destination_id}")
async def details(
    destination_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행지 상세 — 해당 여행지의 여행 포함 (Details with the destination's trips)."""
    try:
        destination: dict[str, Any] = await api.get(f"/api/destinations/{destination_id}")
        trips: list[dict[str, Any]] = await api.get(f"/api/trips/destination/{destination_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/destinations")
    return render(request, "destinations/details.html", {"destination": destination, "trips": trips})


@router.get("/{destination_id}/edit", dependencies=[Depends(require_admin_page)])
async def edit_page(
    destination_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행지 수정 폼 (Edit form)."""
    try:
        destination: dict[str, Any] = await api.get(f"/api/destinations/{destination_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/destinations")
    return render(
        request,
        "destinations/form.html",
        {"destination": destination, "action": f"/destinations/{destination_id}/edit"},
    )


@router.post("/{destination_id}/edit", dependencies=[Depends(require_admin_page)])
async def edit_submit(
    destination_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    name: Annotated[str, Form()] = "",
    description: Annotated[str, Form()] = "",
    country: Annotated[str, Form()] = "",
    city: Annotated[str, Form()] = "",
    image_url: Annotated[str, Form()] = "",
) -> Response:
    """여행지 수정 처리 (Update through the API)."""
    try:
        await api.put(
            f"/api/destinations/{destination_id}",
            json=_payload(name, description, country, city, image_url),
        )
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/destinations/{destination_id}/edit")
    flash(request, "Destination updated.", "success")
    return RedirectResponse(f"/destinations/{destination_id}", status_code=303)


@router.get("/{destination_id}/delete", dependencies=[Depends(require_admin_page)])
async def delete_page(
    destination_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행지 삭제 확인 (Delete confirmation)."""
    try:
        destination: dict[str, Any] = await api.get(f"/api/destinations/{destination_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/destinations")
    return render(request, "destinations/delete.html", {"destination": destination})


@router.post("/{destination_id}/delete", dependencies=[Depends(require_admin_page)])
async def delete_submit(
    destination_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행지 삭제 처리 — 여행이 남아 있으면 오류 표시.

    Delete through the API. A destination with trips is refused and the
    reason is flashed.
    """
    try:
        await api.delete(f"/api/destinations/{destination_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/destinations/{destination_id}")
    flash(request, "Destination deleted.", "success")
    return RedirectResponse("/destinations", status_code=303)
