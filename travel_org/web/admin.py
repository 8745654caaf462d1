"""관리자 페이지 — 가이드 관리, 가이드 배정, 감사 로그.

Admin pages — Guide management, guide assignments and the audit log.
Every page here requires an administrator session.
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

router: APIRouter = APIRouter(prefix="/admin", dependencies=[Depends(require_admin_page)])

# 로그 페이지 기본 표시 개수: Rows shown on the log page by default
DEFAULT_LOG_COUNT: int = 50


class GuideForm:
    """가이드 생성/수정 폼 필드 (Guide create/edit form fields)."""

    def __init__(
        self,
        name: Annotated[str, Form()] = "",
        bio: Annotated[str, Form()] = "",
        email: Annotated[str, Form()] = "",
        phone: Annotated[str, Form()] = "",
        image_url: Annotated[str, Form()] = "",
        years_of_experience: Annotated[str, Form()] = "",
    ) -> None:
        self.name = name
        self.bio = bio
        self.email = email
        self.phone = phone
        self.image_url = image_url
        self.years_of_experience = years_of_experience

    def to_payload(self) -> dict[str, Any]:
        return {
            "name": self.name.strip(),
            "bio": blank_to_none(self.bio),
            "email": self.email.strip(),
            "phone": blank_to_none(self.phone),
            "image_url": blank_to_none(self.image_url),
            "years_of_experience": blank_to_none(self.years_of_experience),
        }


# ---------------------------------------------------------------------------
# 가이드: Guides
# ---------------------------------------------------------------------------
@router.get("/guides")
async def list_guides(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """가이드 목록 (All guides)."""
    try:
        guides: list[dict[str, Any]] = await api.get("/api/guides/")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(request, "admin/guides.html", {"guides": guides})


@router.get("/guides/create")
async def create_guide_page(request: Request) -> Response:
    """가이드 생성 폼 (Create form)."""
    return render(request, "admin/guide_form.html", {"guide": {}, "action": "/admin/guides/create"})


@router.post("/guides/create")
async def create_guide_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    form: Annotated[GuideForm, Depends()],
) -> Response:
    """가이드 생성 처리 (Create through the API)."""
    try:
        created: dict[str, Any] = await api.post("/api/guides/", json=form.to_payload())
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guides/create")
    flash(request, f"Guide '{created['name']}' created.", "success")
    return RedirectResponse("/admin/guides", status_code=303)


@router.get("/guides/{guide_id}")
async def guide_details(
    guide_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """가이드 상세 (Guide details)."""
    try:
        guide: dict[str, Any] = await api.get(f"/api/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guides")
    return render(request, "admin/guide_details.html", {"guide": guide})


@router.get("/guides/{guide_id}/edit")
async def edit_guide_page(
    guide_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """가이드 수정 폼 (Edit form)."""
    try:
        guide: dict[str, Any] = await api.get(f"/api/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guides")
    return render(request, "admin/guide_form.html", {"guide": guide, "action": f"/admin/guides/{guide_id}/edit"})


@router.post("/guides/{guide_id}/edit")
async def edit_guide_submit(
    guide_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    form: Annotated[GuideForm, Depends()],
) -> Response:
    """가이드 수정 처리 (Update through the API)."""
    try:
        await api.put(f"/api/guides/{guide_id}", json=form.to_payload())
    except ApiError as exc:
        return api_error_redirect(request, exc, f"/admin/guides/{guide_id}/edit")
    flash(request, "Guide updated.", "success")
    return RedirectResponse(f"/admin/guides/{guide_id}", status_code=303)


@router.get("/guides/{guide_id}/delete")
async def delete_guide_page(
    guide_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """가이드 삭제 확인 (Delete confirmation)."""
    try:
        guide: dict[str, Any] = await api.get(f"/api/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guides")
    return render(request, "admin/guide_delete.html", {"guide": guide})


@router.post("/guides/{guide_id}/delete")
async def delete_guide_submit(
    guide_id: UUID,
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """가이드 삭제 처리 (Delete through the API; trip assignments go with it)."""
    try:
        await api.delete(f"/api/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guides")
    flash(request, "Guide deleted.", "success")
    return RedirectResponse("/admin/guides", status_code=303)


# ---------------------------------------------------------------------------
# 가이드 배정: Guide assignments
# ---------------------------------------------------------------------------
@router.get("/guide-assignments")
async def guide_assignments(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """여행별 가이드 배정 현황 (Trips with their guides, plus all guides)."""
    try:
        trips: list[dict[str, Any]] = await api.get("/api/trips/")
        guides: list[dict[str, Any]] = await api.get("/api/guides/")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(request, "admin/guide_assignments.html", {"trips": trips, "guides": guides})


@router.post("/guide-assignments/assign")
async def assign_guide(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    trip_id: Annotated[str, Form()] = "",
    guide_id: Annotated[str, Form()] = "",
) -> Response:
    """가이드 배정 (Assign a guide to a trip)."""
    try:
        await api.post(f"/api/trips/{trip_id}/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guide-assignments")
    flash(request, "Guide assigned.", "success")
    return RedirectResponse("/admin/guide-assignments", status_code=303)


@router.post("/guide-assignments/remove")
async def remove_guide(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    trip_id: Annotated[str, Form()] = "",
    guide_id: Annotated[str, Form()] = "",
) -> Response:
    """가이드 배정 해제 (Remove a guide from a trip)."""
    try:
        await api.delete(f"/api/trips/{trip_id}/guides/{guide_id}")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/admin/guide-assignments")
    flash(request, "Guide removed from trip.", "success")
    return RedirectResponse("/admin/guide-assignments", status_code=303)


# ---------------------------------------------------------------------------
# 감사 로그: Audit log
# ---------------------------------------------------------------------------
@router.get("/logs")
async def logs(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    count: int = DEFAULT_LOG_COUNT,
) -> Response:
    """감사 로그 (Newest audit rows and the total count)."""
    try:
        rows: list[dict[str, Any]] = await api.get(f"/api/logs/get/{count}")
        total: dict[str, Any] = await api.get("/api/logs/count")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(request, "admin/logs.html", {"logs": rows, "total": total["count"], "count": count})
