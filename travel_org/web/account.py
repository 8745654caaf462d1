"""계정 페이지 — 로그인, 회원가입, 로그아웃, 프로필, 비밀번호 변경.

Account pages — Login, registration, logout, profile and password change.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import RedirectResponse
from starlette.responses import Response

from travel_org.web.client import ApiClient, ApiError, get_api_client
from travel_org.web.forms import blank_to_none
from travel_org.web.session import (
    LOGIN_URL,
    api_error_redirect,
    flash,
    is_authenticated,
    require_login,
    safe_return_url,
    sign_in,
    sign_out,
)
from travel_org.web.templating import render

router: APIRouter = APIRouter(prefix="/account")


@router.get("/login")
async def login_page(request: Request, return_url: str | None = None) -> Response:
    """로그인 폼 (Login form). Signed-in users are sent on."""
    if is_authenticated(request):
        return RedirectResponse(safe_return_url(return_url), status_code=303)
    return render(request, "account/login.html", {"return_url": safe_return_url(return_url, "")})


@router.post("/login")
async def login_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    username: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    return_url: Annotated[str, Form()] = "",
) -> Response:
    """로그인 처리 — API 토큰을 세션에 저장.

    Log in through the API and keep the token in the session cookie.
    """
    try:
        login: dict[str, Any] = await api.post("/api/auth/login", json={"username": username, "password": password})
        user: dict[str, Any] = await api.with_token(login["token"]).get("/api/users/current")
    except ApiError as exc:
        message: str = "Invalid username or password." if exc.status_code in (401, 422) else exc.message
        return render(
            request,
            "account/login.html",
            {"error": message, "username": username, "return_url": safe_return_url(return_url, "")},
            status_code=400 if exc.status_code != 503 else 503,
        )

    sign_in(request, login, user)
    flash(request, f"Welcome back, {login['username']}!", "success")
    return RedirectResponse(safe_return_url(return_url), status_code=303)


@router.get("/register")
async def register_page(request: Request) -> Response:
    """회원가입 폼 (Registration form)."""
    if is_authenticated(request):
        return RedirectResponse("/", status_code=303)
    return render(request, "account/register.html", {"form": {}})


@router.post("/register")
async def register_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    username: Annotated[str, Form()] = "",
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
    confirm_password: Annotated[str, Form()] = "",
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    phone_number: Annotated[str, Form()] = "",
    address: Annotated[str, Form()] = "",
) -> Response:
    """회원가입 처리 — 성공 시 로그인 페이지로 이동.

    Register through the API, then send the user to the login page.
    """
    form: dict[str, Any] = {
        "username": username,
        "email": email,
        "first_name": blank_to_none(first_name),
        "last_name": blank_to_none(last_name),
        "phone_number": blank_to_none(phone_number),
        "address": blank_to_none(address),
    }
    try:
        await api.post(
            "/api/auth/register",
            json={**form, "password": password, "confirm_password": confirm_password},
        )
    except ApiError as exc:
        return render(request, "account/register.html", {"form": form, "error": exc.message}, status_code=400)

    flash(request, "Registration successful. Please log in.", "success")
    return RedirectResponse(LOGIN_URL, status_code=303)


@router.get("/logout")
@router.post("/logout")
async def logout(request: Request) -> Response:
    """로그아웃 (Clear the session and go home)."""
    sign_out(request)
    flash(request, "You have been logged out.", "info")
    return RedirectResponse("/", status_code=303)


@router.get("/profile", dependencies=[Depends(require_login)])
async def profile_page(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """프로필 조회/수정 폼 (Profile view and edit form)."""
    try:
        user: dict[str, Any] = await api.get("/api/users/current")
    except ApiError as exc:
        return api_error_redirect(request, exc, "/")
    return render(request, "account/profile.html", {"user": user})


@router.post("/profile", dependencies=[Depends(require_login)])
async def profile_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    email: Annotated[str, Form()] = "",
    first_name: Annotated[str, Form()] = "",
    last_name: Annotated[str, Form()] = "",
    phone_number: Annotated[str, Form()] = "",
    address: Annotated[str, Form()] = "",
) -> Response:
    """프로필 수정 처리 (Update the profile through the API)."""
    try:
        await api.put(
            "/api/users/profile",
            json={
                "email": email,
                "first_name": blank_to_none(first_name),
                "last_name": blank_to_none(last_name),
                "phone_number": blank_to_none(phone_number),
                "address": blank_to_none(address),
            },
        )
    except ApiError as exc:
        return api_error_redirect(request, exc, "/account/profile")
    flash(request, "Profile updated.", "success")
    return RedirectResponse("/account/profile", status_code=303)


@router.get("/change-password", dependencies=[Depends(require_login)])
async def change_password_page(request: Request) -> Response:
    """비밀번호 변경 폼 (Password change form)."""
    return render(request, "account/change_password.html")


@router.post("/change-password", dependencies=[Depends(require_login)])
async def change_password_submit(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
    current_password: Annotated[str, Form()] = "",
    new_password: Annotated[str, Form()] = "",
    confirm_new_password: Annotated[str, Form()] = "",
) -> Response:
    """비밀번호 변경 처리 (Change the password through the API)."""
    try:
        await api.post(
            "/api/auth/changepassword",
            json={
                "current_password": current_password,
                "new_password": new_password,
                "confirm_new_password": confirm_new_password,
            },
        )
    except ApiError as exc:
        return api_error_redirect(request, exc, "/account/change-password")
    flash(request, "Password changed.", "success")
    return RedirectResponse("/account/profile", status_code=303)
