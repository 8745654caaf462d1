"""웹 세션 헬퍼 — 로그인 상태, 플래시 메시지, 페이지 접근 제어.

Web session helpers. The signed session cookie holds the API token,
username, user id and admin flag, plus pending flash messages.
"""

from typing import Any
from urllib.parse import quote, urlsplit

from fastapi import Request
from fastapi.responses import RedirectResponse

from travel_org.web.client import ApiError

LOGIN_URL: str = "/account/login"


class PageRedirect(Exception):
    """페이지 의존성에서 리다이렉트를 요청할 때 발생.

    Raised by page dependencies; the app turns it into a 303 redirect.
    """

    def __init__(self, url: str) -> None:
        super().__init__(url)
        self.url: str = url


def flash(request: Request, message: str, category: str = "info") -> None:
    """다음 페이지에 표시할 메시지를 저장합니다 (Queue a message for the next page)."""
    messages: list[dict[str, str]] = request.session.get("flashes", [])
    messages.append({"message": message, "category": category})
    request.session["flashes"] = messages


def pop_flashes(request: Request) -> list[dict[str, str]]:
    """저장된 플래시 메시지를 꺼냅니다 (Take and clear queued messages)."""
    return request.session.pop("flashes", [])


def sign_in(request: Request, login: dict[str, Any], user: dict[str, Any]) -> None:
    """로그인 응답을 세션에 저장합니다.

    Store the API login response and the current user's id in the session.
    """
    request.session["token"] = login["token"]
    request.session["username"] = login["username"]
    request.session["is_admin"] = bool(login["is_admin"])
    request.session["expires_at"] = str(login.get("expires_at", ""))
    request.session["user_id"] = user["id"]


def sign_out(request: Request) -> None:
    """세션의 인증 정보를 삭제합니다 (Drop authentication data, keep flashes)."""
    for key in ("token", "username", "is_admin", "expires_at", "user_id"):
        request.session.pop(key, None)


def is_authenticated(request: Request) -> bool:
    return bool(request.session.get("token"))


def is_admin(request: Request) -> bool:
    return is_authenticated(request) and bool(request.session.get("is_admin"))


def safe_return_url(url: str | None, default: str = "/") -> str:
    """로컬 경로만 허용합니다.

    Accept only local paths ("/..."), rejecting scheme-relative ("//host")
    and absolute URLs to avoid open redirects.
    """
    if not url:
        return default
    parts = urlsplit(url)
    if parts.scheme or parts.netloc or not url.startswith("/") or url.startswith("//") or "\\" in url:
        return default
    return url


def login_url(return_url: str | None = None) -> str:
    """return_url이 포함된 로그인 주소 (Login URL carrying a return_url)."""
    if not return_url:
        return LOGIN_URL
    return f"{LOGIN_URL}?return_url={quote(return_url, safe='/')}"


def _current_path(request: Request) -> str:
    path: str = request.url.path
    if request.url.query:
        path = f"{path}?{request.url.query}"
    return path


async def require_login(request: Request) -> None:
    """로그인 필요 페이지 의존성 (Redirect anonymous users to the login page)."""
    if not is_authenticated(request):
        flash(request, "Please log in to continue.", "warning")
        raise PageRedirect(login_url(_current_path(request)))


async def require_admin_page(request: Request) -> None:
    """관리자 페이지 의존성.

    Anonymous users go to the login page; signed-in non-admins go home.
    """
    await require_login(request)
    if not is_admin(request):
        flash(request, "You do not have permission to access that page.", "danger")
        raise PageRedirect("/")


def api_error_redirect(request: Request, exc: ApiError, fallback_url: str) -> RedirectResponse:
    """API 오류를 플래시 메시지와 리다이렉트로 변환합니다.

    Flash an API failure and redirect. An expired or rejected token (401)
    ends the session and sends the user back to the login page.
    """
    if exc.status_code == 401:
        sign_out(request)
        flash(request, "Your session has expired. Please log in again.", "warning")
        return RedirectResponse(login_url(fallback_url), status_code=303)
    flash(request, exc.message, "danger")
    return RedirectResponse(fallback_url, status_code=303)
