"""Jinja2 템플릿 렌더링 (Jinja2 template rendering)."""

from pathlib import Path
from typing import Any

from fastapi import Request
from fastapi.templating import Jinja2Templates
from starlette.responses import Response

from travel_org.config import settings
from travel_org.web.session import is_admin, is_authenticated, pop_flashes

TEMPLATE_DIR: Path = Path(__file__).resolve().parent / "templates"
STATIC_DIR: Path = Path(__file__).resolve().parent / "static"

templates: Jinja2Templates = Jinja2Templates(directory=str(TEMPLATE_DIR))


def render(
    request: Request,
    name: str,
    context: dict[str, Any] | None = None,
    status_code: int = 200,
) -> Response:
    """공통 컨텍스트(로그인 상태, 플래시)와 함께 템플릿을 렌더링합니다.

    Render a template with the shared layout context: app name, login
    state and pending flash messages.
    """
    full_context: dict[str, Any] = {
        "app_name": settings.APP_NAME,
        "current_username": request.session.get("username"),
        "is_authenticated": is_authenticated(request),
        "is_admin": is_admin(request),
        "flashes": pop_flashes(request),
    }
    full_context.update(context or {})
    return templates.TemplateResponse(request, name, full_context, status_code=status_code)
