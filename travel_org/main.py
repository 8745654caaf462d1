"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어 및 라우터 등록.

FastAPI application entry point — Middleware and router registration.
Serves the REST API under /api and the server-rendered pages under /.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from travel_org.config import settings
from travel_org.middleware.axiom_logging import AxiomLoggingMiddleware
from travel_org.web.session import PageRedirect
from travel_org.web.templating import STATIC_DIR

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Axiom API 로깅 미들웨어: Axiom API request/response logging
app.add_middleware(AxiomLoggingMiddleware)

# 웹 세션 쿠키: Signed cookie holding the API token for the web pages
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SESSION_SECRET_KEY,
    session_cookie="travel_org_session",
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
    https_only=settings.SESSION_HTTPS_ONLY,
)

# CORS 미들웨어: Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.exception_handler(PageRedirect)
async def page_redirect_handler(request: Request, exc: PageRedirect) -> RedirectResponse:
    """페이지 접근 제어 리다이렉트 (Turn page access checks into 303 redirects)."""
    return RedirectResponse(exc.url, status_code=303)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록: Router registration
# ---------------------------------------------------------------------------
# api_router: JSON REST 엔드포인트 (/api/...)
# web_router: 서버 렌더링 페이지 (/, /account, /destinations, /trips, /admin)
from travel_org.api import api_router  # noqa: E402
from travel_org.web import web_router  # noqa: E402

app.include_router(api_router, prefix="/api")
app.include_router(web_router)
