"""서버 렌더링 웹 프론트엔드 — REST API를 호출하는 Jinja2 페이지.

Server-rendered web front-end. Pages call the REST API over HTTP and
never touch the database.
"""

from fastapi import APIRouter

from travel_org.web.home import router as home_router
from travel_org.web.account import router as account_router
from travel_org.web.destinations import router as destinations_router
from travel_org.web.trips import router as trips_router
from travel_org.web.admin import router as admin_router

web_router: APIRouter = APIRouter(include_in_schema=False)

web_router.include_router(home_router)
web_router.include_router(account_router)
web_router.include_router(destinations_router)
web_router.include_router(trips_router)
web_router.include_router(admin_router)
