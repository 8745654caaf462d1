"""REST API 라우터 패키지 — 모든 /api 엔드포인트 통합.

REST API Router package — Aggregates every JSON endpoint into a single
router mounted under /api.

Included routers:
    - auth: 회원가입/로그인/비밀번호 변경 (Registration, login, password change)
    - users: 사용자 프로필 및 관리 (Profile and user listing)
    - destinations: 여행지 관리 (Destination management)
    - trips: 여행 관리 및 가이드 배정 (Trips and guide assignment)
    - guides: 가이드 관리 (Guide management)
    - registrations: 여행 예약 (Trip bookings)
    - logs: 감사 로그 (Audit log, admin only)
"""

from fastapi import APIRouter

from travel_org.api.auth import router as auth_router
from travel_org.api.users import router as users_router
from travel_org.api.destinations import router as destinations_router
from travel_org.api.trips import router as trips_router
from travel_org.api.guides import router as guides_router
from travel_org.api.registrations import router as registrations_router
from travel_org.api.logs import router as logs_router

api_router: APIRouter = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["Auth"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(destinations_router, prefix="/destinations", tags=["Destinations"])
api_router.include_router(trips_router, prefix="/trips", tags=["Trips"])
api_router.include_router(guides_router, prefix="/guides", tags=["Guides"])
api_router.include_router(registrations_router, prefix="/registrations", tags=["Registrations"])
api_router.include_router(logs_router, prefix="/logs", tags=["Logs"])
