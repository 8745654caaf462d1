"""홈 페이지 (Home page with featured destinations and upcoming trips)."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from starlette.responses import Response

from travel_org.web.client import ApiClient, ApiError, get_api_client
from travel_org.web.templating import render

router: APIRouter = APIRouter()

# 홈에 노출할 여행지/여행 수: Cards shown on the home page
FEATURED_COUNT: int = 6


@router.get("/")
async def home(
    request: Request,
    api: Annotated[ApiClient, Depends(get_api_client)],
) -> Response:
    """홈 — 추천 여행지와 다가오는 여행 (Featured destinations and trips)."""
    destinations: list[dict[str, Any]] = []
    trips: list[dict[str, Any]] = []
    error: str | None = None
    try:
        destinations = (await api.get("/api/destinations/"))[:FEATURED_COUNT]
        trips = (await api.get("/api/trips/"))[:FEATURED_COUNT]
    except ApiError as exc:
        error = exc.message
    return render(request, "home.html", {"destinations": destinations, "trips": trips, "error": error})
