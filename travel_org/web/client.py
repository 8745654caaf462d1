"""웹 프론트엔드용 REST API 클라이언트.

REST API client used by the web pages. Every page reads and writes data
through this client; the JWT from the session cookie is sent as a bearer token.
"""

from collections.abc import AsyncGenerator
from typing import Annotated, Any

import httpx
from fastapi import Depends, Request

from travel_org.config import settings


class ApiError(Exception):
    """API 호출 실패 — 상태 코드와 사용자에게 보여줄 메시지.

    Raised for any non-2xx API response or transport failure.

    Attributes:
        status_code: HTTP 상태 코드 (503 for transport failures)
        message: 표시용 메시지 (Human-readable message)
    """

    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code: int = status_code
        self.message: str = message


def _error_message(response: httpx.Response) -> str:
    """API 오류 응답에서 메시지를 추출합니다.

    Pull a readable message from an error response. Validation errors
    (422) are flattened to "field: message" pairs.
    """
    try:
        payload: Any = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    detail: Any = payload.get("detail") if isinstance(payload, dict) else payload
    if isinstance(detail, list):
        parts: list[str] = []
        for item in detail:
            if isinstance(item, dict):
                field: str = ".".join(str(p) for p in item.get("loc", [])[1:])
                parts.append(f"{field}: {item.get('msg', '')}" if field else str(item.get("msg", "")))
            else:
                parts.append(str(item))
        return "; ".join(parts)
    return str(detail) if detail else response.reason_phrase


class ApiClient:
    """Bearer 토큰을 붙여 REST API를 호출하는 얇은 래퍼.

    Thin wrapper over httpx.AsyncClient that attaches the session's token
    and turns error responses into ApiError.
    """

    def __init__(self, http: httpx.AsyncClient, token: str | None = None) -> None:
        self._http: httpx.AsyncClient = http
        self._token: str | None = token

    def with_token(self, token: str) -> "ApiClient":
        """같은 연결로 다른 토큰을 쓰는 클라이언트 (Same connection, different token)."""
        return ApiClient(self._http, token)

    async def request(self, method: str, path: str, **kwargs: Any) -> Any:
        """API를 호출하고 JSON 본문을 반환합니다 (204는 None).

        Call the API and return the decoded JSON body, or None for empty responses.

        Raises:
            ApiError: 비정상 응답 또는 연결 실패 (Error status or transport failure)
        """
        headers: dict[str, str] = {"Accept": "application/json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response: httpx.Response = await self._http.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            raise ApiError(503, f"The service is unavailable: {exc}") from exc

        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json: Any = None) -> Any:
        return await self.request("POST", path, json=json)

    async def put(self, path: str, json: Any = None) -> Any:
        return await self.request("PUT", path, json=json)

    async def patch(self, path: str, json: Any = None) -> Any:
        return await self.request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)


async def get_http_client() -> AsyncGenerator[httpx.AsyncClient, None]:
    """API_BASE_URL로 향하는 httpx 클라이언트 (테스트에서 오버라이드).

    Yield an httpx client pointed at API_BASE_URL. Tests override this
    dependency with an in-process ASGI transport.
    """
    async with httpx.AsyncClient(base_url=settings.API_BASE_URL, timeout=10.0) as client:
        yield client


async def get_api_client(
    request: Request,
    http: Annotated[httpx.AsyncClient, Depends(get_http_client)],
) -> ApiClient:
    """세션의 JWT를 사용하는 API 클라이언트 의존성 (API client bound to the session token)."""
    return ApiClient(http, request.session.get("token"))
