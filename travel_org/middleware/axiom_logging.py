"""Axiom API 로깅 미들웨어.

Axiom API logging middleware.
Ships one structured event per REST call (/api/...) to Axiom: method, path,
params, masked JSON body, status code, duration and error detail.
Web pages and static files are not logged here.
"""

import json
import re
import time
from typing import Any

from axiom_py import Client as AxiomClient
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from travel_org.config import settings

# 마스킹 대상 필드 패턴: Keys whose values never leave the process
_SENSITIVE_KEYS = re.compile(
    r"(password|secret|token|authorization|api_key|apikey|credential)",
    re.IGNORECASE,
)

# 로깅 대상 경로 접두사: Only REST calls are logged
_API_PREFIX: str = "/api/"


def mask_sensitive(data: Any, depth: int = 0) -> Any:
    """민감 필드를 재귀적으로 마스킹합니다.

    Recursively replace values of sensitive keys with "***".
    Lists are cut to 20 items and nesting to 5 levels.
    """
    if depth > 5:
        return "..."
    if isinstance(data, dict):
        return {
            key: "***" if _SENSITIVE_KEYS.search(str(key)) else mask_sensitive(value, depth + 1)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive(item, depth + 1) for item in data[:20]]
    return data


def _error_detail(body: bytes) -> str:
    """에러 응답 본문에서 사유를 추출합니다 (Pull "detail" out of an error body)."""
    try:
        payload: Any = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return body.decode("utf-8", errors="replace")[:500]
    detail: Any = payload.get("detail", payload) if isinstance(payload, dict) else payload
    text: str = detail if isinstance(detail, str) else json.dumps(detail, default=str)
    return text[:500]


class AxiomLoggingMiddleware(BaseHTTPMiddleware):
    """REST 요청/응답을 Axiom에 로깅하는 미들웨어.

    Pass-through when AXIOM_API_TOKEN or AXIOM_DATASET is not configured.
    """

    def __init__(self, app: Any) -> None:
        super().__init__(app)
        self._client: AxiomClient | None = None
        self._dataset: str = settings.AXIOM_DATASET

        if settings.AXIOM_API_TOKEN and settings.AXIOM_DATASET:
            self._client = AxiomClient(token=settings.AXIOM_API_TOKEN)

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if not self._client or not request.url.path.startswith(_API_PREFIX):
            return await call_next(request)

        start_time: float = time.time()
        method: str = request.method
        event: dict[str, Any] = {"method": method, "path": request.url.path}
        if request.query_params:
            event["query_params"] = mask_sensitive(dict(request.query_params))

        if method in ("POST", "PUT", "PATCH"):
            body_bytes: bytes = await request.body()
            if body_bytes:
                try:
                    event["request_body"] = mask_sensitive(json.loads(body_bytes))
                except (json.JSONDecodeError, UnicodeDecodeError):
                    event["request_body"] = "(non-json body)"

        status_code: int = 500
        try:
            response: Response = await call_next(request)
            status_code = response.status_code

            if status_code >= 400:
                # 에러 응답 본문을 읽은 뒤 다시 감싸서 반환: Re-wrap the consumed body
                resp_body: bytes = b""
                async for chunk in response.body_iterator:
                    resp_body += chunk if isinstance(chunk, bytes) else chunk.encode("utf-8")
                event["error"] = _error_detail(resp_body)
                response = Response(
                    content=resp_body,
                    status_code=status_code,
                    headers=dict(response.headers),
                    media_type=response.media_type,
                )
        except Exception as exc:
            event["error"] = f"{type(exc).__name__}: {str(exc)[:300]}"
            raise
        finally:
            event["status_code"] = status_code
            event["duration_ms"] = round((time.time() - start_time) * 1000, 2)
            try:
                self._client.ingest_events(self._dataset, [event])
            except Exception:
                pass  # 로깅 실패가 요청 처리에 영향주지 않도록: Never break request on log failure

        return response
