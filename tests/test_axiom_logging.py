"""Axiom 로깅 미들웨어 테스트 — 마스킹, 에러 사유, 로깅 대상 경로.

Axiom request logging middleware tests. A recording client stands in for
the Axiom HTTP client so events can be inspected.
"""

import pytest
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from httpx import ASGITransport, AsyncClient

from travel_org.config import settings
from travel_org.middleware import axiom_logging
from travel_org.middleware.axiom_logging import AxiomLoggingMiddleware, mask_sensitive
from travel_org.utils.exceptions import DuplicateError


class RecordingAxiomClient:
    """ingest_events 호출을 기록하는 클라이언트 (Keeps every ingested event)."""

    events: list[tuple[str, dict]] = []

    def __init__(self, token: str) -> None:
        self.token = token

    def ingest_events(self, dataset: str, events: list[dict]) -> None:
        for event in events:
            RecordingAxiomClient.events.append((dataset, event))


def _build_app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(AxiomLoggingMiddleware)

    @app.post("/api/things")
    async def create_thing() -> dict:
        raise DuplicateError("dup")

    @app.get("/api/things")
    async def list_things() -> list:
        return []

    @app.get("/page")
    async def page() -> PlainTextResponse:
        return PlainTextResponse("hello")

    return app


@pytest.fixture
def recorded(monkeypatch) -> list[tuple[str, dict]]:
    """Axiom 설정을 켜고 기록용 클라이언트로 교체합니다."""
    monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "test-token")
    monkeypatch.setattr(settings, "AXIOM_DATASET", "travel-org-test")
    monkeypatch.setattr(axiom_logging, "AxiomClient", RecordingAxiomClient)
    RecordingAxiomClient.events = []
    return RecordingAxiomClient.events


class TestMaskSensitive:
    """민감 필드 마스킹 테스트."""

    def test_nested_keys_masked(self):
        """중첩된 비밀번호/토큰 값 마스킹."""
        data = {"username": "u", "password": "p", "nested": {"token": "t", "city": "Paris"}}
        assert mask_sensitive(data) == {
            "username": "u",
            "password": "***",
            "nested": {"token": "***", "city": "Paris"},
        }

    def test_lists_are_truncated(self):
        """리스트는 20개까지만."""
        assert len(mask_sensitive(list(range(50)))) == 20


class TestAxiomLoggingMiddleware:
    """요청 로깅 미들웨어 테스트."""

    async def test_error_event_masks_body_and_keeps_detail(self, recorded):
        """에러 응답 — 본문 마스킹, detail을 error에 기록."""
        async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as ac:
            res = await ac.post(
                "/api/things",
                json={"username": "u", "password": "secret", "nested": {"token": "abc"}},
            )
        assert res.status_code == 409
        assert res.json() == {"detail": "dup"}

        assert len(recorded) == 1
        dataset, event = recorded[0]
        assert dataset == "travel-org-test"
        assert event["method"] == "POST"
        assert event["path"] == "/api/things"
        assert event["status_code"] == 409
        assert event["error"] == "dup"
        assert event["request_body"] == {"username": "u", "password": "***", "nested": {"token": "***"}}
        assert event["duration_ms"] >= 0

    async def test_success_event_has_no_error(self, recorded):
        """정상 응답 — error 필드 없음, 쿼리 파라미터 마스킹."""
        async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as ac:
            res = await ac.get("/api/things", params={"q": "x", "api_key": "k"})
        assert res.status_code == 200

        _, event = recorded[0]
        assert event["status_code"] == 200
        assert "error" not in event
        assert event["query_params"] == {"q": "x", "api_key": "***"}

    async def test_non_api_path_not_logged(self, recorded):
        """/api 이외 경로는 로깅하지 않음."""
        async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as ac:
            res = await ac.get("/page")
        assert res.text == "hello"
        assert recorded == []

    async def test_pass_through_without_configuration(self, monkeypatch):
        """Axiom 미설정 — 그대로 통과."""
        monkeypatch.setattr(settings, "AXIOM_API_TOKEN", "")
        monkeypatch.setattr(settings, "AXIOM_DATASET", "")
        monkeypatch.setattr(axiom_logging, "AxiomClient", RecordingAxiomClient)
        RecordingAxiomClient.events = []

        async with AsyncClient(transport=ASGITransport(app=_build_app()), base_url="http://test") as ac:
            res = await ac.post("/api/things", json={"password": "secret"})
        assert res.status_code == 409
        assert RecordingAxiomClient.events == []
