"""
Test suite for the Bible chat relay endpoint.

Tests POST /bible-chat with a real AIGatewayClient over httpx.MockTransport:
SSE pass-through, upstream request shape and error bodies. Ends with a full
round trip from StreamingChatSession through the relay.

System role: Verification of the streaming chat HTTP API
"""

import json

import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from bible_portal.api.deps import get_gateway_client
from bible_portal.api.routers.bible_chat import router
from bible_portal.application.services.bible_chat_service import (
    GENERIC_FAILURE_MESSAGE,
    QUOTA_MESSAGE,
    RATE_LIMIT_MESSAGE,
)
from bible_portal.boundary.ai_gateway import AIGatewayClient
from bible_portal.configs.ai_gateway import AIGatewaySettings
from bible_portal.core.chat_stream import ChatSessionState, StreamingChatSession
from bible_portal.core.exceptions import RateLimitedError

UPSTREAM_BODY = (
    'data: {"choices":[{"delta":{"content":"A graça "}}]}\n\n'
    'data: {"choices":[{"delta":{"content":"é favor imerecido."}}]}\n\n'
    "data: [DONE]\n\n"
).encode("utf-8")


class FakeGateway:
    """Upstream gateway double recording the forwarded requests."""

    def __init__(self, status_code: int = 200, body: bytes = UPSTREAM_BODY) -> None:
        self.status_code = status_code
        self.body = body
        self.requests: list[dict] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(json.loads(request.content))
        if self.status_code != 200:
            return httpx.Response(self.status_code, json={"error": "upstream"})
        return httpx.Response(200, content=self.body, headers={"content-type": "text/event-stream"})

    def client(self, api_key: str | None = "test-key") -> AIGatewayClient:
        return AIGatewayClient(
            AIGatewaySettings(api_key=api_key, base_url="https://gateway.test/v1"),
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self.handler)),
        )


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI test application with the chat relay router."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Provide TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def chat_request() -> dict:
    """Provide relay request body."""
    return {
        "messages": [{"role": "user", "content": "O que é graça?"}],
        "verseContext": "Efésios 2:8",
    }


class TestBibleChatEndpoint:
    """Test suite for POST /api/v1/bible-chat."""

    def test_should_pass_upstream_sse_through(self, app, client, chat_request) -> None:
        # Arrange
        gateway = FakeGateway()
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client()

        # Act
        response = client.post("/api/v1/bible-chat", json=chat_request)

        # Assert
        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/event-stream")
        assert response.content == UPSTREAM_BODY

    def test_should_forward_system_prompt_and_messages(self, app, client, chat_request) -> None:
        # Arrange
        gateway = FakeGateway()
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client()

        # Act
        client.post("/api/v1/bible-chat", json=chat_request)

        # Assert
        upstream = gateway.requests[0]
        assert upstream["stream"] is True
        assert upstream["model"] == "google/gemini-2.5-flash"
        assert upstream["messages"][0]["role"] == "system"
        assert "Efésios 2:8" in upstream["messages"][0]["content"]
        assert upstream["messages"][1:] == chat_request["messages"]

    @pytest.mark.parametrize(
        ("upstream_status", "status_code", "message"),
        [
            (429, 429, RATE_LIMIT_MESSAGE),
            (402, 402, QUOTA_MESSAGE),
            (500, 500, GENERIC_FAILURE_MESSAGE),
            (401, 500, GENERIC_FAILURE_MESSAGE),
        ],
    )
    def test_should_map_upstream_errors(
        self, app, client, chat_request, upstream_status, status_code, message
    ) -> None:
        gateway = FakeGateway(upstream_status)
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client()

        response = client.post("/api/v1/bible-chat", json=chat_request)

        assert response.status_code == status_code
        assert response.json() == {"error": message}

    def test_should_report_missing_configuration(self, app, client, chat_request) -> None:
        gateway = FakeGateway()
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client(api_key=None)

        response = client.post("/api/v1/bible-chat", json=chat_request)

        assert response.status_code == 500
        assert response.json() == {"error": "AI_GATEWAY_API_KEY is not configured"}
        assert gateway.requests == []

    def test_should_validate_request_body(self, client) -> None:
        response = client.post("/api/v1/bible-chat", json={"messages": []})

        assert response.status_code == 422


class TestBibleChatRoundTrip:
    """StreamingChatSession talking to the relay over ASGI."""

    @pytest.mark.asyncio
    async def test_session_should_stream_reply_through_relay(self, app) -> None:
        # Arrange
        gateway = FakeGateway()
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client()
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(transport=transport, base_url="http://portal.test") as client:
            session = StreamingChatSession(client, "http://portal.test/api/v1/bible-chat")

            # Act
            outcome = await session.start("O que é graça?", verse_context="Efésios 2:8")

        # Assert
        assert outcome is ChatSessionState.COMPLETED
        assert session.transcript.last.content == "A graça é favor imerecido."

    @pytest.mark.asyncio
    async def test_session_should_surface_relay_rate_limit(self, app) -> None:
        # Arrange
        gateway = FakeGateway(429)
        app.dependency_overrides[get_gateway_client] = lambda: gateway.client()
        transport = httpx.ASGITransport(app=app)

        async with httpx.AsyncClient(transport=transport, base_url="http://portal.test") as client:
            session = StreamingChatSession(client, "http://portal.test/api/v1/bible-chat")

            # Act / Assert
            with pytest.raises(RateLimitedError) as exc_info:
                await session.start("Pergunta")

        assert exc_info.value.user_message == RATE_LIMIT_MESSAGE
        assert len(session.transcript) == 1
