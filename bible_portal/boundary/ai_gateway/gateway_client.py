"""
Chat-completion gateway client.

Thin async wrapper over an OpenAI-compatible `/chat/completions` endpoint.
Streaming calls hand back the open httpx response so the relay can pass the
SSE body through untouched; non-streaming calls return the decoded JSON.

Dependencies: httpx, bible_portal.configs
System role: Outbound adapter to the LLM gateway
"""

import logging
from typing import Any

import httpx

from bible_portal.configs.ai_gateway import AIGatewaySettings
from bible_portal.core.exceptions import (
    GatewayConfigurationError,
    GatewayError,
    GatewayQuotaError,
    GatewayRateLimitError,
)

logger = logging.getLogger(__name__)

CHAT_COMPLETIONS_PATH = "/chat/completions"


def _raise_for_gateway_status(response: httpx.Response, body_preview: str) -> None:
    if response.is_success:
        return
    details = {"body_preview": body_preview[:200]}
    logger.error(
        "AI gateway error",
        extra={"status_code": response.status_code, **details},
    )
    if response.status_code == 429:
        raise GatewayRateLimitError(details)
    if response.status_code == 402:
        raise GatewayQuotaError(details)
    raise GatewayError(
        f"AI gateway error: {response.status_code}",
        status_code=response.status_code,
        details=details,
    )


class AIGatewayClient:
    """
    Async client for the chat-completion gateway.

    Attributes:
        settings: Gateway configuration
    """

    def __init__(
        self,
        settings: AIGatewaySettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize gateway client.

        Args:
            settings: Gateway settings (key, base URL, model, timeout)
            http_client: Optional pre-built client (tests inject a MockTransport)
        """
        self.settings = settings
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=settings.timeout_seconds)

    @property
    def url(self) -> str:
        return self.settings.base_url.rstrip("/") + CHAT_COMPLETIONS_PATH

    def _headers(self) -> dict[str, str]:
        if not self.settings.is_configured:
            raise GatewayConfigurationError()
        return {
            "Authorization": f"Bearer {self.settings.api_key}",
            "Content-Type": "application/json",
        }

    def _body(
        self,
        messages: list[dict[str, str]],
        stream: bool,
        temperature: float | None,
    ) -> dict[str, Any]:
        body: dict[str, Any] = {"model": self.settings.model, "messages": messages}
        if stream:
            body["stream"] = True
        if temperature is not None:
            body["temperature"] = temperature
        return body

    async def open_chat_stream(self, messages: list[dict[str, str]]) -> httpx.Response:
        """
        Start a streaming completion.

        The caller owns the returned response and must `aclose()` it.

        Args:
            messages: Chat messages including the system prompt

        Returns:
            httpx.Response: Open response whose body is the SSE stream

        Raises:
            GatewayConfigurationError: If no API key is configured
            GatewayRateLimitError: Upstream 429
            GatewayQuotaError: Upstream 402
            GatewayError: Any other upstream failure
        """
        request = self._client.build_request(
            "POST",
            self.url,
            headers=self._headers(),
            json=self._body(messages, stream=True, temperature=None),
        )
        try:
            response = await self._client.send(request, stream=True)
        except httpx.HTTPError as e:
            raise GatewayError(
                "AI gateway unreachable",
                details={"error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            try:
                await response.aread()
                _raise_for_gateway_status(response, response.text)
            finally:
                await response.aclose()

        logger.info("Streaming response started", extra={"message_count": len(messages)})
        return response

    async def complete(
        self,
        messages: list[dict[str, str]],
        temperature: float | None = None,
    ) -> str:
        """
        Run a non-streaming completion.

        Args:
            messages: Chat messages including the system prompt
            temperature: Optional sampling temperature

        Returns:
            str: `choices[0].message.content`, or "" when absent

        Raises:
            GatewayConfigurationError: If no API key is configured
            GatewayError: On transport failure or non-2xx status
        """
        try:
            response = await self._client.post(
                self.url,
                headers=self._headers(),
                json=self._body(messages, stream=False, temperature=temperature),
            )
        except httpx.HTTPError as e:
            raise GatewayError(
                "AI gateway unreachable",
                details={"error_type": type(e).__name__},
            ) from e

        _raise_for_gateway_status(response, response.text)

        try:
            data = response.json()
            content = data["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError):
            logger.warning("AI gateway returned no message content")
            return ""
        return content or ""

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
