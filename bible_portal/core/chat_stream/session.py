"""
Streaming study-chat session.

Posts the transcript to the chat relay, consumes the SSE response body chunk
by chunk and grows the assistant's reply in place so callers can render a
typing effect.

State machine per request:
    IDLE -> SENDING -> STREAMING -> {COMPLETED | FAILED | CANCELLED} -> IDLE

Dependencies: httpx, bible_portal.configs, bible_portal.core.chat_stream
System role: Client side of the Bible study chat
"""

import asyncio
import logging
from enum import Enum
from typing import Any

import httpx

from bible_portal.configs.chat_stream import ChatStreamSettings
from bible_portal.core.chat_stream.sse_decoder import SSEStreamDecoder, extract_delta_content
from bible_portal.core.chat_stream.transcript import ChatRole, ChatTurn, Transcript
from bible_portal.core.exceptions import (
    DEFAULT_CHAT_FAILURE_MESSAGE,
    ChatSessionBusyError,
    ChatTransportError,
    EmptyMessageError,
    QuotaExceededError,
    RateLimitedError,
    StreamUnavailableError,
)

logger = logging.getLogger(__name__)

EVENT_STREAM_MEDIA_TYPE = "text/event-stream"


class ChatSessionState(str, Enum):
    """Lifecycle of a single chat request."""

    IDLE = "idle"
    SENDING = "sending"
    STREAMING = "streaming"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"


def _error_from_response(response: httpx.Response) -> ChatTransportError:
    """Build the user-facing error for a non-2xx relay response."""
    server_message = None
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and isinstance(body.get("error"), str) and body["error"]:
        server_message = body["error"]

    message = server_message or DEFAULT_CHAT_FAILURE_MESSAGE
    if response.status_code == 429:
        return RateLimitedError(message, status_code=429)
    if response.status_code == 402:
        return QuotaExceededError(message, status_code=402)
    return ChatTransportError(message, status_code=response.status_code)


def _is_event_stream(response: httpx.Response) -> bool:
    content_type = response.headers.get("content-type", "")
    return content_type.split(";", 1)[0].strip().lower() == EVENT_STREAM_MEDIA_TYPE


class StreamingChatSession:
    """
    One study-chat conversation with at most one request in flight.

    The session owns its Transcript. During a request it keeps an explicit
    index to the assistant turn being streamed; the turn is created on the
    first content delta and amended with the full accumulated text on every
    later one.

    Attributes:
        client: HTTP client used for the relay call
        endpoint_url: Relay URL receiving `{messages, verseContext?}`
        transcript: Ordered user/assistant turns
        state: Current request state
        last_outcome: Terminal state of the most recent request
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        endpoint_url: str,
        headers: dict[str, str] | None = None,
        prior_turns: list[ChatTurn] | None = None,
        max_continuation_lines: int = 32,
    ) -> None:
        """
        Initialize chat session.

        Args:
            client: Shared httpx.AsyncClient
            endpoint_url: Relay endpoint URL
            headers: Extra request headers (e.g. Authorization)
            prior_turns: Turns to seed the transcript with
            max_continuation_lines: Cap for malformed-frame recovery
        """
        self.client = client
        self.endpoint_url = endpoint_url
        self.headers = dict(headers or {})
        self.transcript = Transcript(prior_turns)
        self.max_continuation_lines = max_continuation_lines
        self.state = ChatSessionState.IDLE
        self.last_outcome: ChatSessionState | None = None

        self._decoder: SSEStreamDecoder | None = None
        self._assistant_index: int | None = None
        self._accumulated = ""
        self._stream_task: asyncio.Task | None = None
        self._cancel_requested = False

    @classmethod
    def from_settings(
        cls,
        client: httpx.AsyncClient,
        settings: ChatStreamSettings,
        **kwargs: Any,
    ) -> "StreamingChatSession":
        """Build a session pointed at the configured relay endpoint."""
        return cls(
            client,
            settings.endpoint_url,
            max_continuation_lines=settings.max_continuation_lines,
            **kwargs,
        )

    @property
    def is_busy(self) -> bool:
        return self.state is not ChatSessionState.IDLE

    @property
    def assistant_text(self) -> str:
        """Text accumulated for the current (or last) assistant reply."""
        return self._accumulated

    async def start(
        self,
        user_text: str,
        verse_context: str | None = None,
    ) -> ChatSessionState:
        """
        Send a user message and stream the assistant reply into the transcript.

        The user turn is appended before the request is issued and is kept
        whatever the outcome.

        Args:
            user_text: Question typed by the user
            verse_context: Passage currently being studied

        Returns:
            ChatSessionState: COMPLETED or CANCELLED

        Raises:
            EmptyMessageError: If user_text is blank
            ChatSessionBusyError: If a request is already in flight
            ChatTransportError: On connection failure, non-2xx or missing body
        """
        if not user_text or not user_text.strip():
            raise EmptyMessageError()
        if self.is_busy:
            raise ChatSessionBusyError(self.state.value)

        self.state = ChatSessionState.SENDING
        self._cancel_requested = False
        self._assistant_index = None
        self._accumulated = ""
        self._decoder = SSEStreamDecoder(self.max_continuation_lines)

        self.transcript.append(ChatTurn(role=ChatRole.USER, content=user_text))
        body: dict[str, Any] = {"messages": self.transcript.to_payload()}
        if verse_context:
            body["verseContext"] = verse_context

        logger.info(
            "Chat request started",
            extra={"turns": len(self.transcript), "has_verse_context": bool(verse_context)},
        )

        self._stream_task = asyncio.create_task(self._run(body))
        try:
            await self._stream_task
        except asyncio.CancelledError:
            self._finish(ChatSessionState.CANCELLED)
            if not self._cancel_requested:
                raise
            return ChatSessionState.CANCELLED
        except Exception as e:
            logger.error(
                "Chat request failed",
                extra={"error_type": type(e).__name__, "error_msg": str(e)},
            )
            self._finish(ChatSessionState.FAILED)
            raise

        self._finish(ChatSessionState.COMPLETED)
        return ChatSessionState.COMPLETED

    def cancel(self) -> bool:
        """
        Abort the in-flight request.

        Content already streamed stays in the transcript.

        Returns:
            bool: True if a request was cancelled
        """
        if self._stream_task is None or self._stream_task.done():
            return False
        self._cancel_requested = True
        self._stream_task.cancel()
        return True

    def on_bytes(self, chunk: bytes) -> None:
        """
        Apply one response-body chunk to the transcript.

        Args:
            chunk: Raw bytes from the transport
        """
        if self._decoder is None:
            raise RuntimeError("on_bytes called outside of a request")
        for payload in self._decoder.feed(chunk):
            content = extract_delta_content(payload)
            if content:
                self._apply_delta(content)

    def _apply_delta(self, content: str) -> None:
        self._accumulated += content
        if self._assistant_index is None:
            self._assistant_index = self.transcript.append(
                ChatTurn(role=ChatRole.ASSISTANT, content=self._accumulated)
            )
        else:
            self.transcript.amend(self._assistant_index, self._accumulated)

    async def _run(self, body: dict[str, Any]) -> None:
        try:
            async with self.client.stream(
                "POST",
                self.endpoint_url,
                json=body,
                headers=self.headers,
            ) as response:
                if not response.is_success:
                    await response.aread()
                    raise _error_from_response(response)
                if response.stream is None or not _is_event_stream(response):
                    raise StreamUnavailableError(response.status_code)

                self.state = ChatSessionState.STREAMING
                async for chunk in response.aiter_bytes():
                    self.on_bytes(chunk)
                self._decoder.finish()
        except httpx.HTTPError as e:
            raise ChatTransportError(details={"error_type": type(e).__name__}) from e

    def _finish(self, outcome: ChatSessionState) -> None:
        dropped = self._decoder.dropped_frames if self._decoder else 0
        logger.info(
            "Chat request finished",
            extra={
                "outcome": outcome.value,
                "assistant_chars": len(self._accumulated),
                "dropped_frames": dropped,
            },
        )
        self.last_outcome = outcome
        self.state = ChatSessionState.IDLE
        self._assistant_index = None
        self._stream_task = None
