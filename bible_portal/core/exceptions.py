"""
Exception hierarchy for the Bible portal backend.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any

DEFAULT_CHAT_FAILURE_MESSAGE = "Erro ao enviar mensagem"


class BiblePortalException(Exception):
    """Base exception for all Bible portal errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(BiblePortalException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class EmptyMessageError(ValidationError):
    """Raised when a chat message is empty after trimming."""

    def __init__(self) -> None:
        super().__init__("Message must not be empty", field="user_text")


class ChatSessionBusyError(BiblePortalException):
    """Raised when a chat request is started while another is in flight."""

    def __init__(self, state: str) -> None:
        super().__init__("A chat request is already in flight", {"state": state})


class ChatTransportError(BiblePortalException):
    """
    Raised when the chat relay cannot deliver a stream.

    Covers connection failures, non-2xx responses and missing bodies.
    `user_message` is safe to show to the end user.
    """

    def __init__(
        self,
        user_message: str = DEFAULT_CHAT_FAILURE_MESSAGE,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.user_message = user_message
        self.status_code = status_code
        super().__init__(user_message, details)


class StreamUnavailableError(ChatTransportError):
    """Raised when an OK response carries no readable event stream."""

    def __init__(self, status_code: int | None = None) -> None:
        super().__init__("Stream não disponível", status_code=status_code)


class RateLimitedError(ChatTransportError):
    """Raised when the relay reports a rate limit (HTTP 429)."""


class QuotaExceededError(ChatTransportError):
    """Raised when the relay reports exhausted credits (HTTP 402)."""


class GatewayError(BiblePortalException):
    """Raised when the upstream AI gateway call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize gateway error.

        Args:
            message: Error message
            status_code: Upstream HTTP status, if a response was received
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class GatewayRateLimitError(GatewayError):
    """Upstream gateway answered 429."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("AI gateway rate limit exceeded", status_code=429, details=details)


class GatewayQuotaError(GatewayError):
    """Upstream gateway answered 402."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("AI gateway credits exhausted", status_code=402, details=details)


class GatewayConfigurationError(GatewayError):
    """Raised when gateway credentials are missing."""

    def __init__(self, setting: str = "AI_GATEWAY_API_KEY") -> None:
        super().__init__(f"{setting} is not configured", details={"setting": setting})


class LexiconInputError(BiblePortalException):
    """Raised when the dictionary parser receives non-text input."""

    def __init__(self, received_type: str) -> None:
        super().__init__(
            "Dictionary input must be text",
            {"received_type": received_type},
        )


class NoEntriesParsedError(BiblePortalException):
    """Raised by callers when a parse pass produced zero entries."""

    def __init__(self, line_count: int) -> None:
        super().__init__("No entries parsed from text", {"line_count": line_count})


class LexiconImportError(BiblePortalException):
    """Raised when a lexicon import cannot proceed."""

    pass


class LexiconNotFoundError(BiblePortalException):
    """Raised when a Strong's ID is absent from the lexicon or database."""

    def __init__(self, strongs_id: str) -> None:
        super().__init__(f"Strong's entry not found: {strongs_id}", {"strongs_id": strongs_id})
