"""
Streaming chat client settings.

Dependencies: pydantic_settings
System role: Configuration for StreamingChatSession consumers
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bible_portal.configs.base import BaseSettings


class ChatStreamSettings(BaseSettings):
    """Client-side settings for the study chat stream."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CHAT_STREAM_",
        case_sensitive=False,
        extra="ignore",
    )

    endpoint_url: str = Field(
        default="http://localhost:8000/api/v1/bible-chat",
        description="Relay endpoint the chat session posts to",
    )
    max_continuation_lines: int = Field(
        default=32,
        gt=0,
        description="Lines a malformed SSE frame may absorb before it is dropped",
    )
