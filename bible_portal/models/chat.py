"""
Bible chat schemas.

Dependencies: pydantic, bible_portal.core.chat_stream
System role: Chat relay API contract
"""

from pydantic import BaseModel, ConfigDict, Field

from bible_portal.core.chat_stream import ChatTurn


class BibleChatRequest(BaseModel):
    """Request body of the chat relay: `{messages, verseContext?}`."""

    model_config = ConfigDict(populate_by_name=True)

    messages: list[ChatTurn] = Field(min_length=1, description="Conversation so far")
    verse_context: str | None = Field(
        default=None,
        alias="verseContext",
        description="Passage the student is studying",
    )
