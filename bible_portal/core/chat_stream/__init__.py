"""
Streaming study chat.

Exports:
  - StreamingChatSession, ChatSessionState: Request lifecycle and transcript updates
  - ChatTurn, ChatRole, Transcript: Transcript model
  - SSEStreamDecoder, extract_delta_content: SSE byte/frame decoding
"""

from bible_portal.core.chat_stream.session import ChatSessionState, StreamingChatSession
from bible_portal.core.chat_stream.sse_decoder import (
    DATA_PREFIX,
    DONE_TOKEN,
    SSEStreamDecoder,
    extract_delta_content,
)
from bible_portal.core.chat_stream.transcript import ChatRole, ChatTurn, Transcript

__all__ = [
    "StreamingChatSession",
    "ChatSessionState",
    "ChatTurn",
    "ChatRole",
    "Transcript",
    "SSEStreamDecoder",
    "extract_delta_content",
    "DATA_PREFIX",
    "DONE_TOKEN",
]
