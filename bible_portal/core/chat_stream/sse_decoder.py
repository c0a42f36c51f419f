"""
Incremental decoder for chat-completion SSE bodies.

Turns arbitrarily chunked response bytes into parsed `data:` JSON payloads.
The text buffer is the single source of truth for unconsumed input: a line is
removed from it only once it has been fully handled, so a frame that cannot be
parsed yet simply stays in place until more bytes arrive.

Dependencies: codecs, json (stdlib)
System role: Byte/line/payload layer under StreamingChatSession
"""

import codecs
import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

DATA_PREFIX = "data: "
DONE_TOKEN = "[DONE]"
COMMENT_PREFIX = ":"

# Sentinel for "frame is not complete yet, leave the buffer alone"
_INCOMPLETE = object()


def _strip_cr(line: str) -> str:
    return line[:-1] if line.endswith("\r") else line


def extract_delta_content(payload: Any) -> str | None:
    """
    Read `choices[0].delta.content` from a chat-completion chunk.

    Args:
        payload: Decoded JSON value of one `data:` frame

    Returns:
        str | None: Non-empty content delta, or None when absent
    """
    if not isinstance(payload, dict):
        return None
    choices = payload.get("choices")
    if not isinstance(choices, list) or not choices:
        return None
    first = choices[0]
    delta = first.get("delta") if isinstance(first, dict) else None
    content = delta.get("content") if isinstance(delta, dict) else None
    if isinstance(content, str) and content:
        return content
    return None


class SSEStreamDecoder:
    """
    Stateful SSE frame decoder for one response body.

    Multi-byte UTF-8 sequences split across chunks are carried by an
    incremental decoder; partial lines stay in `buffer` until a terminator
    arrives. A complete line whose JSON does not parse is treated as a frame
    with an embedded newline and is re-tried joined with the following
    line(s). It is dropped when the next line opens a new `data:` frame or
    after `max_continuation_lines` joins.

    Attributes:
        buffer: Decoded text not yet consumed
        done_seen: Whether a `[DONE]` frame has been consumed
        dropped_frames: Number of unrecoverable frames discarded
    """

    def __init__(self, max_continuation_lines: int = 32) -> None:
        """
        Initialize decoder.

        Args:
            max_continuation_lines: Joins allowed for one malformed frame
        """
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self.max_continuation_lines = max_continuation_lines
        self.buffer = ""
        self.done_seen = False
        self.dropped_frames = 0

    def feed(self, chunk: bytes) -> list[Any]:
        """
        Decode one transport chunk and return the payloads it completed.

        Processing of the chunk stops at a `[DONE]` frame or at a frame that
        needs more bytes; remaining lines stay buffered for the next chunk.

        Args:
            chunk: Raw bytes as delivered by the transport

        Returns:
            list: Parsed JSON payloads, in stream order
        """
        self.buffer += self._decoder.decode(chunk)
        return self._drain()

    def finish(self) -> int:
        """
        Flush the byte decoder at end of stream and discard leftovers.

        Returns:
            int: Number of characters discarded
        """
        self.buffer += self._decoder.decode(b"", final=True)
        leftover = len(self.buffer)
        if leftover:
            logger.debug(
                "Discarding unterminated SSE data at end of stream",
                extra={"discarded_chars": leftover},
            )
        self.buffer = ""
        return leftover

    def _drain(self) -> list[Any]:
        payloads: list[Any] = []

        while True:
            newline = self.buffer.find("\n")
            if newline == -1:
                break

            line = _strip_cr(self.buffer[:newline])
            if line.startswith(COMMENT_PREFIX) or not line.strip():
                self.buffer = self.buffer[newline + 1:]
                continue
            if not line.startswith(DATA_PREFIX):
                self.buffer = self.buffer[newline + 1:]
                continue

            data = line[len(DATA_PREFIX):]
            if data.strip() == DONE_TOKEN:
                self.buffer = self.buffer[newline + 1:]
                self.done_seen = True
                break

            payload, end = self._parse_frame(data, newline)
            if payload is _INCOMPLETE:
                logger.debug(
                    "Deferring SSE frame until more data arrives",
                    extra={"buffered_chars": len(self.buffer)},
                )
                break

            self.buffer = self.buffer[end + 1:]
            if payload is not None:
                payloads.append(payload)

        return payloads

    def _parse_frame(self, data: str, end: int) -> tuple[Any, int]:
        """
        Parse a frame, extending it across following lines when needed.

        Args:
            data: Text after the `data: ` marker
            end: Buffer index of the newline that terminated the line

        Returns:
            tuple: (payload, index of last consumed newline). The payload is
                `_INCOMPLETE` when the buffer holds no further line to try,
                or None when the frame was dropped.
        """
        try:
            return json.loads(data, strict=False), end
        except json.JSONDecodeError:
            pass

        for _ in range(self.max_continuation_lines):
            next_newline = self.buffer.find("\n", end + 1)
            if next_newline == -1:
                return _INCOMPLETE, end

            continuation = _strip_cr(self.buffer[end + 1:next_newline])
            if continuation.startswith(DATA_PREFIX):
                break

            data = f"{data}\n{continuation}"
            end = next_newline
            try:
                return json.loads(data, strict=False), end
            except json.JSONDecodeError:
                continue

        self.dropped_frames += 1
        logger.warning(
            "Dropping unparseable SSE frame",
            extra={"frame_preview": data[:100], "dropped_frames": self.dropped_frames},
        )
        return None, end
