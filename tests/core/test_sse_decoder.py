"""
Test suite for SSEStreamDecoder.

Tests byte-level UTF-8 carry-over, partial lines, CRLF handling, comment/blank
line skipping, the [DONE] token and malformed-frame recovery.

System role: Verification of the SSE byte/line/payload layer
"""

import json

import pytest

from bible_portal.core.chat_stream.sse_decoder import SSEStreamDecoder, extract_delta_content


def _contents(payloads: list) -> str:
    return "".join(extract_delta_content(p) or "" for p in payloads)


@pytest.fixture
def decoder() -> SSEStreamDecoder:
    """Provide a fresh decoder."""
    return SSEStreamDecoder()


class TestExtractDeltaContent:
    """Test suite for extract_delta_content()."""

    def test_should_return_content_of_first_choice(self) -> None:
        payload = {"choices": [{"delta": {"content": "Amém"}}, {"delta": {"content": "x"}}]}

        assert extract_delta_content(payload) == "Amém"

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"choices": []},
            {"choices": [{"delta": {}}]},
            {"choices": [{"delta": {"content": ""}}]},
            {"choices": [{"delta": {"content": 3}}]},
            {"choices": "oops"},
            [1, 2],
            "text",
        ],
    )
    def test_should_return_none_when_content_missing(self, payload) -> None:
        assert extract_delta_content(payload) is None


class TestSSEStreamDecoderFeed:
    """Test suite for SSEStreamDecoder.feed()."""

    def test_feed_should_parse_complete_frames(self, decoder, sse_frame) -> None:
        # Arrange
        body = (sse_frame("Graça ") + sse_frame("e paz")).encode()

        # Act
        payloads = decoder.feed(body)

        # Assert
        assert _contents(payloads) == "Graça e paz"
        assert decoder.buffer == ""

    def test_feed_should_hold_partial_line_until_terminator(self, decoder, sse_frame) -> None:
        # Arrange
        frame = sse_frame("Selá").encode()

        # Act
        first = decoder.feed(frame[:10])
        second = decoder.feed(frame[10:])

        # Assert
        assert first == []
        assert _contents(second) == "Selá"

    def test_feed_should_carry_split_multibyte_character(self, decoder, sse_frame) -> None:
        # Arrange
        frame = sse_frame("ἀγάπη").encode("utf-8")
        split_at = frame.index("ἀ".encode("utf-8")) + 1

        # Act
        payloads = decoder.feed(frame[:split_at]) + decoder.feed(frame[split_at:])

        # Assert
        assert _contents(payloads) == "ἀγάπη"

    def test_feed_should_strip_carriage_returns(self, decoder, sse_frame) -> None:
        body = sse_frame("fé").replace("\n", "\r\n").encode()

        assert _contents(decoder.feed(body)) == "fé"

    def test_feed_should_skip_comments_blank_and_foreign_lines(self, decoder, sse_frame) -> None:
        # Arrange
        body = (": ping\n\nevent: message\nid: 7\n" + sse_frame("ok")).encode()

        # Act
        payloads = decoder.feed(body)

        # Assert
        assert _contents(payloads) == "ok"
        assert decoder.dropped_frames == 0

    def test_feed_should_stop_chunk_at_done(self, decoder, sse_frame) -> None:
        # Arrange
        body = (sse_frame("antes") + "data: [DONE]\n" + sse_frame("depois")).encode()

        # Act
        payloads = decoder.feed(body)

        # Assert
        assert _contents(payloads) == "antes"
        assert decoder.done_seen is True
        assert decoder.buffer == sse_frame("depois")

    def test_feed_should_defer_frame_split_by_embedded_newline(self, decoder) -> None:
        # Arrange
        first = 'data: {"choices":[{"delta":{"content":"Bem-\n'
        second = 'aventurados"}}]}\n'

        # Act
        deferred = decoder.feed(first.encode())
        buffered = decoder.buffer
        completed = decoder.feed(second.encode())

        # Assert
        assert deferred == []
        assert buffered == first
        assert _contents(completed) == "Bem-\naventurados"
        assert decoder.buffer == ""

    def test_feed_should_drop_bad_frame_when_next_frame_starts(self, decoder, sse_frame) -> None:
        # Arrange
        body = ("data: {not json\n" + sse_frame("seguinte")).encode()

        # Act
        payloads = decoder.feed(body)

        # Assert
        assert _contents(payloads) == "seguinte"
        assert decoder.dropped_frames == 1

    def test_feed_should_drop_frame_after_continuation_cap(self, sse_frame) -> None:
        # Arrange
        decoder = SSEStreamDecoder(max_continuation_lines=2)
        body = ("data: {broken\nx\ny\nz\n" + sse_frame("fim")).encode()

        # Act
        payloads = decoder.feed(body)

        # Assert
        assert decoder.dropped_frames == 1
        assert _contents(payloads) == "fim"

    def test_feed_should_ignore_valid_json_without_content(self, decoder) -> None:
        body = ("data: " + json.dumps({"usage": {"tokens": 3}}) + "\n").encode()

        payloads = decoder.feed(body)

        assert payloads == [{"usage": {"tokens": 3}}]
        assert _contents(payloads) == ""


class TestSSEStreamDecoderFinish:
    """Test suite for SSEStreamDecoder.finish()."""

    def test_finish_should_discard_unterminated_data(self, decoder) -> None:
        # Arrange
        decoder.feed(b'data: {"choices":[{"delta":{"content":"x"}}]}')

        # Act
        discarded = decoder.finish()

        # Assert
        assert discarded > 0
        assert decoder.buffer == ""

    def test_finish_should_return_zero_for_clean_stream(self, decoder, sse_frame) -> None:
        decoder.feed(sse_frame("a").encode())

        assert decoder.finish() == 0
