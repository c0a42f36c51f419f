"""
Chat transcript model.

Ordered user/assistant turns for one study-chat session. Turns are appended;
only a turn addressed by index may be amended, which the session uses for the
in-progress assistant reply.

Dependencies: pydantic
System role: Transcript state owned by StreamingChatSession
"""

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field


class ChatRole(str, Enum):
    """Author of a chat turn."""

    USER = "user"
    ASSISTANT = "assistant"


class ChatTurn(BaseModel):
    """
    One message in the transcript.

    Attributes:
        role: Message author
        content: Message text
    """

    role: ChatRole
    content: str = Field(description="Message text")

    def to_payload(self) -> dict[str, str]:
        """Convert to the relay's wire shape."""
        return {"role": self.role.value, "content": self.content}


class Transcript:
    """Append-only sequence of ChatTurn with indexed amendment."""

    def __init__(self, turns: list[ChatTurn] | None = None) -> None:
        self._turns: list[ChatTurn] = [turn.model_copy() for turn in turns or []]

    def __len__(self) -> int:
        return len(self._turns)

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(self._turns)

    def __getitem__(self, index: int) -> ChatTurn:
        return self._turns[index]

    @property
    def last(self) -> ChatTurn | None:
        return self._turns[-1] if self._turns else None

    def append(self, turn: ChatTurn) -> int:
        """
        Append a turn.

        Returns:
            int: Index of the new turn
        """
        self._turns.append(turn)
        return len(self._turns) - 1

    def amend(self, index: int, content: str) -> ChatTurn:
        """
        Replace the content of an existing turn in place.

        Args:
            index: Turn index returned by append()
            content: Full replacement text

        Returns:
            ChatTurn: The amended turn
        """
        turn = self._turns[index]
        turn.content = content
        return turn

    def to_payload(self) -> list[dict[str, str]]:
        return [turn.to_payload() for turn in self._turns]
