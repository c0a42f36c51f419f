"""
Lexicon entry types.

PendingEntry accumulates one dictionary entry during a parse pass;
LexiconEntry is the finalized, upsert-ready record.

Dependencies: dataclasses (stdlib)
System role: Data model of the Strong's dictionary parser
"""

from dataclasses import dataclass, field
from enum import Enum

DEFINITION_LINE_LIMIT = 3
FIELD_MAX_CHARS = 500
STRONGS_NUMBER_WIDTH = 4
DEFINITION_SEPARATOR = "; "


class LanguageMode(str, Enum):
    """Lexicon section currently being read."""

    HEBREW = "hebrew"
    GREEK = "greek"

    @property
    def prefix(self) -> str:
        return "H" if self is LanguageMode.HEBREW else "G"


def format_strongs_id(number: str, mode: LanguageMode) -> str:
    """
    Build a Strong's ID such as H0137 or G0026.

    Args:
        number: Digits captured from the entry boundary
        mode: Language section the entry belongs to

    Returns:
        str: Prefixed, zero-padded identifier
    """
    return f"{mode.prefix}{number.lstrip('0').zfill(STRONGS_NUMBER_WIDTH)}"


@dataclass(frozen=True)
class LexiconEntry:
    """
    Structured dictionary entry produced by the parser.

    Attributes:
        strongs_id: Prefixed, zero-padded Strong's ID
        original_word: Hebrew/Greek headword (transliteration when absent)
        definition: First definition lines joined, at most 500 chars
        usage: Remaining definition lines joined, at most 500 chars
        transliteration: Latin-script transliteration
        part_of_speech: Abbreviated part of speech (e.g. "n m")
    """

    strongs_id: str
    original_word: str
    definition: str
    usage: str | None = None
    transliteration: str | None = None
    part_of_speech: str | None = None

    def to_record(self) -> dict[str, str | None]:
        """Map to strongs_translations columns."""
        return {
            "strongs_id": self.strongs_id,
            "portuguese_word": self.transliteration or self.original_word,
            "portuguese_definition": self.definition,
            "portuguese_usage": self.usage,
            "original_word": self.original_word or None,
            "transliteration": self.transliteration,
            "part_of_speech": self.part_of_speech,
        }


@dataclass
class PendingEntry:
    """In-progress entry between two boundaries."""

    number: str | None = None
    original_word: str | None = None
    transliteration: str | None = None
    part_of_speech: str | None = None
    definition_lines: list[str] = field(default_factory=list)

    @property
    def is_open(self) -> bool:
        """Whether an entry boundary has been seen for this accumulator."""
        return self.number is not None

    def finalize(self, mode: LanguageMode) -> LexiconEntry | None:
        """
        Convert to a LexiconEntry.

        Entries without a number or without any definition line are dropped.

        Args:
            mode: Language section deciding the H/G prefix

        Returns:
            LexiconEntry | None: Finalized entry, or None when dropped
        """
        if self.number is None or not self.definition_lines:
            return None

        head = self.definition_lines[:DEFINITION_LINE_LIMIT]
        tail = self.definition_lines[DEFINITION_LINE_LIMIT:]
        usage = DEFINITION_SEPARATOR.join(tail)[:FIELD_MAX_CHARS]

        return LexiconEntry(
            strongs_id=format_strongs_id(self.number, mode),
            original_word=self.original_word or self.transliteration or "",
            definition=DEFINITION_SEPARATOR.join(head)[:FIELD_MAX_CHARS],
            usage=usage or None,
            transliteration=self.transliteration,
            part_of_speech=self.part_of_speech,
        )
