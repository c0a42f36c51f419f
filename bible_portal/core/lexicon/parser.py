"""
Strong's dictionary text parser.

Recovers discrete lexicon entries from a text/Markdown conversion of a
dictionary document in a single forward pass. Every line is classified by the
ordered rule table in `rules` and the resulting LineMatch is dispatched to a
handler that updates the pass state.

Dependencies: bible_portal.core.lexicon.rules, bible_portal.core.lexicon.entries
System role: Lexicon import parsing
"""

import logging
from collections import Counter

from bible_portal.core.exceptions import LexiconInputError
from bible_portal.core.lexicon.entries import LanguageMode, LexiconEntry, PendingEntry
from bible_portal.core.lexicon.rules import LINE_RULES, LineKind, LineMatch, LineRule, classify_line

logger = logging.getLogger(__name__)


class _ParsePass:
    """Mutable state of one parse invocation."""

    def __init__(self) -> None:
        self.mode = LanguageMode.HEBREW
        self.pending = PendingEntry()
        self.entries: list[LexiconEntry] = []
        self.dropped_boundaries = 0
        self.line_kinds: Counter = Counter()
        self._handlers = {
            LineKind.SECTION_MARKER: self._on_section_marker,
            LineKind.ENTRY_BOUNDARY: self._on_entry_boundary,
            LineKind.ORIGINAL_WORD: self._on_original_word,
            LineKind.TRANSLITERATION: self._on_transliteration,
            LineKind.PART_OF_SPEECH: self._on_part_of_speech,
            LineKind.DEFINITION: self._on_definition,
        }

    def apply(self, match: LineMatch) -> None:
        self.line_kinds[match.kind] += 1
        handler = self._handlers.get(match.kind)
        if handler is not None:
            handler(match)

    def finalize_pending(self) -> None:
        entry = self.pending.finalize(self.mode)
        if entry is not None:
            self.entries.append(entry)
        elif self.pending.is_open:
            self.dropped_boundaries += 1
        self.pending = PendingEntry()

    def _on_section_marker(self, match: LineMatch) -> None:
        if self.mode is LanguageMode.GREEK:
            return
        # The pending entry still belongs to the section it was read in
        self.finalize_pending()
        logger.info(
            "Greek section marker found",
            extra={"entries_before_switch": len(self.entries)},
        )
        self.mode = LanguageMode.GREEK

    def _on_entry_boundary(self, match: LineMatch) -> None:
        self.finalize_pending()
        self.pending = PendingEntry(
            number=match.number,
            transliteration=match.transliteration,
            part_of_speech=match.part_of_speech,
        )

    def _on_original_word(self, match: LineMatch) -> None:
        self.pending.original_word = match.text

    def _on_transliteration(self, match: LineMatch) -> None:
        self.pending.transliteration = match.transliteration

    def _on_part_of_speech(self, match: LineMatch) -> None:
        self.pending.part_of_speech = match.part_of_speech

    def _on_definition(self, match: LineMatch) -> None:
        self.pending.definition_lines.append(match.text)


class LexiconDictionaryParser:
    """
    Parser turning a dictionary text dump into LexiconEntry records.

    Stateless between calls: every parse() starts in Hebrew mode with an
    empty accumulator, so one instance may be shared across threads.
    Malformed lines never raise; they are discarded by the rule table.
    """

    def __init__(self, rules: tuple[LineRule, ...] = LINE_RULES) -> None:
        """
        Initialize parser.

        Args:
            rules: Ordered line rule table
        """
        self.rules = rules

    def parse(self, text: str) -> list[LexiconEntry]:
        """
        Parse a dictionary document.

        Entries are returned in completion order. Duplicate IDs are kept;
        de-duplication is left to the upsert.

        Args:
            text: Whole document as text

        Returns:
            list[LexiconEntry]: Parsed entries, possibly empty

        Raises:
            LexiconInputError: If text is not a str
        """
        if not isinstance(text, str):
            raise LexiconInputError(type(text).__name__)

        parse_pass = _ParsePass()
        lines = text.split("\n")
        for raw_line in lines:
            parse_pass.apply(classify_line(raw_line.strip(), parse_pass.pending, self.rules))
        parse_pass.finalize_pending()

        logger.info(
            "Dictionary parse complete",
            extra={
                "line_count": len(lines),
                "entry_count": len(parse_pass.entries),
                "dropped_boundaries": parse_pass.dropped_boundaries,
                "definition_lines": parse_pass.line_kinds[LineKind.DEFINITION],
                "final_mode": parse_pass.mode.value,
            },
        )
        return parse_pass.entries


def parse_dictionary_text(text: str) -> list[LexiconEntry]:
    """Parse with the default rule table."""
    return LexiconDictionaryParser().parse(text)
