"""
Test suite for the lexicon line rule table.

Each matcher is exercised in isolation, then classify_line() is checked for
rule priority and the requires_entry gate.

System role: Verification of Strong's dictionary line classification
"""

import pytest

from bible_portal.core.lexicon.entries import PendingEntry
from bible_portal.core.lexicon.rules import (
    LINE_RULES,
    LineKind,
    clean_definition_fragment,
    classify_line,
    find_part_of_speech,
    find_quoted_fragment,
    match_entry_boundary,
    match_noise,
    match_original_word,
    match_section_marker,
    match_transliteration,
)


@pytest.fixture
def closed_entry() -> PendingEntry:
    """Accumulator before any boundary."""
    return PendingEntry()


@pytest.fixture
def open_entry() -> PendingEntry:
    """Accumulator bound to an entry number."""
    return PendingEntry(number="01")


class TestMatchEntryBoundary:
    """Test suite for entry boundary detection."""

    def test_header_should_capture_number_transliteration_and_pos(self, closed_entry) -> None:
        match = match_entry_boundary("# 01 'ab ; n m", closed_entry)

        assert match.kind is LineKind.ENTRY_BOUNDARY
        assert (match.number, match.transliteration, match.part_of_speech) == ("01", "ab", "n m")

    def test_bare_header_should_match_without_transliteration(self, closed_entry) -> None:
        match = match_entry_boundary("# 137", closed_entry)

        assert match.number == "137"
        assert match.transliteration is None

    def test_table_cell_should_require_quoted_fragment(self, closed_entry) -> None:
        with_quote = match_entry_boundary("| 137 | 'adonay | Senhor |", closed_entry)
        without_quote = match_entry_boundary("| 137 | Senhor |", closed_entry)

        assert with_quote.number == "137"
        assert with_quote.transliteration == "adonay"
        assert without_quote is None

    def test_bare_number_should_require_quoted_fragment(self, closed_entry) -> None:
        assert match_entry_boundary("26 'agape", closed_entry).number == "26"
        assert match_entry_boundary("2024 edição revista", closed_entry) is None

    def test_header_should_win_over_table_cell(self, closed_entry) -> None:
        match = match_entry_boundary("# 12 | 34 | 'x", closed_entry)

        assert match.number == "12"

    @pytest.mark.parametrize("line", ["# 0", "# 000", "#12 texto", "12 sem aspas", "texto # 12"])
    def test_should_reject_non_boundaries(self, line, closed_entry) -> None:
        assert match_entry_boundary(line, closed_entry) is None


class TestFragmentHelpers:
    """Test suite for quote and part-of-speech helpers."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("'ab'", "ab"),
            ("'abba ; n m", "abba"),
            ("sem aspas", None),
            ("''", None),
        ],
    )
    def test_find_quoted_fragment(self, text, expected) -> None:
        assert find_quoted_fragment(text) == expected

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("; n m", "n m"),
            ("'ab ; n f", "n f"),
            ("texto; v", "v"),
            ("; adj", "adj"),
            ("; n pr m", "n pr m"),
            ("; n pr loc", "n pr"),
            ("; Exclamação", "Exclamação"),
            ("sem marcador v", None),
            ("; verbo", None),
        ],
    )
    def test_find_part_of_speech(self, text, expected) -> None:
        assert find_part_of_speech(text) == expected


class TestLineMatchers:
    """Test suite for noise, section and headword matchers."""

    @pytest.mark.parametrize(
        "line",
        ["", "---", "## Page 3", "### Images", "- `parsed-documents/strongs.md`", "| --- | --- |"],
    )
    def test_match_noise(self, line, closed_entry) -> None:
        assert match_noise(line, closed_entry).kind is LineKind.NOISE

    @pytest.mark.parametrize("line", ["# Strongs em Grego", "Léxico Grego do NT", "## Greek Lexicon"])
    def test_match_section_marker(self, line, closed_entry) -> None:
        assert match_section_marker(line, closed_entry).kind is LineKind.SECTION_MARKER

    def test_section_markers_should_be_case_sensitive(self, closed_entry) -> None:
        assert match_section_marker("GREEK DICTIONARY", closed_entry) is None

    def test_match_original_word_should_take_first_token(self, open_entry) -> None:
        match = match_original_word("אָב 'ab", open_entry)

        assert match.kind is LineKind.ORIGINAL_WORD
        assert match.text == "אָב"

    def test_match_original_word_should_accept_greek(self, open_entry) -> None:
        assert match_original_word("ἀγάπη", open_entry).text == "ἀγάπη"

    def test_match_original_word_should_keep_first_headword(self) -> None:
        pending = PendingEntry(number="01", original_word="אָב")

        assert match_original_word("אֲבִי", pending) is None

    def test_match_transliteration_should_require_full_wrap(self, open_entry) -> None:
        assert match_transliteration("'abba'", open_entry).transliteration == "abba"
        assert match_transliteration("'abba' pai", open_entry) is None


class TestCleanDefinitionFragment:
    """Test suite for definition fragment cleanup and filters."""

    @pytest.mark.parametrize(
        ("line", "expected"),
        [
            ("1a) pai", "pai"),
            ("12) cabeça de família", "cabeça de família"),
            ("a) amor (fig.) divino", "amor divino"),
            ("b. (espec.) primogênito", "primogênito"),
            ("pai de uma nação", "pai de uma nação"),
        ],
    )
    def test_should_strip_enumerators_and_markers(self, line, expected) -> None:
        assert clean_definition_fragment(line) == expected

    @pytest.mark.parametrize(
        "line",
        [
            "ab",
            "1) ab",
            "| célula",
            "# título",
            "derived from 1",
            "Corresponds to 2",
            "a root word",
            "of origin uncertain",
            "Greek 26",
            "procedente de 3",
            "correspondente a 4",
            "participle of 1",
            "Qal: fazer",
        ],
    )
    def test_should_discard_filtered_fragments(self, line) -> None:
        assert clean_definition_fragment(line) is None

    def test_should_discard_overlong_fragment_instead_of_truncating(self) -> None:
        assert clean_definition_fragment("x" * 299) == "x" * 299
        assert clean_definition_fragment("x" * 300) is None


class TestClassifyLine:
    """Test suite for rule ordering in classify_line()."""

    def test_rule_table_order_should_be_fixed(self) -> None:
        assert [rule.name for rule in LINE_RULES] == [
            "noise",
            "section_marker",
            "entry_boundary",
            "original_word",
            "transliteration",
            "part_of_speech",
            "definition",
        ]

    def test_definition_lines_should_be_ignored_before_first_boundary(self, closed_entry) -> None:
        assert classify_line("pai, antepassado", closed_entry).kind is LineKind.DISCARDED

    def test_definition_line_should_be_classified_inside_entry(self, open_entry) -> None:
        match = classify_line("pai, antepassado", open_entry)

        assert match.kind is LineKind.DEFINITION
        assert match.text == "pai, antepassado"

    def test_part_of_speech_line_should_not_become_definition(self, open_entry) -> None:
        match = classify_line("pai ; n m", open_entry)

        assert match.kind is LineKind.PART_OF_SPEECH
        assert match.part_of_speech == "n m"

    def test_boundary_should_win_over_headword(self, open_entry) -> None:
        assert classify_line("# 02", open_entry).kind is LineKind.ENTRY_BOUNDARY
