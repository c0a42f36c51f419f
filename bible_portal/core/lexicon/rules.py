"""
Line classification rules for the Strong's dictionary parser.

Each rule is a (name, matcher) pair evaluated top to bottom; the first
matcher returning a LineMatch decides how the line is handled. Rules flagged
`requires_entry` only apply once an entry boundary has been seen.

Dependencies: re (stdlib), bible_portal.core.lexicon.entries
System role: Auditable rule table behind LexiconDictionaryParser
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from bible_portal.core.lexicon.entries import PendingEntry

MIN_FRAGMENT_CHARS = 3
MAX_FRAGMENT_CHARS = 300

NOISE_PREFIXES = ("### Images", "## Page", "- `parsed-documents", "| ---")
NOISE_LINES = frozenset({"---"})

SECTION_MARKERS = (
    "Strongs em Grego",
    "Léxico Grego",
    "Dicionário Grego",
    "Greek Dictionary",
    "Greek Lexicon",
)

# Boundary patterns in priority order: header, table cell, bare leading number
HEADER_BOUNDARY = re.compile(r"^#\s*(\d{1,5})(?:\s*$|\s+(['|;].*)$)")
TABLE_CELL_BOUNDARY = re.compile(r"\|\s*(\d{2,5})\s*\|(.*)$")
BARE_NUMBER_BOUNDARY = re.compile(r"^(\d{2,5})\s+('.*)$")

CLOSED_QUOTE = re.compile(r"'([^'|;]+)'")
OPEN_QUOTE = re.compile(r"'([^\s'|;]+)")
WRAPPED_IN_QUOTES = re.compile(r"^'([^']+)'$")

ORIGINAL_SCRIPT_START = re.compile(r"^[\u0590-\u05FF\u0370-\u03FF\u1F00-\u1FFF]")

PART_OF_SPEECH = re.compile(
    r";\s*("
    r"n\s*pr(?:\s*[mfl])?"
    r"|n\s*[mf]"
    r"|v|adj|adv|prep|conj|interj"
    r"|exclama[çc][ãa]o|exclamation"
    r")\b",
    re.IGNORECASE,
)

LEADING_ENUMERATOR = re.compile(r"^(?:\d+[a-z]?\d*[a-z]?|[a-z])[.)]\s*", re.IGNORECASE)
INLINE_MARKERS = re.compile(
    r"\((?:fig(?:urative)?|espec(?:ially)?|esp|metáfora)\.?\)",
    re.IGNORECASE,
)
HEADING_PUNCTUATION = ("|", "#")

BOILERPLATE_LEAD_INS = re.compile(
    r"^(?:"
    r"derived from|corresponds to|a root\b|of origin|greek \d+|participle|intensive"
    r"|procedente de|correspondente a|uma raiz\b|de origem|grego \d+|particípio|intensivo"
    r"|forma contrat|aparentemente|derivação|ditat\b|ver\s"
    r")",
    re.IGNORECASE,
)
EDITORIAL_LEAD_INS = re.compile(
    r"^(?:Qal|Piel|Pual|Nifal|Hifil|Hofal|Hitpael|Peal|Afel)\b"
    r"|^(?:Essa forma|Expressão|Ação|Alguns verbos|Esta obra|O vocábulo)"
)


class LineKind(str, Enum):
    """What a dictionary line contributes to the parse."""

    NOISE = "noise"
    SECTION_MARKER = "section_marker"
    ENTRY_BOUNDARY = "entry_boundary"
    ORIGINAL_WORD = "original_word"
    TRANSLITERATION = "transliteration"
    PART_OF_SPEECH = "part_of_speech"
    DEFINITION = "definition"
    DISCARDED = "discarded"


@dataclass(frozen=True)
class LineMatch:
    """Classification result for one line."""

    kind: LineKind
    number: str | None = None
    transliteration: str | None = None
    part_of_speech: str | None = None
    text: str | None = None


Matcher = Callable[[str, PendingEntry], LineMatch | None]


@dataclass(frozen=True)
class LineRule:
    """Named matcher in the rule table."""

    name: str
    matcher: Matcher
    requires_entry: bool = False


def find_quoted_fragment(text: str) -> str | None:
    """Return the first single-quoted transliteration fragment in text."""
    match = CLOSED_QUOTE.search(text) or OPEN_QUOTE.search(text)
    if match is None:
        return None
    fragment = match.group(1).strip()
    return fragment or None


def find_part_of_speech(text: str) -> str | None:
    """Return the part-of-speech abbreviation following a semicolon."""
    match = PART_OF_SPEECH.search(text)
    return match.group(1) if match else None


def clean_definition_fragment(line: str) -> str | None:
    """
    Normalize a candidate definition line.

    Strips the leading enumerator and inline annotation markers, then applies
    the length, punctuation and boilerplate filters.

    Returns:
        str | None: Cleaned fragment, or None when it should be discarded
    """
    fragment = LEADING_ENUMERATOR.sub("", line, count=1)
    fragment = INLINE_MARKERS.sub("", fragment)
    fragment = re.sub(r"\s{2,}", " ", fragment).strip()

    if len(fragment) < MIN_FRAGMENT_CHARS or len(fragment) >= MAX_FRAGMENT_CHARS:
        return None
    if fragment.startswith(HEADING_PUNCTUATION):
        return None
    if BOILERPLATE_LEAD_INS.match(fragment) or EDITORIAL_LEAD_INS.match(fragment):
        return None
    return fragment


def match_noise(line: str, pending: PendingEntry) -> LineMatch | None:
    if not line or line in NOISE_LINES or line.startswith(NOISE_PREFIXES):
        return LineMatch(LineKind.NOISE)
    return None


def match_section_marker(line: str, pending: PendingEntry) -> LineMatch | None:
    if any(marker in line for marker in SECTION_MARKERS):
        return LineMatch(LineKind.SECTION_MARKER)
    return None


def match_entry_boundary(line: str, pending: PendingEntry) -> LineMatch | None:
    """
    Detect a new entry number.

    Header lines (`# NN`) win over table cells (`| NN | 'translit`), which
    win over bare leading numbers (`NN 'translit`).
    """
    number = None
    remainder = ""

    header = HEADER_BOUNDARY.match(line)
    if header:
        number, remainder = header.group(1), header.group(2) or ""
    else:
        for pattern in (TABLE_CELL_BOUNDARY, BARE_NUMBER_BOUNDARY):
            candidate = pattern.search(line)
            if candidate and find_quoted_fragment(candidate.group(2)):
                number, remainder = candidate.group(1), candidate.group(2)
                break

    if number is None or int(number) == 0:
        return None

    return LineMatch(
        LineKind.ENTRY_BOUNDARY,
        number=number,
        transliteration=find_quoted_fragment(remainder),
        part_of_speech=find_part_of_speech(remainder),
    )


def match_original_word(line: str, pending: PendingEntry) -> LineMatch | None:
    if pending.original_word is None and ORIGINAL_SCRIPT_START.match(line):
        return LineMatch(LineKind.ORIGINAL_WORD, text=line.split()[0])
    return None


def match_transliteration(line: str, pending: PendingEntry) -> LineMatch | None:
    if pending.transliteration is not None:
        return None
    wrapped = WRAPPED_IN_QUOTES.match(line)
    if wrapped and wrapped.group(1).strip():
        return LineMatch(LineKind.TRANSLITERATION, transliteration=wrapped.group(1).strip())
    return None


def match_part_of_speech(line: str, pending: PendingEntry) -> LineMatch | None:
    part_of_speech = find_part_of_speech(line)
    if part_of_speech:
        return LineMatch(LineKind.PART_OF_SPEECH, part_of_speech=part_of_speech)
    return None


def match_definition(line: str, pending: PendingEntry) -> LineMatch:
    fragment = clean_definition_fragment(line)
    if fragment is None:
        return LineMatch(LineKind.DISCARDED)
    return LineMatch(LineKind.DEFINITION, text=fragment)


LINE_RULES: tuple[LineRule, ...] = (
    LineRule("noise", match_noise),
    LineRule("section_marker", match_section_marker),
    LineRule("entry_boundary", match_entry_boundary),
    LineRule("original_word", match_original_word, requires_entry=True),
    LineRule("transliteration", match_transliteration, requires_entry=True),
    LineRule("part_of_speech", match_part_of_speech, requires_entry=True),
    LineRule("definition", match_definition, requires_entry=True),
)


def classify_line(
    line: str,
    pending: PendingEntry,
    rules: tuple[LineRule, ...] = LINE_RULES,
) -> LineMatch:
    """
    Run the rule table against one stripped line.

    Args:
        line: Line with surrounding whitespace removed
        pending: Current accumulator (for state-dependent rules)
        rules: Ordered rule table

    Returns:
        LineMatch: First match, or DISCARDED when nothing applies
    """
    for rule in rules:
        if rule.requires_entry and not pending.is_open:
            continue
        match = rule.matcher(line, pending)
        if match is not None:
            return match
    return LineMatch(LineKind.DISCARDED)
