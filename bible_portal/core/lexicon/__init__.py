"""
Strong's lexicon parsing.

Exports:
  - LexiconDictionaryParser, parse_dictionary_text: Dictionary text parser
  - LexiconEntry, PendingEntry, LanguageMode: Entry model
  - clean_definition: Definition text cleanup
"""

from bible_portal.core.lexicon.entries import (
    LanguageMode,
    LexiconEntry,
    PendingEntry,
    format_strongs_id,
)
from bible_portal.core.lexicon.parser import LexiconDictionaryParser, parse_dictionary_text
from bible_portal.core.lexicon.text_cleaning import clean_definition

__all__ = [
    "LexiconDictionaryParser",
    "parse_dictionary_text",
    "LexiconEntry",
    "PendingEntry",
    "LanguageMode",
    "format_strongs_id",
    "clean_definition",
]
