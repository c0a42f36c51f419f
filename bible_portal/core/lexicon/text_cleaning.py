"""
Lexicon text normalization.

Dependencies: re (stdlib)
System role: Cleanup of lexicon definitions for display and prompts
"""

import re

_ENTITY_REPLACEMENTS = (
    ("&#8212-", "—"),
    ("&#8212", "—"),
    ("&quot-", '"'),
    ("&quot;", '"'),
    ("&#39;", "'"),
)


def clean_definition(text: str | None, max_length: int | None = None) -> str:
    """
    Replace HTML entities, drop stray `null` tokens and collapse whitespace.

    Args:
        text: Raw definition text
        max_length: Optional hard cut applied after cleanup

    Returns:
        str: Cleaned text ("" for empty input)
    """
    if not text:
        return ""
    for entity, replacement in _ENTITY_REPLACEMENTS:
        text = text.replace(entity, replacement)
    text = text.replace("null", "")
    text = re.sub(r"\s+", " ", text).strip()
    if max_length is not None:
        text = text[:max_length]
    return text
