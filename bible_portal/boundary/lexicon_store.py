"""
Read-through cache over the Strong's lexicon JSON file.

The file is loaded on first lookup and kept for the life of the process;
it is never invalidated. Concurrent first lookups share one load.

Dependencies: asyncio, json (stdlib), bible_portal.core.lexicon
System role: Shared read-only lexicon resource for lookup endpoints
"""

import asyncio
import json
import logging
import re
from pathlib import Path
from typing import Any

from bible_portal.core.exceptions import LexiconImportError, LexiconNotFoundError
from bible_portal.core.lexicon import clean_definition

logger = logging.getLogger(__name__)

_STRONGS_ID = re.compile(r"^([HG])0*(\d+)$", re.IGNORECASE)


def normalize_strongs_id(strongs_id: str) -> str:
    """
    Canonical unpadded form of a Strong's ID.

    `H0001`, `h1` and `H1` all normalize to `H1`. Values that do not look
    like a Strong's ID are returned stripped and upper-cased.
    """
    value = strongs_id.strip().upper()
    match = _STRONGS_ID.match(value)
    if match is None:
        return value
    return f"{match.group(1)}{int(match.group(2))}"


class StrongsLexiconCache:
    """
    Load-once lexicon keyed by normalized Strong's ID.

    Attributes:
        path: Lexicon JSON file (object keyed by ID, entry dicts as values)
    """

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        self._entries: dict[str, dict[str, Any]] | None = None
        self._lock = asyncio.Lock()

    @property
    def is_loaded(self) -> bool:
        return self._entries is not None

    async def _ensure_loaded(self) -> dict[str, dict[str, Any]]:
        if self._entries is not None:
            return self._entries
        async with self._lock:
            if self._entries is None:
                self._entries = await asyncio.to_thread(self._read_file)
        return self._entries

    def _read_file(self) -> dict[str, dict[str, Any]]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise LexiconImportError(
                "Failed to load lexicon file",
                {"path": str(self.path), "error": str(e)},
            ) from e
        if not isinstance(raw, dict):
            raise LexiconImportError("Lexicon file must hold a JSON object", {"path": str(self.path)})

        entries = {
            normalize_strongs_id(key): value
            for key, value in raw.items()
            if isinstance(value, dict)
        }
        logger.info(
            "Lexicon loaded",
            extra={"path": str(self.path), "entry_count": len(entries)},
        )
        return entries

    async def get(self, strongs_id: str) -> dict[str, Any]:
        """
        Look up one entry, with definition fields cleaned.

        Args:
            strongs_id: Padded or unpadded ID (e.g. "H0001" or "H1")

        Returns:
            dict: Entry fields plus `strongs_id` (normalized)

        Raises:
            LexiconNotFoundError: If the ID is absent
            LexiconImportError: If the lexicon file cannot be read
        """
        entries = await self._ensure_loaded()
        key = normalize_strongs_id(strongs_id)
        entry = entries.get(key)
        if entry is None:
            raise LexiconNotFoundError(strongs_id)

        return {
            **entry,
            "strongs_id": key,
            "strongs_def": clean_definition(entry.get("strongs_def")),
            "outline_usage": clean_definition(entry.get("outline_usage")),
        }
