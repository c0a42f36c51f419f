"""
Strong's dictionary import service.

Parses dictionary text and upserts the entries into strongs_translations in
fixed-size batches. A failing batch is rolled back and reported; later
batches still run.

Dependencies: sqlalchemy, bible_portal.core.lexicon, bible_portal.boundary.db
System role: Bulk lexicon import orchestration
"""

import logging
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from bible_portal.boundary.db.CRUD.strongs_crud import strongs_crud
from bible_portal.core.exceptions import NoEntriesParsedError
from bible_portal.core.lexicon import LexiconDictionaryParser, LexiconEntry

logger = logging.getLogger(__name__)

SAMPLE_SIZE = 5


@dataclass
class ImportResult:
    """
    Outcome of one import run.

    Attributes:
        imported: Rows written across successful batches
        total: Entries produced by the parser
        errors: One "Batch <offset>: <message>" line per failed batch
        sample: First parsed entries, for operator feedback
    """

    imported: int
    total: int
    errors: list[str] = field(default_factory=list)
    sample: list[LexiconEntry] = field(default_factory=list)


class StrongsImportService:
    """Imports parsed dictionary entries into the database."""

    def __init__(
        self,
        db: AsyncSession,
        batch_size: int = 100,
        parser: LexiconDictionaryParser | None = None,
    ) -> None:
        """
        Initialize import service.

        Args:
            db: AsyncSession for database operations
            batch_size: Entries per upsert statement
            parser: Dictionary parser (default rule table when omitted)
        """
        self.db = db
        self.batch_size = batch_size
        self.parser = parser or LexiconDictionaryParser()

    async def import_text(self, dictionary_text: str) -> ImportResult:
        """
        Parse dictionary text and upsert every entry.

        Args:
            dictionary_text: Full extracted dictionary text

        Returns:
            ImportResult: Counts, per-batch errors and a sample

        Raises:
            LexiconInputError: If dictionary_text is not a string
            NoEntriesParsedError: If the parser produced no entries
        """
        entries = self.parser.parse(dictionary_text)
        if not entries:
            raise NoEntriesParsedError(line_count=dictionary_text.count("\n") + 1)

        result = ImportResult(imported=0, total=len(entries), sample=entries[:SAMPLE_SIZE])

        for offset in range(0, len(entries), self.batch_size):
            batch = entries[offset:offset + self.batch_size]
            try:
                written = await strongs_crud.upsert_many(
                    self.db, [entry.to_record() for entry in batch]
                )
                await self.db.commit()
            except SQLAlchemyError as e:
                await self.db.rollback()
                logger.error(
                    "Lexicon import batch failed",
                    extra={"offset": offset, "batch_size": len(batch), "error": str(e)},
                )
                result.errors.append(f"Batch {offset}: {e}")
                continue
            result.imported += written

        logger.info(
            "Lexicon import finished",
            extra={
                "imported": result.imported,
                "total": result.total,
                "failed_batches": len(result.errors),
            },
        )
        return result
