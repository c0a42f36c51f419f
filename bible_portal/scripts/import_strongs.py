"""
Strong's dictionary bulk import.

Usage:
    python -m bible_portal.scripts.import_strongs dictionary.md
    python -m bible_portal.scripts.import_strongs dictionary.md --batch-size 200

Parses the extracted dictionary text and upserts every entry into
strongs_translations using the configured database.

Dependencies: sqlalchemy, bible_portal.application.services
System role: Command-line trigger for lexicon import
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from bible_portal.application.services import ImportResult, StrongsImportService
from bible_portal.boundary.db.connection import get_async_session_factory
from bible_portal.configs import get_settings
from bible_portal.core.exceptions import BiblePortalException
from bible_portal.observability.logger import configure_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="import_strongs",
        description="Import a Strong's dictionary text file into the database.",
    )
    parser.add_argument("path", type=Path, help="UTF-8 text extracted from the dictionary")
    parser.add_argument(
        "--batch-size",
        type=int,
        default=None,
        help="Rows per upsert statement (defaults to LEXICON_IMPORT_BATCH_SIZE)",
    )
    return parser


async def run_import(path: Path, batch_size: int) -> ImportResult:
    """
    Import one dictionary file.

    Args:
        path: Dictionary text file
        batch_size: Rows per upsert statement

    Returns:
        ImportResult: Counts and per-batch errors
    """
    text = path.read_text(encoding="utf-8")
    SessionFactory = get_async_session_factory()
    async with SessionFactory() as db:
        service = StrongsImportService(db=db, batch_size=batch_size)
        return await service.import_text(text)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    if not args.path.is_file():
        logger.error("Dictionary file not found", extra={"path": str(args.path)})
        return 1

    batch_size = args.batch_size or settings.lexicon.import_batch_size
    try:
        result = asyncio.run(run_import(args.path, batch_size))
    except BiblePortalException as e:
        logger.error("Import failed", extra={"error": str(e)})
        return 1

    print(f"Imported {result.imported} of {result.total} entries")
    for error in result.errors:
        print(f"  {error}")
    for entry in result.sample:
        print(f"  {entry.strongs_id}  {entry.original_word}  {entry.definition[:60]}")
    return 0 if not result.errors else 2


if __name__ == "__main__":
    sys.exit(main())
