"""
Strong's translation CRUD operations.

Adds upsert-by-strongs_id on top of BaseCRUD. The insert construct is
picked per dialect so the same code runs on PostgreSQL and SQLite.

Dependencies: sqlalchemy, bible_portal.boundary.db.models
System role: Lexicon persistence operations
"""

from datetime import datetime, timezone
from typing import Any, Iterable

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from bible_portal.boundary.db.CRUD.base_crud import BaseCRUD
from bible_portal.boundary.db.models.strongs_translation_model import StrongsTranslationModel

UPSERT_COLUMNS = (
    "portuguese_word",
    "portuguese_definition",
    "portuguese_usage",
    "original_word",
    "transliteration",
    "part_of_speech",
)

_INSERT_BY_DIALECT = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


def collapse_duplicate_ids(records: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Keep one record per strongs_id, the later one winning.

    A single ON CONFLICT statement cannot touch the same row twice.
    """
    by_id: dict[str, dict[str, Any]] = {}
    for record in records:
        by_id.pop(record["strongs_id"], None)
        by_id[record["strongs_id"]] = record
    return list(by_id.values())


class StrongsCRUD(BaseCRUD[StrongsTranslationModel]):
    """CRUD operations for StrongsTranslationModel."""

    def __init__(self) -> None:
        """Initialize StrongsCRUD with StrongsTranslationModel."""
        super().__init__(StrongsTranslationModel, key_column="strongs_id")

    async def upsert_many(
        self,
        session: AsyncSession,
        records: list[dict[str, Any]],
    ) -> int:
        """
        Insert or update rows keyed on strongs_id.

        Does not commit; the caller owns the transaction.

        Args:
            session: Async database session
            records: Column dicts, each with a strongs_id

        Returns:
            int: Number of distinct rows written
        """
        rows = collapse_duplicate_ids(records)
        if not rows:
            return 0

        dialect = session.get_bind().dialect.name
        insert = _INSERT_BY_DIALECT.get(dialect)
        if insert is None:
            raise NotImplementedError(f"Upsert not supported for dialect: {dialect}")

        now = datetime.now(timezone.utc)
        values = [{**row, "created_at": now, "updated_at": now} for row in rows]
        stmt = insert(StrongsTranslationModel).values(values)
        update_columns = [column for column in UPSERT_COLUMNS if column in rows[0]]
        stmt = stmt.on_conflict_do_update(
            index_elements=[StrongsTranslationModel.strongs_id],
            set_={
                **{column: stmt.excluded[column] for column in update_columns},
                "updated_at": now,
            },
        )
        await session.execute(stmt)
        return len(rows)


strongs_crud = StrongsCRUD()
