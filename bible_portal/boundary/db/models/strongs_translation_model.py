"""
Strong's translation ORM model.

One row per Strong's ID holding the Portuguese rendering of a lexicon entry.
Rows are written by upsert keyed on strongs_id.

Dependencies: sqlalchemy, bible_portal.boundary.db.base
System role: Lexicon persistence
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from bible_portal.boundary.db.base import Base, TimestampMixin


class StrongsTranslationModel(Base, TimestampMixin):
    """
    Strong's translation ORM model.

    Attributes:
        strongs_id: Prefixed, zero-padded Strong's ID (primary key)
        portuguese_word: Display word (transliteration or headword)
        portuguese_definition: Definition text (500 char limit from parser)
        portuguese_usage: Usage text
        original_word: Hebrew/Greek headword
        transliteration: Latin-script transliteration
        part_of_speech: Part-of-speech abbreviation
    """

    __tablename__ = "strongs_translations"

    strongs_id: Mapped[str] = mapped_column(String(16), primary_key=True)

    portuguese_word: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        default="",
        doc="Display word",
    )
    portuguese_definition: Mapped[str] = mapped_column(
        String(1000),
        nullable=False,
        doc="Definition text",
    )
    portuguese_usage: Mapped[str | None] = mapped_column(
        String(1000),
        nullable=True,
        default=None,
        doc="Usage text",
    )
    original_word: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    transliteration: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    part_of_speech: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
