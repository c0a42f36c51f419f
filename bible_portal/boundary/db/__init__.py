"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - StrongsTranslationModel: Lexicon translation rows
  - strongs_crud: CRUD singleton with upsert

Dependencies: sqlalchemy, bible_portal.configs
System role: Database adapter for lexicon persistence
"""

from bible_portal.boundary.db.base import Base, TimestampMixin
from bible_portal.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from bible_portal.boundary.db.models import StrongsTranslationModel
from bible_portal.boundary.db.CRUD import BaseCRUD, StrongsCRUD, strongs_crud

__all__ = [
    "Base",
    "TimestampMixin",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "StrongsTranslationModel",
    "BaseCRUD",
    "StrongsCRUD",
    "strongs_crud",
]
