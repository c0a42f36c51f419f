"""
CRUD operations for database models.

Usage:
    from bible_portal.boundary.db.CRUD import strongs_crud

    row = await strongs_crud.get_by_id(db, "H0001")
"""

from bible_portal.boundary.db.CRUD.base_crud import BaseCRUD
from bible_portal.boundary.db.CRUD.strongs_crud import StrongsCRUD, strongs_crud

__all__ = [
    "BaseCRUD",
    "StrongsCRUD",
    "strongs_crud",
]
