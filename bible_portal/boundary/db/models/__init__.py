"""
Database models package.

Exports:
  - StrongsTranslationModel: Strong's translation ORM model
"""

from bible_portal.boundary.db.models.strongs_translation_model import StrongsTranslationModel

__all__ = ["StrongsTranslationModel"]
