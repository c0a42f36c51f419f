"""Service orchestrators."""

from .bible_chat_service import BibleChatService
from .strongs_import_service import ImportResult, StrongsImportService
from .strongs_translation_service import StrongsTranslationService

__all__ = [
    "BibleChatService",
    "ImportResult",
    "StrongsImportService",
    "StrongsTranslationService",
]
