"""
API schemas (pydantic).

Exports request/response models for the chat relay and lexicon endpoints.
"""

from bible_portal.models.chat import BibleChatRequest
from bible_portal.models.common import ErrorResponse, RelayErrorResponse
from bible_portal.models.strongs import (
    BatchTranslateItem,
    BatchTranslateRequest,
    BatchTranslateResponse,
    LexiconEntrySample,
    LexiconLookupResponse,
    SourceLexiconEntry,
    StrongsImportRequest,
    StrongsImportResponse,
    StrongsTranslationResponse,
    TranslateRequest,
    TranslateResponse,
    TranslationRecord,
)

__all__ = [
    "BibleChatRequest",
    "ErrorResponse",
    "RelayErrorResponse",
    "BatchTranslateItem",
    "BatchTranslateRequest",
    "BatchTranslateResponse",
    "LexiconEntrySample",
    "LexiconLookupResponse",
    "SourceLexiconEntry",
    "StrongsImportRequest",
    "StrongsImportResponse",
    "StrongsTranslationResponse",
    "TranslateRequest",
    "TranslateResponse",
    "TranslationRecord",
]
