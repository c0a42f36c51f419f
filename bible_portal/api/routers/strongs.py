"""
Strong's lexicon endpoints.

Routes:
    POST /strongs/import
    POST /strongs/translate
    POST /strongs/translate-batch
    GET  /strongs/lexicon/{strongs_id}
    GET  /strongs/{strongs_id}

Dependencies: fastapi, bible_portal.application.services, bible_portal.boundary
System role: Lexicon HTTP API
"""

from dataclasses import asdict

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bible_portal.api.deps import (
    get_lexicon_cache,
    get_strongs_import_service,
    get_strongs_translation_service,
)
from bible_portal.api.routers.router_utils import handle_service_errors
from bible_portal.application.services import StrongsImportService, StrongsTranslationService
from bible_portal.boundary.db import get_async_db, strongs_crud
from bible_portal.boundary.lexicon_store import StrongsLexiconCache
from bible_portal.core.exceptions import LexiconNotFoundError
from bible_portal.models.common import ErrorResponse
from bible_portal.models.strongs import (
    BatchTranslateRequest,
    BatchTranslateResponse,
    LexiconEntrySample,
    LexiconLookupResponse,
    StrongsImportRequest,
    StrongsImportResponse,
    StrongsTranslationResponse,
    TranslateRequest,
    TranslateResponse,
)

router = APIRouter(prefix="/strongs", tags=["strongs"])

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
    429: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/import", response_model=StrongsImportResponse, responses=_ERROR_RESPONSES)
@handle_service_errors
async def import_dictionary(
    request: StrongsImportRequest,
    service: StrongsImportService = Depends(get_strongs_import_service),
) -> StrongsImportResponse:
    """
    Parse dictionary text and upsert the entries.

    Args:
        request: Extracted dictionary text
        service: Injected import service

    Returns:
        StrongsImportResponse: Counts, per-batch errors and a sample
    """
    result = await service.import_text(request.dictionary_text)
    return StrongsImportResponse(
        imported=result.imported,
        total=result.total,
        errors=result.errors or None,
        sample=[LexiconEntrySample(**asdict(entry)) for entry in result.sample],
    )


@router.post("/translate", response_model=TranslateResponse, responses=_ERROR_RESPONSES)
@handle_service_errors
async def translate_definition(
    request: TranslateRequest,
    service: StrongsTranslationService = Depends(get_strongs_translation_service),
) -> TranslateResponse:
    """Translate one definition/usage pair to Portuguese."""
    translated = await service.translate_definition(request.definition, request.usage)
    return TranslateResponse(
        definition=translated.get("definition"),
        usage=translated.get("usage"),
    )


@router.post(
    "/translate-batch",
    response_model=BatchTranslateResponse,
    responses=_ERROR_RESPONSES,
)
@handle_service_errors
async def translate_batch(
    request: BatchTranslateRequest,
    service: StrongsTranslationService = Depends(get_strongs_translation_service),
) -> BatchTranslateResponse:
    """Translate lexicon entries in chunks and persist the results."""
    results = await service.translate_batch(request.entries, request.batch_size)
    return BatchTranslateResponse(
        translated=len(results),
        total_requested=len(request.entries),
        results=results,
    )


@router.get(
    "/lexicon/{strongs_id}",
    response_model=LexiconLookupResponse,
    responses=_ERROR_RESPONSES,
)
@handle_service_errors
async def get_lexicon_entry(
    strongs_id: str,
    lexicon: StrongsLexiconCache = Depends(get_lexicon_cache),
) -> LexiconLookupResponse:
    """Look up an English lexicon entry (padded or unpadded ID)."""
    entry = await lexicon.get(strongs_id)
    return LexiconLookupResponse(**entry)


@router.get(
    "/{strongs_id}",
    response_model=StrongsTranslationResponse,
    responses=_ERROR_RESPONSES,
)
@handle_service_errors
async def get_translation(
    strongs_id: str,
    db: AsyncSession = Depends(get_async_db),
) -> StrongsTranslationResponse:
    """Return the persisted Portuguese translation row."""
    row = await strongs_crud.get_by_id(db, strongs_id)
    if row is None:
        raise LexiconNotFoundError(strongs_id)
    return StrongsTranslationResponse.model_validate(row)
