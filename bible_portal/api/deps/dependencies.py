"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: bible_portal.configs, bible_portal.application, bible_portal.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from bible_portal.application.services import (
    BibleChatService,
    StrongsImportService,
    StrongsTranslationService,
)
from bible_portal.boundary.ai_gateway import AIGatewayClient
from bible_portal.boundary.db import get_async_db
from bible_portal.boundary.lexicon_store import StrongsLexiconCache
from bible_portal.configs import Settings, get_settings


class ServiceCache:
    """Container for process-wide client instances."""

    def __init__(self):
        self._gateway_client = None
        self._lexicon_cache = None

    @property
    def gateway_client(self) -> AIGatewayClient:
        """Get cached AI gateway client."""
        if self._gateway_client is None:
            self._gateway_client = AIGatewayClient(get_settings().ai_gateway)
        return self._gateway_client

    @property
    def lexicon_cache(self) -> StrongsLexiconCache:
        """Get cached lexicon store (loaded on first lookup)."""
        if self._lexicon_cache is None:
            self._lexicon_cache = StrongsLexiconCache(get_settings().lexicon.lexicon_path)
        return self._lexicon_cache

    async def aclose(self) -> None:
        """Close open clients and clear all cached instances."""
        if self._gateway_client is not None:
            await self._gateway_client.aclose()
        self._gateway_client = None
        self._lexicon_cache = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_gateway_client(
    cache: ServiceCache = Depends(get_service_cache),
) -> AIGatewayClient:
    return cache.gateway_client


def get_lexicon_cache(
    cache: ServiceCache = Depends(get_service_cache),
) -> StrongsLexiconCache:
    return cache.lexicon_cache


def get_bible_chat_service(
    gateway: AIGatewayClient = Depends(get_gateway_client),
) -> BibleChatService:
    """
    Get chat relay service instance.

    Args:
        gateway: Shared gateway client (injected via Depends)

    Returns:
        BibleChatService: Service instance
    """
    return BibleChatService(gateway=gateway)


def get_strongs_import_service(
    db: AsyncSession = Depends(get_async_db),
    settings: Settings = Depends(get_settings_dependency),
) -> StrongsImportService:
    """
    Get lexicon import service instance.

    Args:
        db: Async database session (injected via Depends)
        settings: Application settings

    Returns:
        StrongsImportService: Service instance with database session
    """
    return StrongsImportService(db=db, batch_size=settings.lexicon.import_batch_size)


def get_strongs_translation_service(
    db: AsyncSession = Depends(get_async_db),
    gateway: AIGatewayClient = Depends(get_gateway_client),
    settings: Settings = Depends(get_settings_dependency),
) -> StrongsTranslationService:
    """
    Get lexicon translation service instance.

    Args:
        db: Async database session (injected via Depends)
        gateway: Shared gateway client
        settings: Application settings

    Returns:
        StrongsTranslationService: Service instance
    """
    return StrongsTranslationService(
        gateway=gateway,
        db=db,
        batch_size=settings.lexicon.translation_batch_size,
        temperature=settings.ai_gateway.translation_temperature,
        chunk_delay_seconds=settings.lexicon.translation_chunk_delay_seconds,
        rate_limit_backoff_seconds=settings.lexicon.rate_limit_backoff_seconds,
    )
