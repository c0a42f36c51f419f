"""FastAPI dependency providers."""

from bible_portal.api.deps.dependencies import (
    ServiceCache,
    get_bible_chat_service,
    get_gateway_client,
    get_lexicon_cache,
    get_service_cache,
    get_settings_dependency,
    get_strongs_import_service,
    get_strongs_translation_service,
)

__all__ = [
    "ServiceCache",
    "get_bible_chat_service",
    "get_gateway_client",
    "get_lexicon_cache",
    "get_service_cache",
    "get_settings_dependency",
    "get_strongs_import_service",
    "get_strongs_translation_service",
]
