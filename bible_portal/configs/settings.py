"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from bible_portal.configs.ai_gateway import AIGatewaySettings
from bible_portal.configs.base import BaseSettings
from bible_portal.configs.chat_stream import ChatStreamSettings
from bible_portal.configs.database import DatabaseSettings
from bible_portal.configs.lexicon import LexiconSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    database: DatabaseSettings = DatabaseSettings()
    ai_gateway: AIGatewaySettings = AIGatewaySettings()
    lexicon: LexiconSettings = LexiconSettings()
    chat_stream: ChatStreamSettings = ChatStreamSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from bible_portal.configs import get_settings
        settings = get_settings()
    """
    return Settings()
