"""
Lexicon configuration settings.

Paths and batching knobs for Strong's lexicon import, lookup and translation.

Dependencies: pydantic_settings
System role: Lexicon pipeline configuration
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bible_portal.configs.base import BaseSettings


class LexiconSettings(BaseSettings):
    """Strong's lexicon configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LEXICON_",
        case_sensitive=False,
        extra="ignore",
    )

    lexicon_path: Path = Field(
        default=Path("data/bible/strongs-lexicon.json"),
        description="JSON lexicon served by the read-through cache",
    )
    import_batch_size: int = Field(
        default=100,
        gt=0,
        description="Rows per upsert statement during dictionary import",
    )
    translation_batch_size: int = Field(
        default=10,
        gt=0,
        description="Entries per gateway prompt during batch translation",
    )
    translation_chunk_delay_seconds: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause between translation prompts",
    )
    rate_limit_backoff_seconds: float = Field(
        default=2.0,
        ge=0.0,
        description="Pause after the gateway reports a rate limit",
    )
