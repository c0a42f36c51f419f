"""
AI gateway configuration settings.

Credentials and model selection for the OpenAI-compatible chat-completion
gateway used by the study chat relay and the lexicon translator.

Dependencies: pydantic_settings
System role: LLM gateway configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from bible_portal.configs.base import BaseSettings


class AIGatewaySettings(BaseSettings):
    """Chat-completion gateway configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AI_GATEWAY_",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Bearer token for the gateway; required at call time",
    )
    base_url: str = Field(
        default="https://ai.gateway.lovable.dev/v1",
        description="Gateway base URL (the /chat/completions path is appended)",
    )
    model: str = Field(
        default="google/gemini-2.5-flash",
        description="Model identifier forwarded to the gateway",
    )
    timeout_seconds: float = Field(
        default=120.0,
        gt=0,
        description="HTTP timeout for gateway calls",
    )
    translation_temperature: float = Field(
        default=0.3,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for batch lexicon translation",
    )

    @property
    def is_configured(self) -> bool:
        """Whether an API key is available."""
        return bool(self.api_key)
