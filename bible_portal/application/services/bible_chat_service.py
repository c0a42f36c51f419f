"""
Bible chat relay service.

Builds the theological-assistant system prompt, forwards the conversation to
the AI gateway with streaming enabled and hands the open SSE response back to
the router untouched.

Dependencies: httpx, bible_portal.boundary.ai_gateway
System role: Server side of the Bible study chat
"""

import logging

import httpx

from bible_portal.boundary.ai_gateway import AIGatewayClient
from bible_portal.core.exceptions import (
    GatewayConfigurationError,
    GatewayError,
    GatewayQuotaError,
    GatewayRateLimitError,
)
from bible_portal.models.chat import BibleChatRequest

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Limite de requisições excedido. Tente novamente em alguns segundos."
QUOTA_MESSAGE = "Créditos insuficientes. Adicione créditos à sua conta."
GENERIC_FAILURE_MESSAGE = "Erro ao processar sua pergunta."

SYSTEM_PROMPT_TEMPLATE = """Você é um assistente teológico especializado em estudos bíblicos. Você ajuda alunos de teologia a:
- Entender passagens bíblicas em profundidade
- Explorar contexto histórico e cultural
- Analisar palavras-chave no hebraico e grego originais
- Fazer conexões entre diferentes partes da Bíblia
- Aplicar ensinamentos à vida prática

{verse_section}

Seja didático, use linguagem acessível mas academicamente precisa. Cite referências bíblicas quando relevante. Responda em português brasileiro."""


def build_system_prompt(verse_context: str | None = None) -> str:
    """
    Render the assistant system prompt.

    Args:
        verse_context: Passage the student is studying, if any

    Returns:
        str: System prompt text
    """
    verse_section = ""
    if verse_context:
        verse_section = f"\nContexto atual - O aluno está estudando:\n{verse_context}"
    return SYSTEM_PROMPT_TEMPLATE.format(verse_section=verse_section)


def relay_error_for(error: GatewayError) -> tuple[int, str]:
    """
    Map a gateway failure to the relay's (status, user message) pair.

    Args:
        error: Failure raised while opening the upstream stream

    Returns:
        tuple: HTTP status and message for the `{error}` body
    """
    if isinstance(error, GatewayRateLimitError):
        return 429, RATE_LIMIT_MESSAGE
    if isinstance(error, GatewayQuotaError):
        return 402, QUOTA_MESSAGE
    if isinstance(error, GatewayConfigurationError):
        return 500, error.message
    return 500, GENERIC_FAILURE_MESSAGE


class BibleChatService:
    """Relays study-chat conversations to the AI gateway."""

    def __init__(self, gateway: AIGatewayClient) -> None:
        """
        Initialize chat relay.

        Args:
            gateway: Shared gateway client
        """
        self.gateway = gateway

    async def open_stream(self, request: BibleChatRequest) -> httpx.Response:
        """
        Open the upstream completion stream for a chat request.

        Args:
            request: Conversation and optional verse context

        Returns:
            httpx.Response: Open upstream response; the caller closes it

        Raises:
            GatewayError: If the gateway rejects or cannot serve the call
        """
        logger.info(
            "Bible chat request received",
            extra={
                "message_count": len(request.messages),
                "has_verse_context": bool(request.verse_context),
            },
        )
        messages = [{"role": "system", "content": build_system_prompt(request.verse_context)}]
        messages.extend(turn.to_payload() for turn in request.messages)
        return await self.gateway.open_chat_stream(messages)
