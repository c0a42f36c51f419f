"""
Bible chat relay endpoint.

Routes: POST /bible-chat

The upstream SSE body is passed through as-is; errors use the `{error}` body
that the streaming chat client reads.

Dependencies: fastapi, starlette, bible_portal.application.services
System role: Streaming chat HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, StreamingResponse
from starlette.background import BackgroundTask

from bible_portal.api.deps import get_bible_chat_service
from bible_portal.application.services import BibleChatService
from bible_portal.application.services.bible_chat_service import relay_error_for
from bible_portal.core.exceptions import GatewayError
from bible_portal.models.chat import BibleChatRequest
from bible_portal.models.common import RelayErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter(tags=["bible-chat"])


@router.post(
    "/bible-chat",
    response_class=StreamingResponse,
    responses={
        402: {"model": RelayErrorResponse},
        429: {"model": RelayErrorResponse},
        500: {"model": RelayErrorResponse},
    },
)
async def bible_chat(
    request: BibleChatRequest,
    service: BibleChatService = Depends(get_bible_chat_service),
):
    """
    Stream an assistant reply for the study chat.

    Args:
        request: Conversation and optional verse context
        service: Injected relay service

    Returns:
        StreamingResponse: `text/event-stream` body from the gateway
    """
    try:
        upstream = await service.open_stream(request)
    except GatewayError as e:
        status_code, message = relay_error_for(e)
        logger.error(
            "Bible chat relay failed",
            extra={"status_code": status_code, "upstream_status": e.status_code},
        )
        return JSONResponse(
            status_code=status_code,
            content=RelayErrorResponse(error=message).model_dump(),
        )

    return StreamingResponse(
        upstream.aiter_bytes(),
        media_type="text/event-stream",
        background=BackgroundTask(upstream.aclose),
    )
