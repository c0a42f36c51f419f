"""API routers."""

from .bible_chat import router as bible_chat_router
from .health import router as health_router
from .strongs import router as strongs_router

__all__ = [
    "bible_chat_router",
    "health_router",
    "strongs_router",
]
