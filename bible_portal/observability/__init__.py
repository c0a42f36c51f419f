"""
Observability module.

Provides logging configuration, request middleware and
correlation ID tracking.
"""

from bible_portal.observability.correlation import get_correlation_id, set_correlation_id
from bible_portal.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
