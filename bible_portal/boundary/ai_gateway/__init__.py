"""
AI gateway boundary.

Exports:
  - AIGatewayClient: Streaming and non-streaming chat completions
"""

from bible_portal.boundary.ai_gateway.gateway_client import AIGatewayClient

__all__ = ["AIGatewayClient"]
