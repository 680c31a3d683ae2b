"""AI services for explaining cipher operations."""

from cipherbench.services.ai.gemini_client import GeminiClient

__all__ = ["GeminiClient"]
