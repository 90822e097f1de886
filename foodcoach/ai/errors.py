"""Errors raised by the AI provider layer.

Transport errors from the SDKs (openai, httpx, google-genai) are not wrapped,
except for chat, where every failure surfaces as ChatGenerationError.
"""
from typing import Optional


class AIServiceError(Exception):
    """Base class for provider-layer failures."""


class ConfigurationError(AIServiceError):
    """No provider credential is configured."""


class ChatGenerationError(AIServiceError):
    """A chat reply could not be produced."""


class ResponseParseError(AIServiceError, ValueError):
    """Model output held no decodable JSON, or JSON of the wrong shape."""

    def __init__(self, message: str, raw: Optional[str] = None):
        super().__init__(message)
        self.raw = raw
