"""Anthropic backend, spoken to over the Messages REST endpoint with httpx."""
from typing import Any, Dict, List

import httpx

from foodcoach.ai.providers import AIProvider
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.utilities.config import (
    AI_MAX_TOKENS,
    AI_TIMEOUT_SECONDS,
    ANTHROPIC_API_BASE,
    ANTHROPIC_API_VERSION,
    ANTHROPIC_MODEL,
)
from foodcoach.utilities.constants import SYSTEM_INSTRUCTION

# The Messages API rejects an empty conversation
EMPTY_HISTORY = [{"role": "user", "content": "Hello"}]


def coerce_text(response_json: Dict[str, Any]) -> str:
    """Join the text blocks of a Messages API response."""
    content = response_json.get("content")
    if not isinstance(content, list):
        raise ValueError("Anthropic response has no content blocks")
    parts = []
    for block in content:
        if isinstance(block, dict) and block.get("type") == "text" and isinstance(block.get("text"), str):
            parts.append(block["text"])
    return "\n".join(parts).strip()


class AnthropicProvider(AIProvider):
    name = "anthropic"

    def create_client(self, api_key: str) -> httpx.Client:
        return httpx.Client(
            base_url=ANTHROPIC_API_BASE,
            headers={
                "x-api-key": api_key,
                "anthropic-version": ANTHROPIC_API_VERSION,
                "Content-Type": "application/json",
            },
            timeout=httpx.Timeout(AI_TIMEOUT_SECONDS, connect=10.0),
        )

    def _create_message(self, system: str, messages: List[Dict[str, str]]) -> str:
        payload = {
            "model": ANTHROPIC_MODEL,
            "max_tokens": AI_MAX_TOKENS,
            "system": system,
            "messages": messages or EMPTY_HISTORY,
        }
        response = self.client.post("/messages", json=payload)
        response.raise_for_status()
        return coerce_text(response.json())

    def _chat(self, turns: List[ChatTurn]) -> str:
        return self._create_message(SYSTEM_INSTRUCTION, [{"role": t.role, "content": t.text} for t in turns])

    def _complete_json(self, instruction: str, prompt: str, schema: Dict[str, Any]) -> str:
        # No schema support here; the shape is spelled out in the system instruction
        return self._create_message(self.system_with(instruction), [{"role": "user", "content": prompt}])
