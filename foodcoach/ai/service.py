"""Public AI operations: chat, lab analysis and recipe generation.

Each call selects a provider afresh and hands the whole request to that one
adapter. Nothing retries and nothing falls back to another backend.
"""
import logging
from typing import Any, Dict, List, Optional, Sequence, Type, Union

from foodcoach.ai.anthropic_provider import AnthropicProvider
from foodcoach.ai.gemini_provider import GeminiProvider
from foodcoach.ai.openai_provider import OpenAIProvider
from foodcoach.ai.providers import PROVIDER_ORDER, AIProvider, ProviderContext, require_provider
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.domain.LabResult import LabResult
from foodcoach.domain.Recipe import Recipe
from foodcoach.logic.planning.week_plan import build_week_plan

logger = logging.getLogger(__name__)

ADAPTERS: Dict[str, Type[AIProvider]] = {
    "openai": OpenAIProvider,
    "anthropic": AnthropicProvider,
    "gemini": GeminiProvider,
}

if set(ADAPTERS) != set(PROVIDER_ORDER):
    raise RuntimeError(f"Adapter table {sorted(ADAPTERS)} does not cover providers {list(PROVIDER_ORDER)}")

_default_context = ProviderContext()


def get_default_context() -> ProviderContext:
    return _default_context


def resolve_provider(context: Optional[ProviderContext] = None) -> AIProvider:
    """Pick the adapter for this call; ConfigurationError when no credential is set."""
    context = context or _default_context
    name = require_provider(context.env)
    logger.info("Using AI provider: %s", name)
    return ADAPTERS[name](context)


def _as_turn(turn: Union[ChatTurn, Dict[str, Any]]) -> ChatTurn:
    return turn if isinstance(turn, ChatTurn) else ChatTurn.from_dict(turn)


def generate_chat_response(turns: Sequence[Union[ChatTurn, Dict[str, Any]]],
                           context: Optional[ProviderContext] = None) -> str:
    provider = resolve_provider(context)
    return provider.chat([_as_turn(t) for t in turns])


def analyze_lab_results(text: str, context: Optional[ProviderContext] = None) -> LabResult:
    provider = resolve_provider(context)
    return provider.analyze_lab_results(text)


def get_personalized_recipes(lab_result: LabResult, context: Optional[ProviderContext] = None) -> List[Recipe]:
    provider = resolve_provider(context)
    return provider.get_personalized_recipes(lab_result)


__all__ = [
    "generate_chat_response",
    "analyze_lab_results",
    "get_personalized_recipes",
    "build_week_plan",
    "resolve_provider",
    "get_default_context",
    "ADAPTERS",
]
