"""Provider selection, client context and the adapter base class.

Exactly one backend handles a call. It is chosen from the configured
credentials in a fixed order (OpenAI, then Anthropic, then Gemini), and the
choice is re-made on every call.
"""
import json
import logging
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional, Sequence, Tuple

from foodcoach.ai.errors import ChatGenerationError, ConfigurationError
from foodcoach.ai.normalize import lab_result_from_text, recipes_from_text
from foodcoach.ai.schemas import LAB_RESULT_SCHEMA, RECIPES_SCHEMA
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.domain.LabResult import LabResult
from foodcoach.domain.Recipe import Recipe
from foodcoach.utilities.config import PROVIDER_CREDENTIALS, provider_keys
from foodcoach.utilities.constants import (
    ANALYZE_PROMPT_TEMPLATE,
    LAB_JSON_INSTRUCTION,
    RECIPES_JSON_INSTRUCTION,
    RECIPES_PER_REQUEST,
    RECIPES_PROMPT_TEMPLATE,
    SYSTEM_INSTRUCTION,
)

logger = logging.getLogger(__name__)

ProviderName = Literal["openai", "anthropic", "gemini"]
PROVIDER_ORDER: Tuple[str, ...] = tuple(p for p, _ in PROVIDER_CREDENTIALS)
PROVIDER_TITLES: Dict[str, str] = {"openai": "OpenAI", "anthropic": "Anthropic", "gemini": "Gemini"}


def select_provider(env: Optional[Mapping[str, str]] = None) -> Optional[ProviderName]:
    """Return the highest-priority provider with a non-blank credential, or None."""
    keys = provider_keys(env)
    for provider in PROVIDER_ORDER:
        if keys[provider]:
            return provider
    return None


def missing_provider_message() -> str:
    key_names = ", ".join(key for _, key in PROVIDER_CREDENTIALS)
    order = " -> ".join(PROVIDER_TITLES[p] for p in PROVIDER_ORDER)
    return f"No AI provider configured. Set one of {key_names} (priority order: {order})."


def require_provider(env: Optional[Mapping[str, str]] = None) -> ProviderName:
    provider = select_provider(env)
    if provider is None:
        raise ConfigurationError(missing_provider_message())
    return provider


class ProviderContext:
    """Holds at most one constructed client per backend.

    Clients are built on first use and reused afterwards. `client_factories`
    overrides how a backend's client is built (tests pass fakes here), and
    `env` replaces os.environ as the credential source.
    """

    def __init__(self, env: Optional[Mapping[str, str]] = None,
                 client_factories: Optional[Dict[str, Callable[[str], Any]]] = None):
        self.env = env
        self._factories = dict(client_factories or {})
        self._clients: Dict[str, Any] = {}

    def api_key(self, provider: str) -> str:
        return provider_keys(self.env)[provider]

    def get_client(self, provider: str, default_factory: Callable[[str], Any]) -> Any:
        client = self._clients.get(provider)
        if client is None:
            factory = self._factories.get(provider, default_factory)
            client = factory(self.api_key(provider))
            self._clients[provider] = client
            logger.debug("Constructed %s client", provider)
        return client

    def has_client(self, provider: str) -> bool:
        return provider in self._clients

    def reset(self) -> None:
        self._clients.clear()


class AIProvider:
    """One backend variant. Subclasses implement `create_client`, `_chat` and `_complete_json`."""

    name: str = ""

    def __init__(self, context: ProviderContext):
        self.context = context

    @property
    def client(self) -> Any:
        return self.context.get_client(self.name, self.create_client)

    def create_client(self, api_key: str) -> Any:
        raise NotImplementedError

    def _chat(self, turns: List[ChatTurn]) -> str:
        raise NotImplementedError

    def _complete_json(self, instruction: str, prompt: str, schema: Dict[str, Any]) -> str:
        """Send a structured-output request and return the raw response text."""
        raise NotImplementedError

    def chat(self, turns: Sequence[ChatTurn]) -> str:
        try:
            return self._chat(list(turns))
        except Exception as e:
            raise ChatGenerationError(f"Chat generation failed ({self.name})") from e

    def analyze_lab_results(self, text: str) -> LabResult:
        raw = self._complete_json(LAB_JSON_INSTRUCTION, ANALYZE_PROMPT_TEMPLATE.format(text=text), LAB_RESULT_SCHEMA)
        return lab_result_from_text(raw)

    def get_personalized_recipes(self, lab_result: LabResult) -> List[Recipe]:
        prompt = RECIPES_PROMPT_TEMPLATE.format(
            count=RECIPES_PER_REQUEST,
            lab_result=json.dumps(lab_result.to_dict(), ensure_ascii=False),
        )
        raw = self._complete_json(RECIPES_JSON_INSTRUCTION, prompt, RECIPES_SCHEMA)
        return recipes_from_text(raw)

    @staticmethod
    def system_with(instruction: str) -> str:
        return SYSTEM_INSTRUCTION + "\n\n" + instruction
