from typing import Any, Dict, List

from openai import OpenAI

from foodcoach.ai.providers import AIProvider
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.utilities.config import AI_TIMEOUT_SECONDS, OPENAI_MODEL
from foodcoach.utilities.constants import SYSTEM_INSTRUCTION


def _message_text(completion: Any) -> str:
    choices = getattr(completion, "choices", None) or []
    if not choices:
        raise ValueError("OpenAI response contained no choices")
    return (choices[0].message.content or "").strip()


class OpenAIProvider(AIProvider):
    name = "openai"

    def create_client(self, api_key: str) -> OpenAI:
        return OpenAI(api_key=api_key, timeout=AI_TIMEOUT_SECONDS)

    def _chat(self, turns: List[ChatTurn]) -> str:
        messages = [{"role": "system", "content": SYSTEM_INSTRUCTION}]
        messages += [{"role": t.role, "content": t.text} for t in turns]
        completion = self.client.chat.completions.create(model=OPENAI_MODEL, messages=messages)
        return _message_text(completion)

    def _complete_json(self, instruction: str, prompt: str, schema: Dict[str, Any]) -> str:
        # JSON mode only guarantees an object, so recipe arrays come back wrapped
        completion = self.client.chat.completions.create(
            model=OPENAI_MODEL,
            messages=[
                {"role": "system", "content": self.system_with(instruction)},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )
        return _message_text(completion)
