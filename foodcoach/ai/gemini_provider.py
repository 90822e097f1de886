from typing import Any, Dict, List

from google import genai
from google.genai import types

from foodcoach.ai.providers import AIProvider
from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.utilities.config import GEMINI_MODEL
from foodcoach.utilities.constants import SYSTEM_INSTRUCTION

_ROLES = {"user": "user", "assistant": "model"}


def to_gemini_contents(turns: List[ChatTurn]) -> List[types.Content]:
    if not turns:
        return [types.Content(role="user", parts=[types.Part(text="Hello")])]
    return [types.Content(role=_ROLES[t.role], parts=[types.Part(text=t.text)]) for t in turns]


class GeminiProvider(AIProvider):
    name = "gemini"

    def create_client(self, api_key: str) -> genai.Client:
        return genai.Client(api_key=api_key)

    def _chat(self, turns: List[ChatTurn]) -> str:
        response = self.client.models.generate_content(
            model=GEMINI_MODEL,
            contents=to_gemini_contents(turns),
            config=types.GenerateContentConfig(system_instruction=SYSTEM_INSTRUCTION),
        )
        return (response.text or "").strip()

    def _complete_json(self, instruction: str, prompt: str, schema: Dict[str, Any]) -> str:
        response = self.client.models.generate_content(
            model=GEMINI_MODEL,
            contents=f"{prompt}\n\n{instruction}",
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_INSTRUCTION,
                response_mime_type="application/json",
                response_schema=schema,
            ),
        )
        return response.text or ""
