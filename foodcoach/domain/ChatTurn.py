"""ChatTurn domain entity: one message of a conversation with the coach."""
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, field_validator

ChatRole = Literal["user", "assistant"]


class ChatTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: ChatRole
    text: str

    @field_validator("role", mode="before")
    @classmethod
    def normalize_role(cls, v):
        if isinstance(v, str):
            v = v.strip().lower()
            # Gemini-style history names the assistant "model"
            if v == "model":
                return "assistant"
        return v

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ChatTurn":
        return ChatTurn.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump()
