"""
Request body schemas for the HTTP API, using Pydantic.
"""
from typing import List

from pydantic import BaseModel, Field, field_validator

from foodcoach.domain.ChatTurn import ChatTurn
from foodcoach.domain.Recipe import Recipe


class ChatTurnInput(BaseModel):
    """One prior chat turn as sent by the client."""
    role: str = Field(..., pattern=r'^(user|assistant|model)$')
    text: str = Field(..., min_length=1, max_length=8000)

    @field_validator('role', 'text', mode='before')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v

    def to_turn(self) -> ChatTurn:
        return ChatTurn(role=self.role, text=self.text)


class ChatRequest(BaseModel):
    """Schema for a chat request: the full conversation so far."""
    messages: List[ChatTurnInput] = Field(..., min_length=1)

    @field_validator('messages')
    @classmethod
    def validate_last_turn(cls, v):
        """The coach answers the user, so the last turn must be theirs."""
        if v and v[-1].role != 'user':
            raise ValueError('Last message must come from the user')
        return v

    def turns(self) -> List[ChatTurn]:
        return [m.to_turn() for m in self.messages]


class AnalyzeRequest(BaseModel):
    """Schema for lab text analysis; empty text means the bundled sample report."""
    text: str = Field('', max_length=50000)

    @field_validator('text', mode='before')
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v


class WeekPlanRequest(BaseModel):
    """Schema for building a week plan from already generated recipes."""
    recipes: List[Recipe] = Field(default_factory=list)
