"""Recipe domain entity: title, ingredients, steps, tags and marker-specific benefits."""
from typing import Any, Dict, Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _new_recipe_id() -> str:
    return f"recipe_{uuid4().hex[:8]}"


def _as_text(item: Any) -> str:
    # Some models send {"name": ..., "quantity": ...} instead of a plain string
    if isinstance(item, dict):
        return " ".join(str(v).strip() for v in item.values() if v not in (None, ""))
    return "" if item is None else str(item).strip()


class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(default_factory=_new_recipe_id)
    title: str = Field(..., min_length=1)
    description: str = ""
    ingredients: Tuple[str, ...] = ()
    instructions: Tuple[str, ...] = ()
    prep_time: str = Field("", alias="prepTime")
    tags: Tuple[str, ...] = ()
    image: str = ""
    benefits: Tuple[str, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def default_id(cls, v):
        if v is None or not str(v).strip():
            return _new_recipe_id()
        return str(v).strip()

    @field_validator("title", mode="before")
    @classmethod
    def strip_title(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("description", "prep_time", "image", mode="before")
    @classmethod
    def text_or_empty(cls, v):
        return _as_text(v)

    @field_validator("ingredients", "instructions", "benefits", mode="before")
    @classmethod
    def text_items(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            v = [v]
        return tuple(t for t in (_as_text(item) for item in v) if t)

    @field_validator("tags", mode="before")
    @classmethod
    def unique_tags(cls, v):
        """Tags behave as a set: blanks and repeats (case-insensitive) are dropped, first spelling kept."""
        if v is None:
            return ()
        if isinstance(v, str):
            v = v.split(",")
        seen = set()
        tags = []
        for item in v:
            tag = _as_text(item)
            if tag and tag.lower() not in seen:
                seen.add(tag.lower())
                tags.append(tag)
        return tuple(tags)

    def __str__(self) -> str:
        return f"{self.title} - {len(self.ingredients)} ingredients - Tags: {', '.join(self.tags)}"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "Recipe":
        return Recipe.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
