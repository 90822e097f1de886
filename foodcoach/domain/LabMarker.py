"""LabMarker domain entity: one biomarker reading classified as low, normal or high."""
import re
from typing import Any, Dict, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

MarkerStatus = Literal["low", "normal", "high"]
MARKER_STATUSES = ("low", "normal", "high")
_LEADING_NUMBER = re.compile(r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)")

# Wordings models commonly use instead of the three canonical statuses
_STATUS_SYNONYMS = {
    "elevated": "high",
    "borderline high": "high",
    "above range": "high",
    "pre-diabetic": "high",
    "prediabetic": "high",
    "deficient": "low",
    "insufficient": "low",
    "normal-low": "low",
    "low-normal": "low",
    "borderline low": "low",
    "below range": "low",
    "optimal": "normal",
    "within range": "normal",
    "in range": "normal",
}


def normalize_status(value: Any) -> str:
    """Fold a free-form status into low/normal/high; raise ValueError otherwise."""
    if not isinstance(value, str):
        raise ValueError(f"Marker status must be a string, got {value!r}")
    s = " ".join(value.strip().lower().replace("_", " ").split())
    if s in MARKER_STATUSES:
        return s
    if s in _STATUS_SYNONYMS:
        return _STATUS_SYNONYMS[s]
    raise ValueError(f"Unknown marker status: {value!r}")


class LabMarker(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    value: float
    unit: str = ""
    status: MarkerStatus
    optimal_range: str = Field("", alias="optimalRange")
    description: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("value", mode="before")
    @classmethod
    def numeric_value(cls, v):
        """Read "5.8%", "< 0.5" or "1,200 /uL" as their first number."""
        if isinstance(v, str):
            m = _LEADING_NUMBER.search(v.replace(",", ""))
            if m:
                return float(m.group())
        return v

    @field_validator("unit", "optimal_range", "description", mode="before")
    @classmethod
    def text_or_empty(cls, v):
        return "" if v is None else str(v).strip()

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v):
        return normalize_status(v)

    @property
    def is_normal(self) -> bool:
        return self.status == "normal"

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LabMarker":
        return LabMarker.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
