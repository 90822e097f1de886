"""LabResult domain entity: one analyzed report (id, date, ordered markers)."""
from datetime import date as _date
from typing import Any, Dict, List, Tuple
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from foodcoach.domain.LabMarker import LabMarker


def _new_lab_id() -> str:
    return f"lab_{uuid4().hex[:8]}"


def _today() -> str:
    return _date.today().isoformat()


class LabResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_lab_id)
    date: str = Field(default_factory=_today)
    markers: Tuple[LabMarker, ...] = ()

    @field_validator("id", mode="before")
    @classmethod
    def default_id(cls, v):
        if v is None or not str(v).strip():
            return _new_lab_id()
        return str(v).strip()

    @field_validator("date", mode="before")
    @classmethod
    def default_date(cls, v):
        if v is None or not str(v).strip():
            return _today()
        return str(v).strip()

    @field_validator("markers", mode="before")
    @classmethod
    def markers_or_empty(cls, v):
        return () if v is None else v

    def markers_with_status(self, status: str) -> List[LabMarker]:
        return [m for m in self.markers if m.status == status]

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "LabResult":
        return LabResult.model_validate(data)

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)
