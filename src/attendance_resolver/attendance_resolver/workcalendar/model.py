from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class Holiday:
    """Ngày nghỉ lễ toàn công ty."""

    date: Optional[Any]
    name: str = "Holiday"
    is_tentative: bool = False
    holiday_id: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "Holiday":
        holiday_id = data.get("_id", data.get("id"))
        return cls(
            date=data.get("date"),
            name=data.get("name") or "Holiday",
            is_tentative=bool(data.get("isTentative", False)),
            holiday_id=str(holiday_id) if holiday_id is not None else None,
        )
