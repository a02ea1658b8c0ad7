from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..core.constants import HALF_DAY_LEAVE_MARKERS


@dataclass(frozen=True)
class LeaveRequest:
    """Đơn nghỉ phép: danh sách ngày nghỉ rời rạc, không phải khoảng ngày."""

    status: Optional[str]
    leave_dates: tuple = ()
    leave_type: Optional[str] = None
    request_type: Optional[str] = None
    reason: Optional[str] = None
    request_id: Optional[str] = None

    @property
    def is_half_day(self) -> bool:
        # Source data is case-sensitive here: "Half Day - First Half", "Half-day".
        return bool(self.leave_type) and any(m in self.leave_type for m in HALF_DAY_LEAVE_MARKERS)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "LeaveRequest":
        raw_dates = data.get("leaveDates")
        request_id = data.get("_id", data.get("id"))
        return cls(
            status=data.get("status"),
            leave_dates=tuple(raw_dates) if isinstance(raw_dates, (list, tuple)) else (),
            leave_type=data.get("leaveType"),
            request_type=data.get("requestType"),
            reason=data.get("reason"),
            request_id=str(request_id) if request_id is not None else None,
        )


@dataclass(frozen=True)
class LeaveMatch:
    leave: LeaveRequest
    is_half_day: bool
