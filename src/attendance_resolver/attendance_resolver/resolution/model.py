from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Mapping, Optional

from ..attendance.model import AttendanceLog
from ..core.enums import DayStatus, SaturdayPolicy
from ..core.exceptions import InvariantViolationError
from ..leave.model import LeaveRequest
from ..workcalendar.model import Holiday


def _jsonable(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


@dataclass(frozen=True)
class HolidayInfo:
    name: str
    date: Any
    is_tentative: bool = False
    holiday_id: Optional[str] = None

    @classmethod
    def from_holiday(cls, holiday: Holiday) -> "HolidayInfo":
        return cls(
            name=holiday.name,
            date=holiday.date,
            is_tentative=holiday.is_tentative,
            holiday_id=holiday.holiday_id,
        )

    def to_dict(self) -> dict:
        return {
            "_id": self.holiday_id,
            "name": self.name,
            "date": _jsonable(self.date),
            "isTentative": self.is_tentative,
        }


@dataclass(frozen=True)
class LeaveInfo:
    status: Optional[str]
    leave_type: Optional[str]
    request_type: Optional[str]
    reason: str
    leave_dates: tuple = ()
    request_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "_id": self.request_id,
            "requestType": self.request_type,
            "leaveType": self.leave_type,
            "status": self.status,
            "reason": self.reason,
            "leaveDates": _jsonable(self.leave_dates),
        }


@dataclass(frozen=True)
class ResolvedStatus:
    """Trạng thái cuối cùng của một ngày công (immutable value object).

    Flags are explicit and must never be re-derived from ``status`` by callers.
    """

    status: DayStatus
    is_working_day: bool
    is_holiday: bool = False
    is_weekly_off: bool = False
    is_leave: bool = False
    is_absent: bool = False
    is_half_day: bool = False
    status_reason: Optional[str] = None
    half_day_reason: Optional[str] = None
    half_day_reason_code: Optional[str] = None
    half_day_source: Optional[str] = None
    overridden_by_admin: bool = False
    leave_reason: Optional[str] = None
    holiday_info: Optional[HolidayInfo] = None
    leave_info: Optional[LeaveInfo] = None

    def __post_init__(self):
        if (self.is_holiday or self.is_leave or self.is_weekly_off) and (
            self.is_absent or self.status == DayStatus.ABSENT
        ):
            raise InvariantViolationError(
                f"Holiday/leave/weekly-off day cannot be Absent (status={self.status.value})"
            )
        if self.is_half_day and not self.half_day_reason:
            raise InvariantViolationError("Half-day status requires a reason")

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "statusReason": self.status_reason,
            "isWorkingDay": self.is_working_day,
            "isHoliday": self.is_holiday,
            "isWeeklyOff": self.is_weekly_off,
            "isLeave": self.is_leave,
            "isAbsent": self.is_absent,
            "isHalfDay": self.is_half_day,
            "halfDayReason": self.half_day_reason,
            "halfDayReasonCode": self.half_day_reason_code,
            "halfDaySource": self.half_day_source,
            "overriddenByAdmin": self.overridden_by_admin,
            "leaveReason": self.leave_reason,
            "holidayInfo": self.holiday_info.to_dict() if self.holiday_info else None,
            "leaveInfo": self.leave_info.to_dict() if self.leave_info else None,
        }


@dataclass(frozen=True)
class ResolveRequest:
    """Input record for one employee-day."""

    attendance_date: Any
    attendance_log: Optional[AttendanceLog] = None
    holidays: tuple = ()
    leave_request: Optional[LeaveRequest] = None
    saturday_policy: Any = SaturdayPolicy.ALL_WORKING.value

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ResolveRequest":
        raw_log = data.get("attendanceLog")
        raw_leave = data.get("leaveRequest")
        raw_holidays = data.get("holidays") or ()
        return cls(
            attendance_date=data.get("attendanceDate"),
            attendance_log=AttendanceLog.from_mapping(raw_log) if isinstance(raw_log, Mapping) else None,
            holidays=tuple(Holiday.from_mapping(h) for h in raw_holidays if isinstance(h, Mapping)),
            leave_request=LeaveRequest.from_mapping(raw_leave) if isinstance(raw_leave, Mapping) else None,
            saturday_policy=data.get("saturdayPolicy"),
        )


@dataclass(frozen=True)
class DayResolution:
    date: str
    result: ResolvedStatus

    def to_dict(self) -> dict:
        return {"date": self.date, **self.result.to_dict()}


@dataclass(frozen=True)
class AttendanceSummary:
    total_days: int = 0
    working_days: int = 0
    counts: Mapping[str, int] = field(default_factory=dict)
    half_days: int = 0

    def to_dict(self) -> dict:
        return {
            "totalDays": self.total_days,
            "workingDays": self.working_days,
            "halfDays": self.half_days,
            "counts": dict(self.counts),
        }
