from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class WorkSession:
    start: Optional[Any]
    end: Optional[Any] = None


@dataclass(frozen=True)
class BreakPeriod:
    start: Optional[Any]
    end: Optional[Any] = None


def _sessions(raw: Any, cls):
    if not isinstance(raw, (list, tuple)):
        return ()
    items = []
    for entry in raw:
        if isinstance(entry, Mapping):
            items.append(cls(start=entry.get("startTime"), end=entry.get("endTime")))
        elif isinstance(entry, cls):
            items.append(entry)
    return tuple(items)


def _float_or_none(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _text_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True)
class AttendanceLog:
    """Thực thể miền (domain): Bản ghi chấm công thô của một ngày.

    A log can legitimately carry zero sessions (admin created or overridden),
    in which case the persisted ``attendance_status`` is the only signal.
    """

    sessions: tuple = ()
    breaks: tuple = ()
    attendance_status: Optional[str] = None
    is_half_day: bool = False
    half_day_reason_text: Optional[str] = None
    half_day_reason_code: Optional[str] = None
    half_day_source: Optional[str] = None
    late_minutes: Optional[float] = None
    total_working_hours: Optional[float] = None
    auto_logout_reason: Optional[str] = None
    logout_type: Optional[str] = None
    override_reason: Optional[str] = None
    overridden_by_admin: bool = False
    log_id: Optional[str] = None

    @property
    def has_sessions(self) -> bool:
        return len(self.sessions) > 0

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "AttendanceLog":
        log_id = data.get("_id", data.get("id"))
        return cls(
            sessions=_sessions(data.get("sessions"), WorkSession),
            breaks=_sessions(data.get("breaks"), BreakPeriod),
            attendance_status=_text_or_none(data.get("attendanceStatus")),
            is_half_day=bool(data.get("isHalfDay", False)),
            half_day_reason_text=_text_or_none(data.get("halfDayReasonText")),
            half_day_reason_code=_text_or_none(data.get("halfDayReasonCode")),
            half_day_source=_text_or_none(data.get("halfDaySource")),
            late_minutes=_float_or_none(data.get("lateMinutes")),
            total_working_hours=_float_or_none(data.get("totalWorkingHours")),
            auto_logout_reason=_text_or_none(data.get("autoLogoutReason")),
            logout_type=_text_or_none(data.get("logoutType")),
            override_reason=_text_or_none(data.get("overrideReason")),
            overridden_by_admin=bool(data.get("overriddenByAdmin", False)),
            log_id=str(log_id) if log_id is not None else None,
        )
