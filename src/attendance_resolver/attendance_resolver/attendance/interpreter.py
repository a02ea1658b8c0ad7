from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Optional

from ..common.diagnostics import (
    HALF_DAY_WITHOUT_REASON,
    UNKNOWN_PERSISTED_STATUS,
    Diagnostic,
    DiagnosticSink,
    null_sink,
)
from ..core.constants import (
    GENERIC_HALF_DAY_REASON,
    MANUAL_HALF_DAY_REASON,
    MINIMUM_WORKING_HOURS,
    UNSPECIFIED_HALF_DAY_REASON,
)
from ..core.enums import DayStatus, HalfDayReasonCode
from .model import AttendanceLog

# Legacy records persisted "Half Day" before the label was unified.
_STATUS_ALIASES = {
    "Half Day": DayStatus.HALF_DAY,
}


@dataclass(frozen=True)
class LogInterpretation:
    status: DayStatus
    is_half_day: bool = False
    half_day_reason: Optional[str] = None
    half_day_reason_code: Optional[str] = None
    status_reason: Optional[str] = None


@dataclass(frozen=True)
class HalfDayReason:
    text: str
    code: Optional[str] = None


HalfDayReasonRule = Callable[[AttendanceLog, float], Optional[HalfDayReason]]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def late_arrival_text(late_minutes: float) -> str:
    return f"Late arrival ({_round_half_up(late_minutes)} minutes late)"


def _persisted_reason(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    if log.half_day_reason_text:
        return HalfDayReason(log.half_day_reason_text, log.half_day_reason_code)
    return None


def _late_login(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    if log.late_minutes and log.late_minutes > 0:
        return HalfDayReason(late_arrival_text(log.late_minutes), HalfDayReasonCode.LATE_LOGIN.value)
    return None


def _early_logout(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    if log.auto_logout_reason:
        return HalfDayReason(f"Early checkout: {log.auto_logout_reason}", HalfDayReasonCode.EARLY_LOGOUT.value)
    return None


def _insufficient_hours(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    hours = log.total_working_hours
    if hours and 0 < hours < minimum_hours:
        return HalfDayReason(
            f"Insufficient working hours ({hours:.1f} hours worked, minimum required: {minimum_hours:g} hours)",
            HalfDayReasonCode.INSUFFICIENT_WORKING_HOURS.value,
        )
    return None


def _manual_marking(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    if log.logout_type == "Manual" or log.half_day_source == "MANUAL":
        return HalfDayReason(log.override_reason or MANUAL_HALF_DAY_REASON, HalfDayReasonCode.MANUAL_ADMIN.value)
    return None


def _generic(log: AttendanceLog, minimum_hours: float) -> Optional[HalfDayReason]:
    return HalfDayReason(GENERIC_HALF_DAY_REASON)


# First match wins; the persisted text always beats anything recomputed.
HALF_DAY_REASON_RULES: tuple[HalfDayReasonRule, ...] = (
    _persisted_reason,
    _late_login,
    _early_logout,
    _insufficient_hours,
    _manual_marking,
    _generic,
)


def derive_half_day_reason(
    log: AttendanceLog,
    *,
    minimum_hours: float = MINIMUM_WORKING_HOURS,
    rules: tuple[HalfDayReasonRule, ...] = HALF_DAY_REASON_RULES,
) -> Optional[HalfDayReason]:
    for rule in rules:
        reason = rule(log, minimum_hours)
        if reason and reason.text:
            return reason
    return None


def persisted_day_status(log: AttendanceLog, report: DiagnosticSink = null_sink) -> Optional[DayStatus]:
    """Map the stored status string onto :class:`DayStatus`.

    Unknown labels are read as Present, with a diagnostic.
    """
    raw = log.attendance_status
    if not raw:
        return None
    if raw in _STATUS_ALIASES:
        return _STATUS_ALIASES[raw]
    try:
        return DayStatus(raw)
    except ValueError:
        report(
            Diagnostic(
                code=UNKNOWN_PERSISTED_STATUS,
                message=f"Unknown persisted attendance status {raw!r}, reading it as Present",
                context={"logId": log.log_id, "attendanceStatus": raw},
            )
        )
        return DayStatus.PRESENT


def _ensure_reason(
    result: LogInterpretation,
    log: AttendanceLog,
    report: DiagnosticSink,
) -> LogInterpretation:
    if not result.is_half_day or result.half_day_reason:
        return result
    report(
        Diagnostic(
            code=HALF_DAY_WITHOUT_REASON,
            message="Half-day status but no reason found",
            context={"logId": log.log_id, "hasPersistedReason": bool(log.half_day_reason_text)},
        )
    )
    return LogInterpretation(
        status=result.status,
        is_half_day=True,
        half_day_reason=UNSPECIFIED_HALF_DAY_REASON,
        half_day_reason_code=result.half_day_reason_code,
        status_reason=result.status_reason or UNSPECIFIED_HALF_DAY_REASON,
    )


def interpret(
    log: Optional[AttendanceLog],
    *,
    minimum_hours: float = MINIMUM_WORKING_HOURS,
    report: DiagnosticSink = null_sink,
) -> Optional[LogInterpretation]:
    """Turn one day's raw log into a status.

    Returns None when the log carries neither sessions nor a persisted
    status; what that means for the day is the resolver's call.
    """
    if log is None:
        return None

    persisted = persisted_day_status(log, report)

    if not log.has_sessions:
        if persisted is None:
            return None
        # Admin override or manually created log: trust what was stored.
        is_half_day = log.is_half_day or persisted == DayStatus.HALF_DAY
        reason = log.half_day_reason_text if is_half_day else None
        result = LogInterpretation(
            status=persisted,
            is_half_day=is_half_day,
            half_day_reason=reason,
            half_day_reason_code=log.half_day_reason_code if reason else None,
            status_reason=reason,
        )
        return _ensure_reason(result, log, report)

    if log.is_half_day or persisted == DayStatus.HALF_DAY:
        reason = derive_half_day_reason(log, minimum_hours=minimum_hours)
        result = LogInterpretation(
            status=DayStatus.HALF_DAY,
            is_half_day=True,
            half_day_reason=reason.text if reason else None,
            half_day_reason_code=reason.code if reason else None,
            status_reason=reason.text if reason else None,
        )
        return _ensure_reason(result, log, report)

    if persisted is not None:
        status_reason = None
        if persisted == DayStatus.LATE:
            if log.late_minutes and log.late_minutes > 0:
                status_reason = late_arrival_text(log.late_minutes)
            else:
                status_reason = "Late arrival"
        return LogInterpretation(status=persisted, status_reason=status_reason)

    return LogInterpretation(status=DayStatus.PRESENT)
