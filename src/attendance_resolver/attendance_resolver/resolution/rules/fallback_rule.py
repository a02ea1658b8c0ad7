from __future__ import annotations

from typing import Optional

from ...attendance.interpreter import persisted_day_status
from ...common.diagnostics import HALF_DAY_WITHOUT_REASON, UNMATCHED_LOG_FALLBACK, Diagnostic
from ...core.constants import UNSPECIFIED_HALF_DAY_REASON
from ...core.enums import DayStatus
from ..model import ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class PersistedStatusFallbackRule(ResolutionRule):
    """A log exists but no structured rule understood it.

    The stored status is trusted (Present when there is none) instead of
    forcing Absent, and operators get a diagnostic about the inconsistency.
    """

    name = "fallback"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        log = ctx.attendance_log
        if log is None:
            return None

        status = persisted_day_status(log, ctx.report) or DayStatus.PRESENT
        ctx.report(
            Diagnostic(
                code=UNMATCHED_LOG_FALLBACK,
                message="Attendance log matched no structured branch, using stored status",
                context={
                    "rule": self.name,
                    "attendanceDate": ctx.date,
                    "logId": log.log_id,
                    "storedStatus": status.value,
                    "hasSessions": log.has_sessions,
                    "overriddenByAdmin": log.overridden_by_admin,
                },
            )
        )

        is_half_day = log.is_half_day or status == DayStatus.HALF_DAY
        half_day_reason = log.half_day_reason_text
        if is_half_day and not half_day_reason:
            ctx.report(
                Diagnostic(
                    code=HALF_DAY_WITHOUT_REASON,
                    message="Half-day status but no reason found",
                    context={"rule": self.name, "attendanceDate": ctx.date, "logId": log.log_id},
                )
            )
            half_day_reason = UNSPECIFIED_HALF_DAY_REASON

        if log.half_day_reason_text:
            status_reason = log.half_day_reason_text
        elif log.override_reason:
            status_reason = f"Admin override: {log.override_reason}"
        else:
            status_reason = half_day_reason if is_half_day else None

        return ResolvedStatus(
            status=status,
            status_reason=status_reason,
            is_working_day=True,
            is_absent=status == DayStatus.ABSENT,
            is_half_day=is_half_day,
            half_day_reason=half_day_reason if is_half_day else None,
            half_day_reason_code=log.half_day_reason_code if is_half_day else None,
            half_day_source=log.half_day_source,
            overridden_by_admin=log.overridden_by_admin,
        )
