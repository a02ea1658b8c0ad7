from __future__ import annotations

from typing import Optional

from ...attendance.interpreter import interpret
from ...core.enums import DayStatus
from ..model import ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class AttendanceLogRule(ResolutionRule):
    """Working day with a usable log: sessions, or a persisted status."""

    name = "attendance_log"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        log = ctx.attendance_log
        outcome = interpret(log, minimum_hours=ctx.minimum_hours, report=ctx.report)
        if outcome is None:
            return None
        return ResolvedStatus(
            status=outcome.status,
            status_reason=outcome.status_reason,
            is_working_day=True,
            is_absent=outcome.status == DayStatus.ABSENT,
            is_half_day=outcome.is_half_day,
            half_day_reason=outcome.half_day_reason,
            half_day_reason_code=outcome.half_day_reason_code,
            half_day_source=log.half_day_source,
            overridden_by_admin=log.overridden_by_admin,
        )
