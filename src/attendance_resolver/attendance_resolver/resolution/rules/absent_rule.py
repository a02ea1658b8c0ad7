from __future__ import annotations

from typing import Optional

from ...core.constants import NO_ATTENDANCE_REASON
from ...core.enums import DayStatus
from ..model import ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class AbsentRule(ResolutionRule):
    """Working day and nothing logged at all."""

    name = "absent"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        if ctx.attendance_log is not None:
            return None
        return ResolvedStatus(
            status=DayStatus.ABSENT,
            status_reason=NO_ATTENDANCE_REASON,
            is_working_day=True,
            is_absent=True,
        )
