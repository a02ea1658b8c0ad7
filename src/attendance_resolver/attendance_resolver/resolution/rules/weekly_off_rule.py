from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...workcalendar.weekly_off import is_weekly_off, weekly_off_reason
from ..model import ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class WeeklyOffRule(ResolutionRule):
    name = "weekly_off"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        if not is_weekly_off(ctx.date, ctx.saturday_policy):
            return None
        return ResolvedStatus(
            status=DayStatus.WEEKLY_OFF,
            status_reason=weekly_off_reason(ctx.date, ctx.saturday_policy),
            is_working_day=False,
            is_weekly_off=True,
        )
