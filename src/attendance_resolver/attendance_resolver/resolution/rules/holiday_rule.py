from __future__ import annotations

from typing import Optional

from ...core.enums import DayStatus
from ...workcalendar.holidays import find_holiday
from ..model import HolidayInfo, ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class HolidayRule(ResolutionRule):
    """Authoritative company holiday beats everything else."""

    name = "holiday"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        holiday = find_holiday(ctx.date, ctx.holidays, tz=ctx.tz)
        if holiday is None:
            return None
        return ResolvedStatus(
            status=DayStatus.HOLIDAY,
            status_reason=f"Holiday - {holiday.name or 'Holiday'}",
            is_working_day=False,
            is_holiday=True,
            holiday_info=HolidayInfo.from_holiday(holiday),
        )
