from __future__ import annotations

from typing import Optional

from ...core.constants import DEFAULT_LEAVE_REASON
from ...core.enums import DayStatus
from ...leave.matcher import find_approved_leave
from ...workcalendar.weekly_off import is_weekly_off
from ..model import LeaveInfo, ResolvedStatus
from .base import ResolutionContext, ResolutionRule


class LeaveRule(ResolutionRule):
    """Approved leave beats weekly-off and any attendance log.

    A leave that lands on a weekly-off day stays Leave, but the day is not
    counted as a working day.
    """

    name = "leave"

    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        match = find_approved_leave(ctx.date, ctx.leave_request, tz=ctx.tz)
        if match is None:
            return None

        leave = match.leave
        off_day = is_weekly_off(ctx.date, ctx.saturday_policy)
        if match.is_half_day:
            reason = f"Leave - {leave.leave_type}"
        else:
            reason = f"Leave - {leave.request_type or 'Leave'}"
        leave_reason = leave.reason or DEFAULT_LEAVE_REASON

        return ResolvedStatus(
            status=DayStatus.LEAVE,
            status_reason=reason,
            is_working_day=not off_day,
            is_weekly_off=off_day,
            is_leave=True,
            is_half_day=match.is_half_day,
            half_day_reason=reason if match.is_half_day else None,
            leave_reason=leave_reason,
            leave_info=LeaveInfo(
                status=leave.status,
                leave_type=leave.leave_type,
                request_type=leave.request_type,
                reason=leave_reason,
                leave_dates=leave.leave_dates,
                request_id=leave.request_id,
            ),
        )
