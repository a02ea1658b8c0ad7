from __future__ import annotations

from dataclasses import dataclass

from .rules.absent_rule import AbsentRule
from .rules.base import ResolutionRule
from .rules.fallback_rule import PersistedStatusFallbackRule
from .rules.holiday_rule import HolidayRule
from .rules.leave_rule import LeaveRule
from .rules.log_rule import AttendanceLogRule
from .rules.weekly_off_rule import WeeklyOffRule


@dataclass
class ResolutionRuleFactory:
    """Factory Pattern: build the ordered rule chain.

    Order is the precedence: holiday, leave, weekly off, log, absent, fallback.
    """

    def default_chain(self) -> tuple[ResolutionRule, ...]:
        return (
            HolidayRule(),
            LeaveRule(),
            WeeklyOffRule(),
            AttendanceLogRule(),
            AbsentRule(),
            PersistedStatusFallbackRule(),
        )
