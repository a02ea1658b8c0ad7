from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from ...attendance.model import AttendanceLog
from ...common.diagnostics import DiagnosticSink
from ...core.enums import SaturdayPolicy
from ...leave.model import LeaveRequest
from ..model import ResolvedStatus


@dataclass(frozen=True)
class ResolutionContext:
    """Everything a rule may look at, normalized once by the resolver."""

    date: str
    attendance_log: Optional[AttendanceLog]
    holidays: tuple
    leave_request: Optional[LeaveRequest]
    saturday_policy: SaturdayPolicy
    tz: tzinfo
    minimum_hours: float
    report: DiagnosticSink


class ResolutionRule(ABC):
    """Strategy Pattern: one precedence level of the status decision.

    A rule returns a result when it owns the day, or None to pass the day on
    to the next rule in the chain.
    """

    name: str = "rule"

    @abstractmethod
    def apply(self, ctx: ResolutionContext) -> Optional[ResolvedStatus]:
        raise NotImplementedError
