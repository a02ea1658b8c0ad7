from __future__ import annotations

from collections import Counter
from datetime import tzinfo
from typing import Any, Iterable, Mapping, Optional, Sequence

from ..attendance.model import AttendanceLog
from ..common.datetime_utils import CIVIL_TZ, DateLike, date_range, normalize_date
from ..common.diagnostics import INVALID_SATURDAY_POLICY, Diagnostic, DiagnosticSink, logging_sink
from ..core.constants import MINIMUM_WORKING_HOURS
from ..core.enums import DayStatus, SaturdayPolicy
from ..core.exceptions import InvariantViolationError, MissingDateError
from ..leave.matcher import first_approved_leave
from ..leave.model import LeaveRequest
from ..workcalendar.weekly_off import sanitize_policy
from .factory import ResolutionRuleFactory
from .model import AttendanceSummary, DayResolution, ResolvedStatus, ResolveRequest
from .rules.base import ResolutionContext, ResolutionRule


class StatusResolver:
    def __init__(
        self,
        *,
        rule_factory: ResolutionRuleFactory | None = None,
        tz: tzinfo = CIVIL_TZ,
        minimum_hours: float = MINIMUM_WORKING_HOURS,
        default_sink: DiagnosticSink = logging_sink,
    ):
        self._rules: tuple[ResolutionRule, ...] = (rule_factory or ResolutionRuleFactory()).default_chain()
        self._tz = tz
        self._minimum_hours = float(minimum_hours)
        self._default_sink = default_sink


    def _context(self, request: ResolveRequest, report: DiagnosticSink) -> ResolutionContext:
        if request.attendance_date is None or request.attendance_date == "":
            raise MissingDateError("attendanceDate is required to resolve attendance status")
        canonical = normalize_date(request.attendance_date, tz=self._tz)

        policy, valid = sanitize_policy(request.saturday_policy)
        if not valid:
            report(
                Diagnostic(
                    code=INVALID_SATURDAY_POLICY,
                    message=f"Invalid saturdayPolicy {request.saturday_policy!r}, defaulting to {policy.value!r}",
                    context={"attendanceDate": canonical, "saturdayPolicy": request.saturday_policy},
                )
            )

        return ResolutionContext(
            date=canonical,
            attendance_log=request.attendance_log,
            holidays=tuple(request.holidays or ()),
            leave_request=request.leave_request,
            saturday_policy=policy,
            tz=self._tz,
            minimum_hours=self._minimum_hours,
            report=report,
        )

    def resolve(self, request: ResolveRequest, *, report: DiagnosticSink | None = None) -> ResolvedStatus:
        """Resolve one employee-day; the first rule that owns the day wins."""
        sink = report or self._default_sink
        ctx = self._context(request, sink)
        for rule in self._rules:
            result = rule.apply(ctx)
            if result is not None:
                return result
        raise InvariantViolationError(f"No resolution rule matched {ctx.date}")

    def resolve_range(
        self,
        start: DateLike,
        end: DateLike,
        *,
        logs_by_date: Optional[Mapping[Any, AttendanceLog]] = None,
        holidays: Iterable = (),
        leave_requests: Sequence[LeaveRequest] = (),
        saturday_policy: Any = SaturdayPolicy.ALL_WORKING.value,
        report: DiagnosticSink | None = None,
    ) -> list[DayResolution]:
        """Resolve every day of a period for one employee."""
        logs = {normalize_date(k, tz=self._tz): v for k, v in (logs_by_date or {}).items()}
        holidays = tuple(holidays)
        out: list[DayResolution] = []
        for day in date_range(start, end, tz=self._tz):
            request = ResolveRequest(
                attendance_date=day,
                attendance_log=logs.get(day),
                holidays=holidays,
                leave_request=first_approved_leave(day, leave_requests, tz=self._tz),
                saturday_policy=saturday_policy,
            )
            out.append(DayResolution(date=day, result=self.resolve(request, report=report)))
        return out


def summarize(resolutions: Iterable[DayResolution]) -> AttendanceSummary:
    """Aggregate per-day results into period counts."""
    counts: Counter = Counter()
    total = 0
    working = 0
    half_days = 0
    for item in resolutions:
        total += 1
        counts[item.result.status.value] += 1
        if item.result.is_working_day:
            working += 1
        if item.result.is_half_day:
            half_days += 1
    return AttendanceSummary(
        total_days=total,
        working_days=working,
        counts={s.value: counts.get(s.value, 0) for s in DayStatus},
        half_days=half_days,
    )


_default_resolver = StatusResolver()


def resolve_attendance_status(
    *,
    attendance_date: DateLike,
    attendance_log: Optional[AttendanceLog] = None,
    holidays: Iterable = (),
    leave_request: Optional[LeaveRequest] = None,
    saturday_policy: Any = SaturdayPolicy.ALL_WORKING.value,
    report: DiagnosticSink | None = None,
) -> ResolvedStatus:
    """Convenience wrapper around a default :class:`StatusResolver`."""
    request = ResolveRequest(
        attendance_date=attendance_date,
        attendance_log=attendance_log,
        holidays=tuple(holidays),
        leave_request=leave_request,
        saturday_policy=saturday_policy,
    )
    return _default_resolver.resolve(request, report=report)
