"""Invariant checks swept across a grid of generated inputs."""

from __future__ import annotations

import itertools

import pytest

from attendance_resolver.attendance.model import AttendanceLog, WorkSession
from attendance_resolver.common.datetime_utils import civil_day_of_week, date_range
from attendance_resolver.common.diagnostics import CollectingSink
from attendance_resolver.core.enums import DayStatus, SaturdayPolicy
from attendance_resolver.core.exceptions import InvariantViolationError
from attendance_resolver.leave.model import LeaveRequest
from attendance_resolver.resolution.model import ResolvedStatus, ResolveRequest
from attendance_resolver.resolution.service import StatusResolver
from attendance_resolver.workcalendar.model import Holiday

# Two full weeks: covers Sundays and the 1st/2nd Saturdays of March 2025.
DATES = list(date_range("2025-02-28", "2025-03-10"))

SESSION = WorkSession("09:00", "18:00")
LOGS = [
    None,
    AttendanceLog(),
    AttendanceLog(overridden_by_admin=True),
    AttendanceLog(attendance_status="Absent"),
    AttendanceLog(attendance_status="Half-day", is_half_day=True),
    AttendanceLog(sessions=(SESSION,)),
    AttendanceLog(sessions=(SESSION,), is_half_day=True),
    AttendanceLog(sessions=(SESSION,), attendance_status="Late", late_minutes=9),
    AttendanceLog(sessions=(SESSION,), attendance_status="Half Day", total_working_hours=3.0),
]
POLICIES = [p.value for p in SaturdayPolicy] + ["garbage"]


def _holidays(day, with_holiday):
    return (Holiday(date=day, name="Company Day"),) if with_holiday else ()


def _leave(day, kind):
    if kind is None:
        return None
    status, leave_type = kind
    return LeaveRequest(status=status, leave_dates=(day,), leave_type=leave_type)


LEAVE_KINDS = [None, ("Approved", "Full Day"), ("Approved", "Half Day - Second Half"), ("Rejected", "Full Day")]


def _cases():
    for day, log, policy, with_holiday, leave_kind in itertools.product(DATES, LOGS, POLICIES, (False, True), LEAVE_KINDS):
        yield ResolveRequest(
            attendance_date=day,
            attendance_log=log,
            holidays=_holidays(day, with_holiday),
            leave_request=_leave(day, leave_kind),
            saturday_policy=policy,
        )


CASES = list(_cases())


def test_invariants_hold_for_every_case():
    resolver = StatusResolver()
    for request in CASES:
        result = resolver.resolve(request, report=CollectingSink())
        if result.is_holiday or result.is_leave or result.is_weekly_off:
            assert result.is_absent is False
            assert result.status != DayStatus.ABSENT
        if result.is_half_day:
            assert result.half_day_reason

        if request.holidays:
            assert result.status == DayStatus.HOLIDAY
            assert result.is_absent is False
        elif request.leave_request is not None and request.leave_request.status == "Approved":
            assert result.status == DayStatus.LEAVE
            assert result.is_absent is False

        if civil_day_of_week(request.attendance_date) == 0 and not request.holidays:
            assert result.is_weekly_off is True


def test_resolve_is_idempotent():
    resolver = StatusResolver()
    for request in CASES[::7]:
        assert resolver.resolve(request, report=CollectingSink()) == resolver.resolve(request, report=CollectingSink())


@pytest.mark.parametrize(
    "kwargs",
    [
        {"status": DayStatus.HOLIDAY, "is_working_day": False, "is_holiday": True, "is_absent": True},
        {"status": DayStatus.ABSENT, "is_working_day": False, "is_weekly_off": True},
        {"status": DayStatus.ABSENT, "is_working_day": True, "is_leave": True, "is_absent": True},
        {"status": DayStatus.HALF_DAY, "is_working_day": True, "is_half_day": True},
        {"status": DayStatus.HALF_DAY, "is_working_day": True, "is_half_day": True, "half_day_reason": ""},
    ],
)
def test_result_refuses_invalid_combinations(kwargs):
    with pytest.raises(InvariantViolationError):
        ResolvedStatus(**kwargs)
