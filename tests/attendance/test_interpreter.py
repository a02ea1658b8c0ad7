from attendance_resolver.attendance.interpreter import derive_half_day_reason, interpret
from attendance_resolver.attendance.model import AttendanceLog, BreakPeriod, WorkSession
from attendance_resolver.common.diagnostics import HALF_DAY_WITHOUT_REASON, UNKNOWN_PERSISTED_STATUS, CollectingSink
from attendance_resolver.core.enums import DayStatus

SESSION = WorkSession("2025-04-10T09:00:00+05:30", "2025-04-10T13:30:00+05:30")


def _half_day_log(**kw):
    return AttendanceLog(sessions=(SESSION,), is_half_day=True, **kw)


def test_no_log_and_empty_log_are_not_interpreted():
    assert interpret(None) is None
    assert interpret(AttendanceLog()) is None


def test_sessions_without_status_is_present():
    outcome = interpret(AttendanceLog(sessions=(SESSION,)))
    assert outcome.status == DayStatus.PRESENT
    assert outcome.is_half_day is False
    assert outcome.half_day_reason is None


def test_no_sessions_trusts_persisted_status_verbatim():
    outcome = interpret(AttendanceLog(attendance_status="Late", late_minutes=40, overridden_by_admin=True))
    assert outcome.status == DayStatus.LATE
    assert outcome.status_reason is None


def test_no_sessions_persisted_half_day_keeps_persisted_reason():
    log = AttendanceLog(
        attendance_status="Half-day",
        is_half_day=True,
        half_day_reason_text="Admin marked half day",
        half_day_reason_code="MANUAL_ADMIN",
        late_minutes=30,
    )
    outcome = interpret(log)
    assert outcome.status == DayStatus.HALF_DAY
    assert outcome.half_day_reason == "Admin marked half day"
    assert outcome.half_day_reason_code == "MANUAL_ADMIN"


def test_no_sessions_half_day_without_reason_is_synthesized():
    sink = CollectingSink()
    outcome = interpret(AttendanceLog(attendance_status="Half-day", is_half_day=True), report=sink)
    assert outcome.half_day_reason == "Half-day marked (reason not specified)"
    assert sink.codes == [HALF_DAY_WITHOUT_REASON]


def test_persisted_reason_wins_over_computed():
    outcome = interpret(_half_day_log(half_day_reason_text="Left for appointment", late_minutes=25, total_working_hours=4.5))
    assert outcome.half_day_reason == "Left for appointment"
    assert outcome.half_day_reason_code is None


def test_late_login_reason():
    outcome = interpret(_half_day_log(late_minutes=42.5, total_working_hours=4.5))
    assert outcome.half_day_reason == "Late arrival (43 minutes late)"
    assert outcome.half_day_reason_code == "LATE_LOGIN"


def test_early_logout_reason():
    outcome = interpret(_half_day_log(late_minutes=0, auto_logout_reason="Idle timeout", total_working_hours=4.5))
    assert outcome.half_day_reason == "Early checkout: Idle timeout"
    assert outcome.half_day_reason_code == "EARLY_LOGOUT"


def test_insufficient_hours_reason():
    outcome = interpret(_half_day_log(late_minutes=0, total_working_hours=4.5))
    assert outcome.status == DayStatus.HALF_DAY
    assert outcome.half_day_reason == "Insufficient working hours (4.5 hours worked, minimum required: 8 hours)"
    assert outcome.half_day_reason_code == "INSUFFICIENT_WORKING_HOURS"


def test_insufficient_hours_respects_configured_minimum():
    outcome = interpret(_half_day_log(total_working_hours=8.2), minimum_hours=8.5)
    assert outcome.half_day_reason == "Insufficient working hours (8.2 hours worked, minimum required: 8.5 hours)"


def test_manual_reason_prefers_override_text():
    outcome = interpret(_half_day_log(total_working_hours=9, half_day_source="MANUAL", override_reason="Approved by HR"))
    assert outcome.half_day_reason == "Approved by HR"
    assert outcome.half_day_reason_code == "MANUAL_ADMIN"

    outcome = interpret(_half_day_log(logout_type="Manual"))
    assert outcome.half_day_reason == "Manual half-day marking"


def test_generic_reason_when_nothing_else_applies():
    outcome = interpret(_half_day_log(total_working_hours=0))
    assert outcome.half_day_reason == "Half-day marked"
    assert outcome.half_day_reason_code is None


def test_persisted_half_day_status_without_flag():
    outcome = interpret(AttendanceLog(sessions=(SESSION,), attendance_status="Half Day", late_minutes=12))
    assert outcome.status == DayStatus.HALF_DAY
    assert outcome.is_half_day is True
    assert outcome.half_day_reason == "Late arrival (12 minutes late)"


def test_late_status_attaches_reason_only_with_minutes():
    outcome = interpret(AttendanceLog(sessions=(SESSION,), attendance_status="Late", late_minutes=17))
    assert outcome.status == DayStatus.LATE
    assert outcome.status_reason == "Late arrival (17 minutes late)"
    assert outcome.half_day_reason is None

    outcome = interpret(AttendanceLog(sessions=(SESSION,), attendance_status="Late"))
    assert outcome.status_reason == "Late arrival"


def test_unknown_persisted_status_reads_as_present():
    sink = CollectingSink()
    outcome = interpret(AttendanceLog(sessions=(SESSION,), attendance_status="On Duty", log_id="L1"), report=sink)
    assert outcome.status == DayStatus.PRESENT
    assert sink.codes == [UNKNOWN_PERSISTED_STATUS]
    assert sink.items[0].context["logId"] == "L1"


def test_derive_reason_with_empty_rule_chain_returns_none():
    assert derive_half_day_reason(_half_day_log(), rules=()) is None


def test_log_from_mapping_boundary():
    log = AttendanceLog.from_mapping(
        {
            "_id": 99,
            "sessions": [{"startTime": "2025-04-10T09:00:00Z", "endTime": None}, "junk"],
            "breaks": None,
            "attendanceStatus": "  ",
            "isHalfDay": 1,
            "lateMinutes": "15",
            "totalWorkingHours": "n/a",
        }
    )
    assert log.log_id == "99"
    assert log.has_sessions
    assert log.sessions[0] == WorkSession("2025-04-10T09:00:00Z", None)
    assert log.breaks == ()
    assert log.attendance_status is None
    assert log.is_half_day is True
    assert log.late_minutes == 15.0
    assert log.total_working_hours is None
    assert AttendanceLog(breaks=(BreakPeriod("a", "b"),)).has_sessions is False
