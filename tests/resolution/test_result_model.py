from attendance_resolver.core.enums import DayStatus
from attendance_resolver.leave.model import LeaveRequest
from attendance_resolver.resolution.model import ResolveRequest
from attendance_resolver.resolution.service import StatusResolver
from attendance_resolver.common.diagnostics import CollectingSink


def test_to_dict_uses_display_strings_and_camel_case():
    leave = LeaveRequest(
        status="Approved",
        leave_dates=("2025-04-10", "2025-04-11"),
        leave_type="Full Day",
        request_type="Sick",
        reason="Flu",
        request_id="lv1",
    )
    result = StatusResolver().resolve(ResolveRequest(attendance_date="2025-04-10", leave_request=leave), report=CollectingSink())
    data = result.to_dict()
    assert data["status"] == "Leave"
    assert data["isLeave"] is True
    assert data["isWorkingDay"] is True
    assert data["leaveReason"] == "Flu"
    assert data["leaveInfo"] == {
        "_id": "lv1",
        "requestType": "Sick",
        "leaveType": "Full Day",
        "status": "Approved",
        "reason": "Flu",
        "leaveDates": ["2025-04-10", "2025-04-11"],
    }
    assert data["holidayInfo"] is None


def test_status_values_are_stable():
    assert [s.value for s in DayStatus] == ["Holiday", "Leave", "Weekly Off", "Present", "Late", "Half-day", "Absent"]
