"""Example: use the resolver directly (without Flask).

Resolves one week for an employee on the "Week 2 & 4 Off" policy and prints
the per-day status plus the period summary.
"""

from attendance_resolver.attendance.model import AttendanceLog, WorkSession
from attendance_resolver.container import build_container
from attendance_resolver.leave.model import LeaveRequest
from attendance_resolver.resolution.service import summarize
from attendance_resolver.workcalendar.model import Holiday


def main():
    container = build_container()
    logs = {
        "2025-03-03": AttendanceLog(sessions=(WorkSession("2025-03-03T09:00:00+05:30", "2025-03-03T18:00:00+05:30"),)),
        "2025-03-04": AttendanceLog(
            sessions=(WorkSession("2025-03-04T09:00:00+05:30", "2025-03-04T13:30:00+05:30"),),
            is_half_day=True,
            total_working_hours=4.5,
        ),
    }
    holidays = [Holiday(date="2025-03-14", name="Holi")]
    leaves = [LeaveRequest(status="Approved", leave_dates=("2025-03-05",), leave_type="Full Day", request_type="Planned")]

    days = container.status_resolver.resolve_range(
        "2025-03-03",
        "2025-03-09",
        logs_by_date=logs,
        holidays=holidays,
        leave_requests=leaves,
        saturday_policy="Week 2 & 4 Off",
    )
    for day in days:
        print(day.date, day.result.status.value, day.result.status_reason or "")
    print(summarize(days).to_dict())


if __name__ == "__main__":
    main()
