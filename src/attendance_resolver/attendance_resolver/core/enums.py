from __future__ import annotations

from enum import Enum


class DayStatus(str, Enum):
    """Trạng thái ngày công sau khi hợp nhất mọi nguồn dữ liệu.

    The values are the exact display strings exposed to API consumers.
    """

    HOLIDAY = "Holiday"
    LEAVE = "Leave"
    WEEKLY_OFF = "Weekly Off"
    PRESENT = "Present"
    LATE = "Late"
    HALF_DAY = "Half-day"
    ABSENT = "Absent"


class SaturdayPolicy(str, Enum):
    """Rotating Saturday rule assigned per employee."""

    ALL_WORKING = "All Saturdays Working"
    ALL_OFF = "All Saturdays Off"
    WEEK_1_AND_3_OFF = "Week 1 & 3 Off"
    WEEK_2_AND_4_OFF = "Week 2 & 4 Off"


class RequestStatus(str, Enum):
    """Trạng thái luồng duyệt yêu cầu nghỉ phép."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class HalfDayReasonCode(str, Enum):
    LATE_LOGIN = "LATE_LOGIN"
    EARLY_LOGOUT = "EARLY_LOGOUT"
    INSUFFICIENT_WORKING_HOURS = "INSUFFICIENT_WORKING_HOURS"
    MANUAL_ADMIN = "MANUAL_ADMIN"
