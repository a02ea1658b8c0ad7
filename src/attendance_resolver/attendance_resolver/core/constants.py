"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Company calendar runs on IST (UTC+05:30).
CIVIL_UTC_OFFSET_MINUTES = 330

CANONICAL_DATE_FORMAT = "%Y-%m-%d"

MINIMUM_WORKING_HOURS = 8

HALF_DAY_LEAVE_MARKERS = ("Half Day", "Half-day")

DEFAULT_LEAVE_REASON = "No reason provided"
NO_ATTENDANCE_REASON = "No attendance logged"
GENERIC_HALF_DAY_REASON = "Half-day marked"
UNSPECIFIED_HALF_DAY_REASON = "Half-day marked (reason not specified)"
MANUAL_HALF_DAY_REASON = "Manual half-day marking"

# Upper bound on days an HTTP caller may expand in one request.
MAX_RANGE_DAYS = 3660
