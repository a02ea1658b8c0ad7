from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import CIVIL_TZ, try_normalize_date
from ..core.enums import RequestStatus
from .model import LeaveMatch, LeaveRequest


def covers_date(leave: LeaveRequest, canonical: str, *, tz: tzinfo = CIVIL_TZ) -> bool:
    return any(try_normalize_date(d, tz=tz) == canonical for d in leave.leave_dates)


def find_approved_leave(
    canonical: str,
    leave_request: Optional[LeaveRequest],
    *,
    tz: tzinfo = CIVIL_TZ,
) -> Optional[LeaveMatch]:
    """Match an approved leave request covering ``canonical``.

    Pending and rejected requests never match. Unparseable entries in
    ``leave_dates`` are ignored.
    """
    if leave_request is None or leave_request.status != RequestStatus.APPROVED.value:
        return None
    if not covers_date(leave_request, canonical, tz=tz):
        return None
    return LeaveMatch(leave=leave_request, is_half_day=leave_request.is_half_day)


def first_approved_leave(
    canonical: str,
    leave_requests: Iterable[LeaveRequest],
    *,
    tz: tzinfo = CIVIL_TZ,
) -> Optional[LeaveRequest]:
    """First approved request (in input order) whose dates include ``canonical``."""
    for leave in leave_requests:
        if find_approved_leave(canonical, leave, tz=tz):
            return leave
    return None
