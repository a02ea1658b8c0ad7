from __future__ import annotations

import math
from typing import Optional, Union

from ..common.datetime_utils import civil_day_of_week, parse_iso_date
from ..core.enums import SaturdayPolicy

SUNDAY = 0
SATURDAY = 6

DEFAULT_POLICY = SaturdayPolicy.ALL_WORKING

_OFF_WEEKS = {
    SaturdayPolicy.ALL_WORKING: frozenset(),
    SaturdayPolicy.ALL_OFF: frozenset({1, 2, 3, 4, 5}),
    SaturdayPolicy.WEEK_1_AND_3_OFF: frozenset({1, 3}),
    SaturdayPolicy.WEEK_2_AND_4_OFF: frozenset({2, 4}),
}


def sanitize_policy(value: Optional[Union[str, SaturdayPolicy]]) -> tuple[SaturdayPolicy, bool]:
    """Map a raw policy value onto the enum.

    Returns ``(policy, was_valid)``; anything unrecognized becomes the
    all-Saturdays-working default so a bad value never turns a day off.
    """
    if isinstance(value, SaturdayPolicy):
        return value, True
    try:
        return SaturdayPolicy(value), True
    except ValueError:
        return DEFAULT_POLICY, False


def saturday_of_month(canonical: str) -> int:
    """Ordinal (1-5) of a Saturday within its month, from the day of month alone."""
    return math.ceil(parse_iso_date(canonical).day / 7)


def is_weekly_off(canonical: str, policy: Optional[Union[str, SaturdayPolicy]]) -> bool:
    dow = civil_day_of_week(canonical)
    if dow == SUNDAY:
        return True
    if dow != SATURDAY:
        return False

    resolved, _ = sanitize_policy(policy)
    return saturday_of_month(canonical) in _OFF_WEEKS[resolved]


def weekly_off_reason(canonical: str, policy: Optional[Union[str, SaturdayPolicy]]) -> str:
    dow = civil_day_of_week(canonical)
    if dow == SUNDAY:
        return "Sunday - Weekly Off"
    if dow == SATURDAY:
        resolved, _ = sanitize_policy(policy)
        if resolved != SaturdayPolicy.ALL_WORKING:
            return f"Saturday - {resolved.value}"
    return "Weekly Off"
