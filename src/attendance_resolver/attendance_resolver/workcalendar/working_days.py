from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional, Union

from ..common.datetime_utils import CIVIL_TZ, DateLike, date_range
from ..core.enums import SaturdayPolicy
from .holidays import authoritative_dates
from .model import Holiday
from .weekly_off import is_weekly_off


def count_working_days(
    start: DateLike,
    end: DateLike,
    policy: Optional[Union[str, SaturdayPolicy]],
    holidays: Iterable[Holiday] = (),
    *,
    tz: tzinfo = CIVIL_TZ,
) -> int:
    """Count days in [start, end] that are neither weekly-off nor a holiday."""
    closed = authoritative_dates(holidays, tz=tz)
    return sum(
        1
        for day in date_range(start, end, tz=tz)
        if day not in closed and not is_weekly_off(day, policy)
    )
