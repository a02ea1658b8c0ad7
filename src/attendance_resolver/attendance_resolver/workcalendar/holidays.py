from __future__ import annotations

from datetime import tzinfo
from typing import Iterable, Optional

from ..common.datetime_utils import CIVIL_TZ, try_normalize_date
from .model import Holiday


def find_holiday(canonical: str, holidays: Iterable[Holiday], *, tz: tzinfo = CIVIL_TZ) -> Optional[Holiday]:
    """First authoritative (non-tentative) holiday falling on ``canonical``.

    Entries without a usable date are skipped.
    """
    for holiday in holidays:
        if holiday.is_tentative:
            continue
        if try_normalize_date(holiday.date, tz=tz) == canonical:
            return holiday
    return None


def authoritative_dates(holidays: Iterable[Holiday], *, tz: tzinfo = CIVIL_TZ) -> set[str]:
    dates = set()
    for holiday in holidays:
        if holiday.is_tentative:
            continue
        canonical = try_normalize_date(holiday.date, tz=tz)
        if canonical:
            dates.add(canonical)
    return dates
