from __future__ import annotations

from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Iterator, Optional, Union

from ..core.constants import CANONICAL_DATE_FORMAT, CIVIL_UTC_OFFSET_MINUTES
from ..core.exceptions import InvalidDateError

DateLike = Union[date, datetime, str]


def civil_timezone(offset_minutes: int = CIVIL_UTC_OFFSET_MINUTES) -> tzinfo:
    """Fixed-offset timezone that defines what a "day" is for the company."""
    return timezone(timedelta(minutes=int(offset_minutes)))


CIVIL_TZ = civil_timezone()


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, CANONICAL_DATE_FORMAT).date()


def _to_civil_date(value: DateLike, tz: tzinfo) -> date:
    # datetime is a subclass of date, so it must be checked first.
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.date()
        try:
            return value.astimezone(tz).date()
        except OverflowError as e:
            raise InvalidDateError(f"Date out of range in civil time: {value!r}") from e

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError("Date value is empty")
        if len(text) == 10:
            try:
                return parse_iso_date(text)
            except ValueError as e:
                raise InvalidDateError(f"Invalid date: {value!r}") from e
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise InvalidDateError(f"Invalid date: {value!r}") from e
        return _to_civil_date(parsed, tz)

    raise InvalidDateError(f"Unsupported date value: {value!r}")


def normalize_date(value: DateLike, *, tz: tzinfo = CIVIL_TZ) -> str:
    """Return the civil day of ``value`` as a canonical ``YYYY-MM-DD`` string.

    Aware datetimes (and ISO strings carrying ``Z`` or an offset) are converted
    into the civil timezone before the day is taken. Naive datetimes and plain
    dates are assumed to already be civil time.
    """
    if value is None:
        raise InvalidDateError("Date value is missing")
    return _to_civil_date(value, tz).isoformat()


def try_normalize_date(value: Optional[DateLike], *, tz: tzinfo = CIVIL_TZ) -> Optional[str]:
    """Like :func:`normalize_date` but returns None for missing/garbled values."""
    if value is None:
        return None
    try:
        return normalize_date(value, tz=tz)
    except InvalidDateError:
        return None


def civil_day_of_week(canonical: str) -> int:
    """Day of week for a canonical date, 0=Sunday ... 6=Saturday."""
    # date.weekday() is 0=Monday ... 6=Sunday
    return (parse_iso_date(canonical).weekday() + 1) % 7


def today_civil(*, tz: tzinfo = CIVIL_TZ, now: Optional[datetime] = None) -> str:
    """Today's date in the civil timezone.

    Note: ``now`` is injectable so tests can pin the clock.
    """
    current = now or datetime.now(timezone.utc)
    return normalize_date(current, tz=tz)


def date_range(start: DateLike, end: DateLike, *, tz: tzinfo = CIVIL_TZ) -> Iterator[str]:
    """Yield every canonical date from ``start`` to ``end``, both inclusive.

    Nothing is yielded when ``start`` is after ``end``. Bounds are validated
    eagerly, so a bad bound fails at call time rather than on first iteration.
    """
    first = parse_iso_date(normalize_date(start, tz=tz))
    last = parse_iso_date(normalize_date(end, tz=tz))
    return _iter_days(first, last)


def _iter_days(first: date, last: date) -> Iterator[str]:
    # Offsets from ``first`` never step past ``last``, so date.max is reachable.
    for offset in range((last - first).days + 1):
        yield (first + timedelta(days=offset)).isoformat()


def days_between(start: DateLike, end: DateLike, *, tz: tzinfo = CIVIL_TZ) -> int:
    """Signed number of civil days from ``start`` to ``end``."""
    first = parse_iso_date(normalize_date(start, tz=tz))
    last = parse_iso_date(normalize_date(end, tz=tz))
    return (last - first).days
