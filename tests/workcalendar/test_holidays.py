from attendance_resolver.workcalendar.holidays import find_holiday
from attendance_resolver.workcalendar.model import Holiday
from attendance_resolver.workcalendar.working_days import count_working_days


def test_find_holiday_matches_canonical_date():
    holidays = [Holiday(date="2025-01-26", name="Republic Day"), Holiday(date="2025-08-15", name="Independence Day")]
    assert find_holiday("2025-08-15", holidays).name == "Independence Day"
    assert find_holiday("2025-08-16", holidays) is None


def test_find_holiday_normalizes_stored_timestamp():
    # IST midnight persisted as UTC
    holidays = [Holiday(date="2025-08-14T18:30:00.000Z", name="Independence Day")]
    assert find_holiday("2025-08-15", holidays) is not None


def test_tentative_holiday_is_not_authoritative():
    holidays = [Holiday(date="2025-10-21", name="Diwali", is_tentative=True)]
    assert find_holiday("2025-10-21", holidays) is None


def test_malformed_holidays_are_skipped():
    holidays = [Holiday(date=None, name="Broken"), Holiday(date="garbage", name="Broken 2"), Holiday(date="2025-12-25", name="Christmas")]
    assert find_holiday("2025-12-25", holidays).name == "Christmas"


def test_first_match_wins():
    holidays = [Holiday(date="2025-12-25", name="Christmas"), Holiday(date="2025-12-25", name="Duplicate")]
    assert find_holiday("2025-12-25", holidays).name == "Christmas"


def test_holiday_from_mapping_defaults():
    h = Holiday.from_mapping({"date": "2025-01-01", "_id": 7})
    assert h.name == "Holiday"
    assert h.is_tentative is False
    assert h.holiday_id == "7"


def test_count_working_days_week():
    # 2025-03-03 (Mon) .. 2025-03-09 (Sun), 8th is the 2nd Saturday
    assert count_working_days("2025-03-03", "2025-03-09", "All Saturdays Working") == 6
    assert count_working_days("2025-03-03", "2025-03-09", "Week 2 & 4 Off") == 5
    assert count_working_days("2025-03-03", "2025-03-09", "Week 1 & 3 Off") == 6


def test_count_working_days_excludes_authoritative_holidays_only():
    holidays = [Holiday(date="2025-03-05", name="Holiday"), Holiday(date="2025-03-06", name="Maybe", is_tentative=True)]
    assert count_working_days("2025-03-03", "2025-03-09", "All Saturdays Off", holidays) == 4


def test_count_working_days_empty_range():
    assert count_working_days("2025-03-09", "2025-03-03", "All Saturdays Off") == 0


def test_count_working_days_through_last_representable_day():
    # any seven consecutive days hold exactly one Sunday
    assert count_working_days("9999-12-25", "9999-12-31", "All Saturdays Working") == 6
