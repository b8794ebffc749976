from datetime import date, datetime, timedelta

import pytest

from pytollfee.exceptions import RangeError, ValidationError
from pytollfee.holidays import (
    all_hallows_day,
    clear_holiday_cache,
    easter_sunday,
    first_saturday_on_or_after,
    get_holidays,
    holiday_for,
    is_holiday,
    is_toll_free_date,
    midsummer_day,
    midsummer_eve,
)

KNOWN_EASTERS = {
    1900: date(1900, 4, 15),
    1954: date(1954, 4, 18),
    1981: date(1981, 4, 19),
    2000: date(2000, 4, 23),
    2008: date(2008, 3, 23),
    2011: date(2011, 4, 24),
    2019: date(2019, 4, 21),
    2024: date(2024, 3, 31),
    2025: date(2025, 4, 20),
    2026: date(2026, 4, 5),
    2038: date(2038, 4, 25),
    2099: date(2099, 4, 12),
}


@pytest.mark.parametrize(("year", "expected"), sorted(KNOWN_EASTERS.items()))
def test_easter_sunday_known_years(year: int, expected: date) -> None:
    assert easter_sunday(year) == expected


def test_easter_sunday_is_a_sunday_in_range_for_every_year() -> None:
    for year in range(1900, 2100):
        easter = easter_sunday(year)
        assert easter.weekday() == 6, year
        assert date(year, 3, 22) <= easter <= date(year, 4, 25), year


@pytest.mark.parametrize("year", [1899, 2100, -1, 3000])
def test_easter_sunday_rejects_years_out_of_range(year: int) -> None:
    with pytest.raises(RangeError):
        easter_sunday(year)


@pytest.mark.parametrize("year", ["2024", 2024.0, True, None])
def test_easter_sunday_rejects_non_integer_years(year) -> None:
    with pytest.raises(ValidationError):
        easter_sunday(year)


def test_first_saturday_on_or_after() -> None:
    assert first_saturday_on_or_after(2025, 6, 20) == date(2025, 6, 21)
    # Already a Saturday.
    assert first_saturday_on_or_after(2026, 6, 20) == date(2026, 6, 20)
    assert first_saturday_on_or_after(2024, 10, 31) == date(2024, 11, 2)


def test_midsummer_and_all_hallows() -> None:
    assert midsummer_day(2025) == date(2025, 6, 21)
    assert midsummer_eve(2025) == date(2025, 6, 20)
    assert midsummer_eve(2026) == date(2026, 6, 19)
    assert all_hallows_day(2025) == date(2025, 11, 1)
    assert all_hallows_day(2026) == date(2026, 10, 31)


def test_get_holidays_2025() -> None:
    holidays = {holiday.code: holiday.date for holiday in get_holidays(2025)}
    assert holidays == {
        "new_years_day": date(2025, 1, 1),
        "epiphany": date(2025, 1, 6),
        "good_friday": date(2025, 4, 18),
        "holy_saturday": date(2025, 4, 19),
        "easter_sunday": date(2025, 4, 20),
        "easter_monday": date(2025, 4, 21),
        "first_of_may": date(2025, 5, 1),
        "ascension_day": date(2025, 5, 29),
        "national_day": date(2025, 6, 6),
        "pentecost_eve": date(2025, 6, 7),
        "pentecost": date(2025, 6, 8),
        "midsummer_eve": date(2025, 6, 20),
        "midsummer_day": date(2025, 6, 21),
        "all_hallows_day": date(2025, 11, 1),
        "christmas_eve": date(2025, 12, 24),
        "christmas_day": date(2025, 12, 25),
        "boxing_day": date(2025, 12, 26),
        "new_years_eve": date(2025, 12, 31),
    }


def test_get_holidays_sorted() -> None:
    holidays = get_holidays(2024)
    dates = [holiday.date for holiday in holidays]
    assert dates == sorted(dates)


def test_get_holidays_returns_a_copy() -> None:
    holidays = get_holidays(2024)
    holidays.clear()
    assert get_holidays(2024)


def test_holiday_for_names() -> None:
    holiday = holiday_for(date(2025, 6, 20))
    assert holiday is not None
    assert holiday.name == "Midsummer Eve"
    assert holiday.localized_name == "Midsommarafton"
    assert holiday_for(date(2025, 3, 12)) is None


def test_is_holiday_accepts_datetime() -> None:
    assert is_holiday(datetime(2025, 12, 24, 12, 0))
    assert not is_holiday(datetime(2025, 12, 23, 12, 0))


@pytest.mark.parametrize(
    "day",
    [
        date(2025, 4, 18),  # Good Friday
        date(2025, 4, 21),  # Easter Monday
        date(2025, 5, 1),  # First of May, Thursday
        date(2025, 5, 29),  # Ascension
        date(2025, 6, 6),  # National Day, Friday
        date(2025, 6, 20),  # Midsummer Eve
        date(2025, 12, 24),
        date(2025, 12, 31),
        date(2026, 1, 6),
    ],
)
def test_weekday_holidays_are_toll_free(day: date) -> None:
    assert day.weekday() < 5
    assert is_toll_free_date(day)


def test_regular_weekday_is_not_toll_free() -> None:
    assert not is_toll_free_date(date(2025, 3, 12))
    assert not is_toll_free_date(date(2025, 6, 19))


def test_every_weekend_day_is_toll_free() -> None:
    day = date(2024, 1, 1)
    while day.year < 2026:
        if day.weekday() >= 5:
            assert is_toll_free_date(day), day
        day += timedelta(days=1)


def test_dates_outside_calendar_range() -> None:
    # 1900-01-01 was a Monday.
    assert is_toll_free_date(date(1899, 12, 30))
    # Fixed-date holidays, Midsummer and All Hallows' Day need no Easter.
    assert is_toll_free_date(date(2100, 12, 24))  # Friday
    assert is_toll_free_date(date(2100, 1, 1))  # Friday
    assert is_toll_free_date(date(1899, 6, 23))  # Midsummer Eve, Friday
    holiday = holiday_for(date(2100, 12, 24))
    assert holiday is not None
    assert holiday.code == "christmas_eve"
    assert holiday_for(date(1899, 6, 23)).code == "midsummer_eve"
    with pytest.raises(RangeError):
        is_toll_free_date(date(1899, 12, 29))
    with pytest.raises(RangeError):
        is_toll_free_date(date(2100, 1, 4))


def test_is_toll_free_date_rejects_other_types() -> None:
    with pytest.raises(ValidationError):
        is_toll_free_date("2025-03-12")


def test_clear_holiday_cache_keeps_results_stable() -> None:
    first = get_holidays(2030)
    clear_holiday_cache()
    assert get_holidays(2030) == first
