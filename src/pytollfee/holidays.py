"""Swedish public holidays and toll-free dates.

Based on https://sv.wikipedia.org/wiki/Helgdagar_i_Sverige
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from functools import lru_cache

from .const import ALL_HALLOWS_ANCHOR, EASTER_MAX_YEAR, EASTER_MIN_YEAR, MIDSUMMER_ANCHOR
from .exceptions import RangeError, ValidationError
from .models import Holiday

_LOGGER = logging.getLogger(__name__)
_SATURDAY = 5

# Offsets in days from Easter Sunday.
_EASTER_HOLIDAYS = (
    (-2, "good_friday", "Good Friday", "Långfredagen"),
    (-1, "holy_saturday", "Holy Saturday", "Påskafton"),
    (0, "easter_sunday", "Easter Sunday", "Påskdagen"),
    (1, "easter_monday", "Easter Monday", "Annandag påsk"),
    (39, "ascension_day", "Ascension Day", "Kristi himmelsfärdsdag"),
    (48, "pentecost_eve", "Pentecost Eve", "Pingstafton"),
    (49, "pentecost", "Pentecost", "Pingstdagen"),
)

_FIXED_HOLIDAYS = (
    (1, 1, "new_years_day", "New Year's Day", "Nyårsdagen"),
    (1, 6, "epiphany", "Epiphany", "Trettondedag jul"),
    (5, 1, "first_of_may", "First of May", "Första maj"),
    (6, 6, "national_day", "National Day", "Sveriges nationaldag"),
    (12, 24, "christmas_eve", "Christmas Eve", "Julafton"),
    (12, 25, "christmas_day", "Christmas Day", "Juldagen"),
    (12, 26, "boxing_day", "Boxing Day", "Annandag jul"),
    (12, 31, "new_years_eve", "New Year's Eve", "Nyårsafton"),
)


def _validate_year(year: int) -> int:
    if isinstance(year, bool) or not isinstance(year, int):
        raise ValidationError("Year must be an integer.")
    if year < EASTER_MIN_YEAR or year > EASTER_MAX_YEAR:
        raise RangeError(
            f"The year must be in the range [{EASTER_MIN_YEAR}, {EASTER_MAX_YEAR}].",
            user_message="Dates outside the supported calendar range cannot be tolled.",
        )
    return year


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise ValidationError("Value must be a date or datetime.")
    return value


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for a year in the supported range.

    Uses the congruence method that is exact for 1900-2099, see
    https://sv.wikipedia.org/wiki/P%C3%A5skdagen
    """
    _validate_year(year)
    a = year % 19
    b = year % 4
    c = year % 7

    d = (19 * a + 24) % 30
    e = (2 * b + 4 * c + 6 * d + 5) % 7

    f = d + e
    if f == 35 or (d == 28 and e == 6):
        f -= 7

    return date(year, 3, 22) + timedelta(days=f)


def first_saturday_on_or_after(year: int, month: int, day: int) -> date:
    current = date(year, month, day)
    while current.weekday() != _SATURDAY:
        current += timedelta(days=1)
    return current


def midsummer_day(year: int) -> date:
    return first_saturday_on_or_after(year, *MIDSUMMER_ANCHOR)


def midsummer_eve(year: int) -> date:
    return midsummer_day(year) - timedelta(days=1)


def all_hallows_day(year: int) -> date:
    return first_saturday_on_or_after(year, *ALL_HALLOWS_ANCHOR)


def _fixed_holidays(year: int) -> list[Holiday]:
    return [
        Holiday(code, date(year, month, day), name, localized_name)
        for month, day, code, name, localized_name in _FIXED_HOLIDAYS
    ]


def _anchored_holidays(year: int) -> list[Holiday]:
    midsummer = midsummer_day(year)
    return [
        Holiday("midsummer_eve", midsummer - timedelta(days=1), "Midsummer Eve", "Midsommarafton"),
        Holiday("midsummer_day", midsummer, "Midsummer Day", "Midsommardagen"),
        Holiday("all_hallows_day", all_hallows_day(year), "All Hallows' Day", "Alla helgons dag"),
    ]


def _easter_holidays(year: int) -> list[Holiday]:
    easter = easter_sunday(year)
    return [
        Holiday(code, easter + timedelta(days=offset), name, localized_name)
        for offset, code, name, localized_name in _EASTER_HOLIDAYS
    ]


@lru_cache(maxsize=256)
def _holidays_for_year(year: int) -> tuple[Holiday, ...]:
    _LOGGER.debug("Computing holidays for %s", year)
    holidays = _fixed_holidays(year) + _anchored_holidays(year) + _easter_holidays(year)
    return tuple(sorted(holidays, key=lambda holiday: holiday.date))


def get_holidays(year: int) -> list[Holiday]:
    """Return all Swedish public holidays for a year, ordered by date."""
    return list(_holidays_for_year(_validate_year(year)))


def holiday_for(value: date) -> Holiday | None:
    """Return the holiday falling on a date, if any.

    Fixed-date holidays, Midsummer and All Hallows' Day are known for any year.
    Only the Easter-relative holidays need a year in the supported range, so
    other dates outside it raise ``RangeError``.
    """
    day = _as_date(value)
    in_range = EASTER_MIN_YEAR <= day.year <= EASTER_MAX_YEAR
    if in_range:
        candidates = _holidays_for_year(day.year)
    else:
        candidates = tuple(_fixed_holidays(day.year) + _anchored_holidays(day.year))
    for holiday in candidates:
        if holiday.date == day:
            return holiday
    if not in_range:
        _validate_year(day.year)
    return None


def is_holiday(value: date) -> bool:
    return holiday_for(value) is not None


def is_weekend(value: date) -> bool:
    return _as_date(value).weekday() >= _SATURDAY


def is_toll_free_date(value: date) -> bool:
    """Return True for Saturday/Sunday or a Swedish public holiday."""
    day = _as_date(value)
    return is_weekend(day) or is_holiday(day)


def clear_holiday_cache() -> None:
    """Clear cached holiday calendars (used in tests)."""
    _holidays_for_year.cache_clear()
