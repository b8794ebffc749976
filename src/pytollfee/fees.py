"""Time-of-day fee lookup."""

from __future__ import annotations

from datetime import datetime, time

from .exceptions import ValidationError
from .models import FeeSchedule
from .schedule import load_fee_schedule
from .util import to_local_datetime


def local_time_of_day(value: time | datetime) -> time:
    if isinstance(value, datetime):
        return to_local_datetime(value).time()
    if isinstance(value, time):
        return value
    raise ValidationError("Time of day must be a time or datetime.")


def fee_for(value: time | datetime, schedule: FeeSchedule | None = None) -> int:
    """Return the fee in force at a time of day."""
    if schedule is None:
        schedule = load_fee_schedule()
    return schedule.fee_for(local_time_of_day(value))
