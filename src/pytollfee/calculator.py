"""Daily toll calculation."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import UTC, date, datetime, time, timedelta

from .const import DEFAULT_DAILY_CAP
from .exceptions import ValidationError
from .fees import local_time_of_day
from .holidays import is_toll_free_date
from .models import FeeSchedule, TimeFrameVariant, Vehicle, VehicleType
from .schedule import load_fee_schedule
from .util import coerce_vehicle, mask_license_plate, to_local_datetime, validate_pass_times

_LOGGER = logging.getLogger(__name__)
_ONE_HOUR = timedelta(hours=1)


class TollCalculator:
    """Facade for toll lookups and daily totals.

    A vehicle is only charged once per hour; when several passes fall in the
    same hour the highest fee applies. How the hour is measured depends on the
    time-frame variant. Consider passes 40 minutes apart with the fees
    A=8, B=8, C=13, D=18, E=13, F=8:

    - ``EXTENDING`` restarts the hour on every chargeable pass, so all six
      passes merge into one hour and only D is paid (18).
    - ``FIXED`` keeps the hour anchored where it started. C opens a new hour
      since more than an hour has passed since A, D upgrades it, and E opens
      another one: A, D and E are paid (39).
    - ``EXTENDING_ON_HIGHER_FEE`` restarts the hour only when the fee goes up,
      so it is measured from the charge actually paid: A, D and F are paid (34).

    ``EXTENDING_ON_HIGHER_FEE`` is the default.
    """

    def __init__(
        self,
        *,
        daily_cap: int = DEFAULT_DAILY_CAP,
        variant: TimeFrameVariant = TimeFrameVariant.EXTENDING_ON_HIGHER_FEE,
        schedule: FeeSchedule | None = None,
    ) -> None:
        if isinstance(daily_cap, bool) or not isinstance(daily_cap, int) or daily_cap <= 0:
            raise ValidationError("daily_cap must be a positive integer.")
        try:
            variant = TimeFrameVariant(variant)
        except ValueError as exc:
            raise ValidationError(f"Unknown time frame variant: {variant!r}.") from exc
        if schedule is not None and not isinstance(schedule, FeeSchedule):
            raise ValidationError("schedule must be a FeeSchedule.")
        self._daily_cap = daily_cap
        self._variant = variant
        self._schedule = schedule

    @property
    def daily_cap(self) -> int:
        return self._daily_cap

    @property
    def variant(self) -> TimeFrameVariant:
        return self._variant

    @property
    def schedule(self) -> FeeSchedule:
        if self._schedule is None:
            self._schedule = load_fee_schedule()
        return self._schedule

    def fee_for(self, value: time | datetime) -> int:
        """Return the fee for a single pass, ignoring vehicle and date."""
        return self.schedule.fee_for(local_time_of_day(value))

    def is_toll_free_date(self, value: date | datetime) -> bool:
        if isinstance(value, datetime):
            value = to_local_datetime(value)
        return is_toll_free_date(value)

    def daily_toll(
        self,
        vehicle: Vehicle | VehicleType | str,
        times: Iterable[str | datetime],
    ) -> int:
        """Calculate the toll for a vehicle during one day.

        ``times`` must be non-empty, from a single day, strictly ascending and
        free of duplicates; otherwise ``ValidationError`` is raised.
        """
        resolved = coerce_vehicle(vehicle)
        passes = validate_pass_times(times)
        _LOGGER.debug(
            "daily_toll started for %s vehicle %s with %s passes",
            resolved.vehicle_type.value,
            mask_license_plate(resolved.license_plate),
            len(passes),
        )
        if resolved.is_toll_free:
            _LOGGER.debug("Vehicle type %s is toll free", resolved.vehicle_type.value)
            return 0
        if is_toll_free_date(passes[0].date()):
            _LOGGER.debug("Date %s is toll free", passes[0].date().isoformat())
            return 0
        total = self._total_fee(passes)
        _LOGGER.debug("daily_toll completed with total %s", total)
        return total

    def _total_fee(self, passes: list[datetime]) -> int:
        total = 0
        # Start of the current hour as a UTC instant, and the fee paid for it.
        window: tuple[datetime, int] | None = None

        for passed_at in passes:
            fee = self.schedule.fee_for(passed_at.time())
            if fee == 0:
                continue

            instant = passed_at.astimezone(UTC)
            if window is None or instant - window[0] > _ONE_HOUR:
                # A new hour has started.
                total += fee
                window = (instant, fee)
            elif fee > window[1]:
                # Same hour, the higher fee replaces the one already paid.
                total += fee - window[1]
                started_at = window[0] if self._variant is TimeFrameVariant.FIXED else instant
                window = (started_at, fee)
            elif self._variant is TimeFrameVariant.EXTENDING:
                window = (instant, window[1])

            if total >= self._daily_cap:
                _LOGGER.debug("Daily cap of %s reached at %s", self._daily_cap, passed_at.time())
                return self._daily_cap

        return total


_DEFAULT_CALCULATOR = TollCalculator()


def daily_toll(vehicle: Vehicle | VehicleType | str, times: Iterable[str | datetime]) -> int:
    return _DEFAULT_CALCULATOR.daily_toll(vehicle, times)
