"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, time
from enum import Enum

from .const import DEFAULT_CURRENCY


class VehicleType(str, Enum):
    """Vehicle classifications known to the toll."""

    STANDARD = "standard"
    TRACTOR = "tractor"
    EMERGENCY = "emergency"
    DIPLOMAT = "diplomat"
    FOREIGN = "foreign"
    MILITARY = "military"


class TimeFrameVariant(str, Enum):
    """How the one-hour charging window moves between passes."""

    FIXED = "fixed"
    EXTENDING = "extending"
    EXTENDING_ON_HIGHER_FEE = "extending_on_higher_fee"


def is_exempt(vehicle_type: VehicleType) -> bool:
    return vehicle_type is not VehicleType.STANDARD


@dataclass(frozen=True, slots=True)
class Vehicle:
    vehicle_type: VehicleType = VehicleType.STANDARD
    license_plate: str | None = None

    @property
    def is_toll_free(self) -> bool:
        return is_exempt(self.vehicle_type)


@dataclass(frozen=True, slots=True)
class Holiday:
    code: str
    date: date
    name: str
    localized_name: str


@dataclass(frozen=True, slots=True)
class FeeBreakpoint:
    """A time of day and the fee charged for passes before it."""

    hour: int
    minute: int
    fee: int

    def applies_before(self, value: time) -> bool:
        return value.hour < self.hour or (value.hour == self.hour and value.minute < self.minute)


@dataclass(frozen=True, slots=True)
class FeeSchedule:
    """Ordered fee breakpoints for one day.

    The fee in force at a given time is the one of the first breakpoint not yet
    reached. Times at or after the last breakpoint are free.
    """

    breakpoints: tuple[FeeBreakpoint, ...]
    currency: str = DEFAULT_CURRENCY
    max_fee: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "breakpoints", tuple(self.breakpoints))
        object.__setattr__(
            self,
            "max_fee",
            max((entry.fee for entry in self.breakpoints), default=0),
        )

    def fee_for(self, value: time) -> int:
        for entry in self.breakpoints:
            if entry.applies_before(value):
                return entry.fee
        return 0
