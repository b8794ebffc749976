"""pyTollFee package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .calculator import TollCalculator, daily_toll
from .exceptions import ConfigError, PyTollFeeError, RangeError, ValidationError
from .fees import fee_for
from .holidays import easter_sunday, get_holidays, is_holiday, is_toll_free_date
from .models import (
    FeeBreakpoint,
    FeeSchedule,
    Holiday,
    TimeFrameVariant,
    Vehicle,
    VehicleType,
    is_exempt,
)

try:
    __version__ = version("pytollfee")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "ConfigError",
    "FeeBreakpoint",
    "FeeSchedule",
    "Holiday",
    "PyTollFeeError",
    "RangeError",
    "TimeFrameVariant",
    "TollCalculator",
    "ValidationError",
    "Vehicle",
    "VehicleType",
    "__version__",
    "daily_toll",
    "easter_sunday",
    "fee_for",
    "get_holidays",
    "is_exempt",
    "is_holiday",
    "is_toll_free_date",
]
