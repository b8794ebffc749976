"""Shared utilities for validation and normalization."""

from __future__ import annotations

import re
from collections.abc import Iterable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .const import LOCAL_TIME_ZONE
from .exceptions import ValidationError
from .models import Vehicle, VehicleType

_LICENSE_PLATE_RE = re.compile(r"[^A-Z0-9]")

try:
    LOCAL_TZ = ZoneInfo(LOCAL_TIME_ZONE)
except ZoneInfoNotFoundError:
    LOCAL_TZ = UTC


def normalize_license_plate(plate: str) -> str:
    if not isinstance(plate, str):
        raise ValidationError("License plate must be a string.")
    normalized = _LICENSE_PLATE_RE.sub("", plate.upper())
    if not normalized:
        raise ValidationError("License plate is empty after normalization.")
    return normalized


def mask_license_plate(plate: str | None) -> str:
    if not isinstance(plate, str):
        return "***"
    normalized = _LICENSE_PLATE_RE.sub("", plate.upper())
    if not normalized:
        return "***"
    if len(normalized) <= 2:
        return "*" * len(normalized)
    if len(normalized) <= 4:
        return f"{normalized[:1]}{'*' * (len(normalized) - 2)}{normalized[-1:]}"
    masked = "*" * (len(normalized) - 4)
    return f"{normalized[:2]}{masked}{normalized[-2:]}"


def coerce_vehicle(value: Vehicle | VehicleType | str) -> Vehicle:
    if value is None:
        raise ValidationError("Vehicle is required.")
    if isinstance(value, Vehicle):
        if not isinstance(value.vehicle_type, VehicleType):
            raise ValidationError("Vehicle type is not a known classification.")
        if value.license_plate is None:
            return value
        return Vehicle(value.vehicle_type, normalize_license_plate(value.license_plate))
    if isinstance(value, VehicleType):
        return Vehicle(value)
    if isinstance(value, str):
        try:
            return Vehicle(VehicleType(value.strip().lower()))
        except ValueError as exc:
            raise ValidationError(f"Unknown vehicle type: {value!r}.") from exc
    raise ValidationError("Vehicle must be a Vehicle, a VehicleType or a vehicle type name.")


def to_local_datetime(value: datetime) -> datetime:
    """Return an aware datetime in Swedish local time.

    Naive values are taken to already be local time.
    """
    if not isinstance(value, datetime):
        raise ValidationError("Timestamp must be a datetime.")
    if value.tzinfo is None:
        return value.replace(tzinfo=LOCAL_TZ)
    return value.astimezone(LOCAL_TZ)


def parse_timestamp(value: str | datetime) -> datetime:
    if isinstance(value, datetime):
        return to_local_datetime(value)
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Timestamp must be a datetime or a non-empty string.")
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    try:
        parsed = datetime.fromisoformat(raw)
    except ValueError as exc:
        raise ValidationError("Timestamp is not a valid ISO 8601 value.") from exc
    return to_local_datetime(parsed)


def validate_pass_times(times: Iterable[str | datetime]) -> list[datetime]:
    """Normalize pass times and check they form one ordered day."""
    if times is None:
        raise ValidationError("Pass times are required.")
    if isinstance(times, (str, datetime)):
        raise ValidationError("Pass times must be a sequence of timestamps.")
    try:
        values = list(times)
    except TypeError as exc:
        raise ValidationError("Pass times must be a sequence of timestamps.") from exc
    normalized = [parse_timestamp(value) for value in values]
    if not normalized:
        raise ValidationError("No pass times supplied.")
    for previous, current in zip(normalized, normalized[1:]):
        if current.date() != previous.date():
            raise ValidationError("All pass times must be from the same day.")
        # Local wall-clock values ignore fold, so order is checked on UTC instants.
        previous_instant = previous.astimezone(UTC)
        current_instant = current.astimezone(UTC)
        if current_instant < previous_instant:
            raise ValidationError("Pass times must be in ascending order.")
        if current_instant == previous_instant:
            raise ValidationError("Duplicate pass times found.")
    return normalized
