"""Fee schedule loading."""

from __future__ import annotations

import json
import logging
from importlib import resources
from importlib.resources.abc import Traversable
from typing import Any

from ..const import DEFAULT_CURRENCY, SCHEDULE_FILENAME, SCHEMA_FILENAME
from ..exceptions import ConfigError
from ..models import FeeBreakpoint, FeeSchedule

_LOGGER = logging.getLogger(__name__)
_SCHEDULE_CACHE: FeeSchedule | None = None


def _schedule_root() -> Traversable:
    return resources.files("pytollfee.schedule")


def load_schedule_schema() -> dict:
    schema_path = _schedule_root() / SCHEMA_FILENAME
    return json.loads(schema_path.read_text(encoding="utf-8"))


def read_schedule_file() -> Any:
    schedule_path = _schedule_root() / SCHEDULE_FILENAME
    try:
        return json.loads(schedule_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ConfigError("Fee schedule file was not found.") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError("Fee schedule is not valid JSON.") from exc


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _build_breakpoint(data: Any) -> FeeBreakpoint:
    if not isinstance(data, dict):
        raise ConfigError("Fee breakpoint must be a JSON object.")
    missing = [key for key in ("hour", "minute", "fee") if key not in data]
    if missing:
        raise ConfigError(f"Fee breakpoint missing keys: {', '.join(missing)}.")
    hour = data["hour"]
    minute = data["minute"]
    fee = data["fee"]
    if not _is_int(hour) or not 0 <= hour <= 23:
        raise ConfigError("Fee breakpoint hour must be an integer between 0 and 23.")
    if not _is_int(minute) or not 0 <= minute <= 59:
        raise ConfigError("Fee breakpoint minute must be an integer between 0 and 59.")
    if not _is_int(fee) or fee < 0:
        raise ConfigError("Fee breakpoint fee must be a non-negative integer.")
    return FeeBreakpoint(hour=hour, minute=minute, fee=fee)


def build_fee_schedule(data: Any) -> FeeSchedule:
    if not isinstance(data, dict):
        raise ConfigError("Fee schedule must be a JSON object.")
    entries = data.get("breakpoints")
    if not isinstance(entries, list) or not entries:
        raise ConfigError("Fee schedule breakpoints must be a non-empty list.")
    currency = data.get("currency", DEFAULT_CURRENCY)
    if not isinstance(currency, str) or not currency:
        raise ConfigError("Fee schedule currency must be a non-empty string.")
    breakpoints = [_build_breakpoint(entry) for entry in entries]
    for previous, current in zip(breakpoints, breakpoints[1:]):
        if (current.hour, current.minute) <= (previous.hour, previous.minute):
            raise ConfigError("Fee breakpoints must be in ascending time order.")
    return FeeSchedule(breakpoints=tuple(breakpoints), currency=currency)


def load_fee_schedule() -> FeeSchedule:
    global _SCHEDULE_CACHE
    if _SCHEDULE_CACHE is not None:
        return _SCHEDULE_CACHE
    schedule = build_fee_schedule(read_schedule_file())
    _LOGGER.debug("Loaded fee schedule with %s breakpoints", len(schedule.breakpoints))
    _SCHEDULE_CACHE = schedule
    return schedule


def clear_schedule_cache() -> None:
    """Clear the cached fee schedule (used in tests)."""
    global _SCHEDULE_CACHE
    _SCHEDULE_CACHE = None
