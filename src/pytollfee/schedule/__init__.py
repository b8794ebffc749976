"""Packaged fee schedule."""

from __future__ import annotations

from .loader import clear_schedule_cache, load_fee_schedule, load_schedule_schema

__all__ = ["clear_schedule_cache", "load_fee_schedule", "load_schedule_schema"]
