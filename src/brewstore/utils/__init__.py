"""Shared utility helpers."""

from .time import ensure_utc, next_timestamp, utc_now

__all__ = ["ensure_utc", "next_timestamp", "utc_now"]
