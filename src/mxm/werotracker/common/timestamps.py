"""
ISO-8601 timestamp helpers.

All timestamps are UTC with millisecond precision and a 'Z' suffix,
e.g. "2025-10-30T07:59:12.345Z".
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

Clock = Callable[[], datetime]


def to_iso_utc(moment: datetime) -> str:
    """Format an aware (or naive UTC) datetime as ISO-8601 UTC with 'Z'."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (
        moment.astimezone(timezone.utc)
        .isoformat(timespec="milliseconds")
        .replace("+00:00", "Z")
    )


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def utc_now_iso(clock: Clock = utc_now) -> str:
    """Return the current time (per `clock`) as an ISO-8601 UTC string."""
    return to_iso_utc(clock())


def mtime_iso(path: Path) -> str:
    """Return the last-modified time of `path` as an ISO-8601 UTC string."""
    return to_iso_utc(datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc))


__all__ = ["Clock", "to_iso_utc", "utc_now", "utc_now_iso", "mtime_iso"]
