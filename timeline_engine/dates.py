"""Time services and date window resolution."""

from __future__ import annotations

import time
from datetime import datetime, timezone
from typing import Callable, Optional
from zoneinfo import ZoneInfo

from timeline_engine.schema import DateRange, FilterDates

Clock = Callable[[], int]
DayStartFn = Callable[[int], int]


def current_timestamp() -> int:
    """Return the current time as integer epoch seconds."""

    return int(time.time())


class DayStart:
    """Start-of-day calculator for epoch timestamps in a given timezone."""

    def __init__(self, tz: str = "UTC") -> None:
        self.zone = ZoneInfo(tz)

    def __call__(self, timestamp: int) -> int:
        local = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone(self.zone)
        midnight = local.replace(hour=0, minute=0, second=0, microsecond=0, fold=0)
        return int(midnight.timestamp())

    def __repr__(self) -> str:
        return f"DayStart({self.zone.key!r})"


def resolve_filter_dates(
    date_range: DateRange,
    clock: Clock = current_timestamp,
    day_start: Optional[DayStartFn] = None,
) -> FilterDates:
    """Resolve a date range into day-aligned boundaries plus ``now`` and ``midnight``."""

    day_start = day_start or DayStart()
    now = clock()
    return FilterDates(
        now=now,
        midnight=day_start(now),
        start=day_start(date_range.from_),
        end=day_start(date_range.to) if date_range.to is not None else None,
    )
