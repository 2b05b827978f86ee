"""Day bucketing of classified events."""

from __future__ import annotations

from typing import Iterable, Optional

from timeline_engine.classifier import Resolver, classify_event, filter_event
from timeline_engine.dates import Clock, DayStartFn, current_timestamp, resolve_filter_dates
from timeline_engine.logging import logger
from timeline_engine.schema import ClassifiedEvent, DateRange, DayBucket, RawEvent


def group_by_day(events: Iterable[ClassifiedEvent], day_start: DayStartFn) -> list[DayBucket]:
    """Group events by local day, keeping the first-seen order of days."""

    by_day: dict[int, list[ClassifiedEvent]] = {}
    for event in events:
        by_day.setdefault(day_start(event.timesort), []).append(event)

    return [DayBucket(day_timestamp=day, events=tuple(entries)) for day, entries in by_day.items()]


def merge_buckets(existing: Iterable[DayBucket], incoming: Iterable[DayBucket]) -> list[DayBucket]:
    """Merge buckets by day; days not seen before are added at the end."""

    by_day: dict[int, list[ClassifiedEvent]] = {}
    for bucket in [*existing, *incoming]:
        by_day.setdefault(bucket.day_timestamp, []).extend(bucket.events)

    return [DayBucket(day_timestamp=day, events=tuple(entries)) for day, entries in by_day.items()]


def reduce_events(
    events: list[RawEvent],
    overdue: bool,
    date_range: DateRange,
    day_start: DayStartFn,
    clock: Clock = current_timestamp,
    icon_resolver: Optional[Resolver] = None,
    title_resolver: Optional[Resolver] = None,
) -> list[DayBucket]:
    """Filter, classify and group one batch of events."""

    dates = resolve_filter_dates(date_range, clock=clock, day_start=day_start)
    kept = [
        classify_event(event, dates.now, icon_resolver, title_resolver)
        for event in events
        if filter_event(event, overdue, dates, day_start)
    ]
    buckets = group_by_day(kept, day_start)

    logger.debug(
        "timeline_events_reduced",
        received=len(events),
        kept=len(kept),
        buckets=len(buckets),
        overdue=overdue,
    )
    return buckets
