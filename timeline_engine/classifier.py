"""Event filtering and classification."""

from __future__ import annotations

from typing import Callable, Optional

from timeline_engine.dates import DayStartFn
from timeline_engine.schema import ClassifiedEvent, FilterDates, RawEvent

Resolver = Callable[[str], Optional[str]]

# Opening events are only listed for days after today.
_OPEN_EVENT_TYPES = {"open", "opensubmission"}


def filter_event(event: RawEvent, overdue: bool, dates: FilterDates, day_start: DayStartFn) -> bool:
    """Return whether an event belongs in a section."""

    if event.timesort < dates.start or (dates.end is not None and event.timesort >= dates.end):
        return False

    if event.eventtype in _OPEN_EVENT_TYPES:
        return day_start(event.timesort) > dates.midnight

    # Overdue sections over-fetch everything due today; whether an item is
    # overdue is decided here against the local ``now``.
    return not overdue or event.timesort < dates.now


def classify_event(
    event: RawEvent,
    now: int,
    icon_resolver: Optional[Resolver] = None,
    title_resolver: Optional[Resolver] = None,
) -> ClassifiedEvent:
    """Build the timeline view of a raw event without modifying it."""

    modulename = event.modulename or event.icon_component
    icon_url = icon_resolver(event.icon_component) if icon_resolver and event.icon_component else None
    icon_title = title_resolver(modulename) if title_resolver and modulename else None

    return ClassifiedEvent(
        id=event.id,
        timesort=event.timesort,
        eventtype=event.eventtype,
        name=event.name,
        modulename=modulename,
        icon_component=event.icon_component,
        course_id=event.course_id,
        url=event.url,
        overdue=event.timesort < now,
        icon_url=icon_url,
        icon_title=icon_title,
        extra=dict(event.extra),
    )
