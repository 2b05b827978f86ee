"""Core data schema for timeline events and section state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class RawEvent:
    """Event record as delivered by a fetcher."""

    id: int
    timesort: int
    eventtype: str
    name: str = ""
    modulename: Optional[str] = None
    icon_component: Optional[str] = None
    course_id: Optional[int] = None
    url: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class ClassifiedEvent:
    """Raw event plus the fields derived for the timeline."""

    id: int
    timesort: int
    eventtype: str
    name: str
    modulename: Optional[str]
    icon_component: Optional[str]
    course_id: Optional[int]
    url: Optional[str]
    overdue: bool
    icon_url: Optional[str] = None
    icon_title: Optional[str] = None
    extra: dict[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class DayBucket:
    """Events that fall on the same local day."""

    day_timestamp: int
    events: tuple[ClassifiedEvent, ...]


@dataclass(frozen=True)
class DateRange:
    from_: int
    to: Optional[int] = None


@dataclass(frozen=True)
class FilterDates:
    """Reference timestamps captured once per filtering pass."""

    now: int
    midnight: int
    start: int
    end: Optional[int] = None


@dataclass(frozen=True)
class FetchResult:
    events: list[RawEvent]
    next_cursor: Optional[int] = None


@dataclass(frozen=True)
class SectionSnapshot:
    """Immutable view of a section published to subscribers."""

    buckets: tuple[DayBucket, ...] = ()
    cursor: Optional[int] = None
    can_load_more: bool = False
    loading_more: bool = False

    def to_dict(self) -> dict:
        return {
            "buckets": [
                {
                    "day_timestamp": bucket.day_timestamp,
                    "events": [
                        {
                            "id": event.id,
                            "name": event.name,
                            "timesort": event.timesort,
                            "eventtype": event.eventtype,
                            "modulename": event.modulename,
                            "overdue": event.overdue,
                            "icon_url": event.icon_url,
                            "icon_title": event.icon_title,
                        }
                        for event in bucket.events
                    ],
                }
                for bucket in self.buckets
            ],
            "cursor": self.cursor,
            "can_load_more": self.can_load_more,
            "loading_more": self.loading_more,
        }
