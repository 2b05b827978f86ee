"""Fetch contract used by timeline sections and an in-memory implementation."""

from __future__ import annotations

from typing import Optional, Protocol

from timeline_engine.schema import FetchResult, RawEvent


class TimelineFetcher(Protocol):
    """Source of cursor-paginated action events.

    Implementations signal exhaustion with an empty page and no next cursor,
    and raise ``FetchError`` on transport failures.
    """

    async def fetch_by_course(self, course_id: int, cursor: Optional[int], search: str) -> FetchResult: ...

    async def fetch_by_timesort(self, cursor: Optional[int], search: str) -> FetchResult: ...


def page_result(events: list[RawEvent], limit: int) -> FetchResult:
    """Build a fetch result; a full page means more events may follow."""

    next_cursor = events[-1].id if events and len(events) >= limit else None
    return FetchResult(events=list(events), next_cursor=next_cursor)


class StaticPageFetcher:
    """Serve pages from a fixed list of events sorted by ``timesort``.

    The cursor is the id of the last event of the previous page; the next page
    starts right after it.
    """

    def __init__(self, events: list[RawEvent], limit: int = 20, limit_per_course: int = 10) -> None:
        self.events = sorted(events, key=lambda e: (e.timesort, e.id))
        self._positions = {event.id: index for index, event in enumerate(self.events)}
        self.limit = limit
        self.limit_per_course = limit_per_course

    def _page(self, events: list[RawEvent], cursor: Optional[int], search: str, limit: int) -> FetchResult:
        term = search.strip().lower()
        if term:
            events = [event for event in events if term in event.name.lower()]

        if cursor is not None:
            position = self._positions.get(cursor)
            if position is None:
                return page_result([], limit)
            events = [event for event in events if self._positions[event.id] > position]

        return page_result(events[:limit], limit)

    async def fetch_by_course(self, course_id: int, cursor: Optional[int], search: str) -> FetchResult:
        events = [event for event in self.events if event.course_id == course_id]
        return self._page(events, cursor, search, self.limit_per_course)

    async def fetch_by_timesort(self, cursor: Optional[int], search: str) -> FetchResult:
        return self._page(self.events, cursor, search, self.limit)
