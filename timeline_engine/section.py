"""A section of the timeline: accumulated day buckets plus pagination state."""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Optional

from timeline_engine.classifier import Resolver
from timeline_engine.config import get_settings
from timeline_engine.dates import Clock, DayStart, DayStartFn, current_timestamp
from timeline_engine.errors import LoadInProgressError
from timeline_engine.fetching import TimelineFetcher
from timeline_engine.grouping import merge_buckets, reduce_events
from timeline_engine.logging import logger
from timeline_engine.observable import SnapshotSubject
from timeline_engine.schema import DateRange, DayBucket, RawEvent, SectionSnapshot


class TimelineSection:
    """Collection of events shown in one timeline section.

    The section is seeded from an optional first page and grows through
    ``load_more``. Consumers read immutable ``SectionSnapshot`` values via
    ``subscribe`` or ``snapshot``.
    """

    def __init__(
        self,
        search: Optional[str],
        overdue: bool,
        date_range: DateRange,
        fetcher: TimelineFetcher,
        course_id: Optional[int] = None,
        events: Optional[list[RawEvent]] = None,
        cursor: Optional[int] = None,
        clock: Clock = current_timestamp,
        day_start: Optional[DayStartFn] = None,
        icon_resolver: Optional[Resolver] = None,
        title_resolver: Optional[Resolver] = None,
        merge_days: Optional[bool] = None,
        reject_concurrent_loads: Optional[bool] = None,
    ) -> None:
        settings = get_settings()
        self.search = search
        self.overdue = overdue
        self.date_range = date_range
        self.fetcher = fetcher
        self.course_id = course_id
        self.clock = clock
        self.day_start = day_start or DayStart(settings.timezone)
        self.icon_resolver = icon_resolver
        self.title_resolver = title_resolver
        self.merge_days = settings.merge_days if merge_days is None else merge_days
        self.reject_concurrent_loads = (
            settings.reject_concurrent_loads if reject_concurrent_loads is None else reject_concurrent_loads
        )

        buckets = self._reduce(events) if events else []
        self.data = SnapshotSubject(
            SectionSnapshot(
                buckets=tuple(buckets),
                cursor=cursor,
                can_load_more=cursor is not None,
                loading_more=False,
            )
        )

    @property
    def snapshot(self) -> SectionSnapshot:
        return self.data.value

    def subscribe(self, callback: Callable[[SectionSnapshot], None]) -> Callable[[], None]:
        return self.data.subscribe(callback)

    def _reduce(self, events: list[RawEvent]) -> list[DayBucket]:
        return reduce_events(
            events,
            self.overdue,
            self.date_range,
            self.day_start,
            clock=self.clock,
            icon_resolver=self.icon_resolver,
            title_resolver=self.title_resolver,
        )

    async def _fetch(self, cursor: Optional[int]):
        search = self.search or ""
        if self.course_id is not None:
            return await self.fetcher.fetch_by_course(self.course_id, cursor, search)
        return await self.fetcher.fetch_by_timesort(cursor, search)

    async def load_more(self) -> None:
        """Fetch the next page and append its day buckets.

        Errors from the fetcher propagate unchanged; the loading flag is
        cleared on every exit path and the accumulated state is only updated
        after a successful fetch.
        """

        if self.reject_concurrent_loads and self.snapshot.loading_more:
            raise LoadInProgressError("A page is already being loaded for this section")

        self.data.publish(replace(self.snapshot, loading_more=True))
        cursor = self.snapshot.cursor
        logger.info("timeline_load_more_started", cursor=cursor, course_id=self.course_id)

        buckets: Optional[list[DayBucket]] = None
        try:
            result = await self._fetch(cursor)
            new_buckets = self._reduce(result.events)
            if self.merge_days:
                buckets = merge_buckets(self.snapshot.buckets, new_buckets)
            else:
                buckets = [*self.snapshot.buckets, *new_buckets]
        except Exception as exc:
            logger.warning(
                "timeline_load_more_failed",
                cursor=cursor,
                course_id=self.course_id,
                error=str(exc),
            )
            raise
        finally:
            if buckets is None:
                self.data.publish(replace(self.snapshot, loading_more=False))

        self.data.publish(
            SectionSnapshot(
                buckets=tuple(buckets),
                cursor=result.next_cursor,
                can_load_more=result.next_cursor is not None,
                loading_more=False,
            )
        )
        logger.info(
            "timeline_load_more_completed",
            cursor=result.next_cursor,
            course_id=self.course_id,
            fetched=len(result.events),
            new_buckets=len(new_buckets),
            total_buckets=len(buckets),
        )
