"""Demo script for timeline-engine."""

import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeline_engine.adapters.csv_adapter import parse
from timeline_engine.fetching import StaticPageFetcher
from timeline_engine.schema import DateRange
from timeline_engine.section import TimelineSection

_DAY0 = 1735689600  # 2025-01-01T00:00:00Z


async def main() -> None:
    events = parse(str(Path(__file__).resolve().parent / "sample_events.csv"))
    fetcher = StaticPageFetcher(events, limit=3)
    first = await fetcher.fetch_by_timesort(None, "")

    section = TimelineSection(
        None,
        False,
        DateRange(from_=_DAY0),
        fetcher,
        events=first.events,
        cursor=first.next_cursor,
        clock=lambda: _DAY0 + 12 * 3600,
    )
    section.subscribe(lambda snapshot: print("Buckets:", len(snapshot.buckets), "loading:", snapshot.loading_more))

    while section.snapshot.can_load_more:
        await section.load_more()

    for bucket in section.snapshot.buckets:
        print(bucket.day_timestamp, [(e.name, e.overdue) for e in bucket.events])


if __name__ == "__main__":
    asyncio.run(main())
