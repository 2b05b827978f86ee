"""Build a timeline section from a CSV/JSON event dataset and print it."""

from __future__ import annotations

import argparse
import asyncio
import json
import sys
from datetime import date, datetime, timezone
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from timeline_engine.adapters import csv_adapter, json_adapter
from timeline_engine.config import get_settings
from timeline_engine.dates import DayStart, current_timestamp
from timeline_engine.fetching import StaticPageFetcher
from timeline_engine.schema import DateRange
from timeline_engine.section import TimelineSection


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _to_timestamp(value: str) -> int:
    if value.isdigit():
        return int(value)
    day = date.fromisoformat(value)
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


async def _run(args: argparse.Namespace) -> dict:
    settings = get_settings()
    events = _load_events(Path(args.data))
    fetcher = StaticPageFetcher(
        events,
        limit=settings.events_limit,
        limit_per_course=settings.events_limit_per_course,
    )

    date_range = DateRange(
        from_=_to_timestamp(args.date_from) if args.date_from else DayStart(settings.timezone)(current_timestamp()),
        to=_to_timestamp(args.date_to) if args.date_to else None,
    )

    if args.course is not None:
        first = await fetcher.fetch_by_course(args.course, None, args.search or "")
    else:
        first = await fetcher.fetch_by_timesort(None, args.search or "")

    section = TimelineSection(
        args.search,
        args.overdue,
        date_range,
        fetcher,
        course_id=args.course,
        events=first.events,
        cursor=first.next_cursor,
    )
    for _ in range(args.pages - 1):
        if not section.snapshot.can_load_more:
            break
        await section.load_more()

    return section.snapshot.to_dict()


def main() -> None:
    parser = argparse.ArgumentParser(description="Aggregate timeline events into day buckets")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON events file")
    parser.add_argument("--from", dest="date_from", help="Start date (YYYY-MM-DD or epoch seconds), default today")
    parser.add_argument("--to", dest="date_to", help="End date (YYYY-MM-DD or epoch seconds), exclusive")
    parser.add_argument("--overdue", action="store_true", help="Only keep events already due")
    parser.add_argument("--course", type=int, help="Restrict to a course id")
    parser.add_argument("--search", help="Filter events by name")
    parser.add_argument("--pages", type=int, default=1, help="Number of pages to load")
    args = parser.parse_args()

    print(json.dumps(asyncio.run(_run(args)), indent=2))


if __name__ == "__main__":
    main()
