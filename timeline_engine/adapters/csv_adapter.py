"""CSV adapter for action events."""

from __future__ import annotations

import csv

from timeline_engine.errors import EventParseError
from timeline_engine.schema import RawEvent

_REQUIRED_FIELDS = ("id", "timesort", "eventtype")


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def _parse_row(row: dict, row_number: int) -> RawEvent:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise EventParseError(f"Row {row_number}: missing required fields {missing}")

    try:
        event_id = int(row["id"])
        timesort = int(row["timesort"])
    except ValueError as exc:
        raise EventParseError(f"Row {row_number}: malformed id or timesort") from exc

    course_raw = _blank_to_none(row.get("course_id"))
    try:
        course_id = int(course_raw) if course_raw is not None else None
    except ValueError as exc:
        raise EventParseError(f"Row {row_number}: invalid course_id") from exc

    return RawEvent(
        id=event_id,
        timesort=timesort,
        eventtype=row["eventtype"].strip(),
        name=(row.get("name") or "").strip(),
        modulename=_blank_to_none(row.get("modulename")),
        icon_component=_blank_to_none(row.get("icon_component")),
        course_id=course_id,
        url=_blank_to_none(row.get("url")),
    )


def parse(file_path: str) -> list[RawEvent]:
    """Parse CSV file into a list of raw events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        events: list[RawEvent] = []
        for row_number, row in enumerate(reader, start=2):
            events.append(_parse_row(row, row_number))
        return events
