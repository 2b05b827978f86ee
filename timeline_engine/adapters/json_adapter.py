"""JSON adapter for action events."""

from __future__ import annotations

import json

from timeline_engine.errors import EventParseError
from timeline_engine.schema import RawEvent

_REQUIRED_FIELDS = ("id", "timesort", "eventtype")
_KNOWN_FIELDS = {*_REQUIRED_FIELDS, "name", "modulename", "icon", "icon_component", "course", "course_id", "url"}


def _optional_int(value, field: str, index: int):
    if value in (None, ""):
        return None
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise EventParseError(f"Item {index}: invalid {field}") from exc


def _parse_item(item: dict, index: int) -> RawEvent:
    if not isinstance(item, dict):
        raise EventParseError(f"Item {index}: expected an object")

    missing = [field for field in _REQUIRED_FIELDS if item.get(field) in (None, "")]
    if missing:
        raise EventParseError(f"Item {index}: missing required fields {missing}")

    try:
        event_id = int(item["id"])
        timesort = int(item["timesort"])
    except (TypeError, ValueError) as exc:
        raise EventParseError(f"Item {index}: malformed id or timesort") from exc

    icon = item.get("icon") or {}
    icon_component = item.get("icon_component") or (icon.get("component") if isinstance(icon, dict) else None)

    course = item.get("course")
    course_id = item.get("course_id")
    if course_id is None and isinstance(course, dict):
        course_id = course.get("id")

    return RawEvent(
        id=event_id,
        timesort=timesort,
        eventtype=str(item["eventtype"]).strip(),
        name=str(item.get("name") or ""),
        modulename=item.get("modulename") or None,
        icon_component=icon_component or None,
        course_id=_optional_int(course_id, "course_id", index),
        url=item.get("url") or None,
        extra={key: value for key, value in item.items() if key not in _KNOWN_FIELDS},
    )


def parse(file_path: str) -> list[RawEvent]:
    """Parse a JSON file holding a list of events or an ``{"events": [...]}`` payload."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict):
        payload = payload.get("events")

    if not isinstance(payload, list):
        raise EventParseError("JSON payload must be a list of events or an object with an 'events' list")

    return [_parse_item(item, i) for i, item in enumerate(payload, start=1)]
