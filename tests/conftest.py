import pytest

from timeline_engine.dates import DayStart
from timeline_engine.schema import RawEvent

DAY0 = 1735689600  # 2025-01-01T00:00:00Z
HOUR = 3600
DAY = 24 * HOUR


def make_event(event_id, timesort, eventtype="due", **kwargs):
    kwargs.setdefault("name", f"Event {event_id}")
    return RawEvent(id=event_id, timesort=timesort, eventtype=eventtype, **kwargs)


@pytest.fixture
def day_start():
    return DayStart("UTC")
