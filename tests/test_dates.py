from conftest import DAY, DAY0, HOUR

from timeline_engine.dates import DayStart, resolve_filter_dates
from timeline_engine.schema import DateRange


def test_day_start_utc():
    day_start = DayStart("UTC")
    assert day_start(DAY0) == DAY0
    assert day_start(DAY0 + 23 * HOUR + 59) == DAY0
    assert day_start(DAY0 + DAY) == DAY0 + DAY


def test_day_start_uses_local_midnight():
    day_start = DayStart("Europe/Madrid")
    # 2025-01-01T00:30 in Madrid is 2024-12-31T23:30Z
    assert day_start(DAY0 - 30 * 60) == DAY0 - HOUR
    assert day_start(DAY0 + 22 * HOUR) == DAY0 - HOUR
    assert day_start(DAY0 + 23 * HOUR) == DAY0 + 23 * HOUR


def test_day_start_across_dst_change():
    day_start = DayStart("Europe/Madrid")
    # 2025-03-30 is 23 hours long in Madrid; noon local is 10:00Z
    midnight_march_30 = 1743289200  # 2025-03-29T23:00:00Z
    assert day_start(midnight_march_30 + 11 * HOUR) == midnight_march_30
    assert day_start(midnight_march_30 + 23 * HOUR) == midnight_march_30 + 23 * HOUR


def test_day_start_when_clocks_fall_back_at_midnight():
    day_start = DayStart("America/Havana")
    # 2024-11-03: 01:00 CDT falls back to 00:00 CST, so 00:00-01:00 repeats
    midnight = 1730606400  # 2024-11-03T04:00:00Z
    first_half_past = midnight + 30 * 60
    second_half_past = midnight + 90 * 60
    two_am = midnight + 3 * HOUR
    assert day_start(first_half_past) == midnight
    assert day_start(second_half_past) == midnight
    assert day_start(two_am) == midnight


def test_resolve_filter_dates_bounded():
    dates = resolve_filter_dates(
        DateRange(from_=DAY0 + 5 * HOUR, to=DAY0 + 3 * DAY + HOUR),
        clock=lambda: DAY0 + DAY + 7 * HOUR,
        day_start=DayStart("UTC"),
    )
    assert dates.now == DAY0 + DAY + 7 * HOUR
    assert dates.midnight == DAY0 + DAY
    assert dates.start == DAY0
    assert dates.end == DAY0 + 3 * DAY


def test_resolve_filter_dates_unbounded():
    dates = resolve_filter_dates(DateRange(from_=DAY0), clock=lambda: DAY0, day_start=DayStart("UTC"))
    assert dates.end is None


def test_resolve_filter_dates_reads_clock_once():
    calls = []

    def clock():
        calls.append(1)
        return DAY0

    resolve_filter_dates(DateRange(from_=DAY0), clock=clock, day_start=DayStart("UTC"))
    assert len(calls) == 1
