import asyncio

from conftest import DAY0, HOUR, make_event

from timeline_engine.fetching import StaticPageFetcher, page_result


def sample_events():
    return [
        make_event(1, DAY0 + HOUR, name="Essay draft", course_id=10),
        make_event(2, DAY0 + 2 * HOUR, name="Quiz 1", course_id=10),
        make_event(3, DAY0 + 3 * HOUR, name="Lab report", course_id=11),
        make_event(4, DAY0 + 4 * HOUR, name="Quiz 2", course_id=10),
        make_event(5, DAY0 + 5 * HOUR, name="Reading", course_id=11),
    ]


def test_page_result_full_page_has_cursor():
    events = sample_events()[:2]
    assert page_result(events, 2).next_cursor == 2
    assert page_result(events, 3).next_cursor is None
    assert page_result([], 2).next_cursor is None


def test_static_fetcher_pages_until_exhausted():
    fetcher = StaticPageFetcher(list(reversed(sample_events())), limit=2)

    first = asyncio.run(fetcher.fetch_by_timesort(None, ""))
    assert [e.id for e in first.events] == [1, 2]
    assert first.next_cursor == 2

    second = asyncio.run(fetcher.fetch_by_timesort(first.next_cursor, ""))
    assert [e.id for e in second.events] == [3, 4]

    third = asyncio.run(fetcher.fetch_by_timesort(second.next_cursor, ""))
    assert [e.id for e in third.events] == [5]
    assert third.next_cursor is None


def test_static_fetcher_by_course_and_search():
    fetcher = StaticPageFetcher(sample_events(), limit=10, limit_per_course=1)

    page = asyncio.run(fetcher.fetch_by_course(10, None, ""))
    assert [e.id for e in page.events] == [1]
    assert page.next_cursor == 1

    page = asyncio.run(fetcher.fetch_by_course(10, page.next_cursor, "quiz"))
    assert [e.id for e in page.events] == [2]

    page = asyncio.run(fetcher.fetch_by_timesort(None, "QUIZ"))
    assert [e.id for e in page.events] == [2, 4]
    assert page.next_cursor is None
