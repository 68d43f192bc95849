from datetime import datetime, timezone

from exif_pattern_rename.date_index import DateIndexCollector


def utc(year, month, day):
    return datetime(year, month, day, tzinfo=timezone.utc)


def test_date_index_collector():
    collector = DateIndexCollector()
    for ts in [utc(2015, 1, 1), utc(2016, 1, 1), utc(2016, 1, 2), utc(2016, 1, 2),
               utc(2016, 1, 3), utc(2016, 1, 3), utc(2016, 1, 3), utc(2016, 2, 1)]:
        collector.add(ts)

    assert len(collector) == 8
    assert collector.get_index_by_year(utc(2016, 1, 1)) == 7
    assert collector.get_index_by_month(utc(2016, 1, 1)) == 6
    assert collector.get_index_by_day(utc(2016, 1, 1)) == 1
    assert collector.get_index_by_day(utc(2016, 1, 2)) == 2
    assert collector.get_index_by_day(utc(2016, 1, 3)) == 3


def test_unknown_dates_read_as_zero():
    collector = DateIndexCollector()
    assert len(collector) == 0
    assert collector.get_index_by_year(utc(2016, 1, 1)) == 0

    collector.add(utc(2016, 1, 1))
    assert collector.get_index_by_year(utc(2017, 1, 1)) == 0
    assert collector.get_index_by_month(utc(2016, 2, 1)) == 0
    assert collector.get_index_by_day(utc(2016, 1, 2)) == 0
    assert collector.get_index_by_day(utc(2015, 1, 1)) == 0


def test_index_is_position_at_time_of_add():
    collector = DateIndexCollector()
    timestamps = [utc(2016, 5, 1), utc(2017, 5, 1), utc(2016, 6, 1), utc(2016, 5, 1)]
    seen = []
    for ts in timestamps:
        collector.add(ts)
        seen.append((len(collector),
                     collector.get_index_by_year(ts),
                     collector.get_index_by_month(ts),
                     collector.get_index_by_day(ts)))

    assert seen == [(1, 1, 1, 1), (2, 1, 1, 1), (3, 2, 1, 1), (4, 3, 2, 2)]


def test_buckets_are_nested():
    collector = DateIndexCollector()
    for day in (1, 1, 2, 3, 3, 3):
        collector.add(utc(2016, 4, day))
    collector.add(utc(2016, 5, 1))

    ts = utc(2016, 4, 3)
    assert collector.get_index_by_day(ts) <= collector.get_index_by_month(ts) <= collector.get_index_by_year(ts)
    assert collector.get_index_by_month(ts) == 6
    assert collector.get_index_by_year(ts) == 7


def test_time_of_day_does_not_split_buckets():
    collector = DateIndexCollector()
    collector.add(datetime(2016, 1, 1, 0, 0, 1, tzinfo=timezone.utc))
    collector.add(datetime(2016, 1, 1, 23, 59, 59, tzinfo=timezone.utc))
    assert collector.get_index_by_day(utc(2016, 1, 1)) == 2
