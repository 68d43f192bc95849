"""
Per-year, per-month and per-day sequence counters for capture timestamps.
"""

from datetime import datetime
from typing import Dict, Tuple


class DateIndexCollector:
    """
    Counts timestamps as they are added, bucketed by calendar date.

    Files are added in processing order, so the value of a bucket right
    after a file was added is that file's position within the bucket
    (the first file of a day gets index 1). Buckets that were never added
    to read as 0.

    The calendar fields are taken from the timestamp as given; no time
    zone conversion is done.
    """

    def __init__(self):
        self.total = 0
        self.by_year: Dict[int, int] = {}
        self.by_month: Dict[Tuple[int, int], int] = {}
        self.by_day: Dict[Tuple[int, int, int], int] = {}

    def __len__(self) -> int:
        return self.total

    def add(self, timestamp: datetime) -> None:
        """Increment the total and every bucket the timestamp falls in."""
        year, month, day = timestamp.year, timestamp.month, timestamp.day

        self.total += 1
        self.by_year[year] = self.by_year.get(year, 0) + 1
        self.by_month[(year, month)] = self.by_month.get((year, month), 0) + 1
        self.by_day[(year, month, day)] = self.by_day.get((year, month, day), 0) + 1

    def get_index_by_year(self, timestamp: datetime) -> int:
        return self.by_year.get(timestamp.year, 0)

    def get_index_by_month(self, timestamp: datetime) -> int:
        return self.by_month.get((timestamp.year, timestamp.month), 0)

    def get_index_by_day(self, timestamp: datetime) -> int:
        return self.by_day.get((timestamp.year, timestamp.month, timestamp.day), 0)
