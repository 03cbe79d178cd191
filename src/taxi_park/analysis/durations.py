# analysis/durations.py
import numpy as np

from taxi_park.domain.park import TaxiPark
from taxi_park.domain.period import DurationPeriod


def duration_histogram(park: TaxiPark, *, width: int = 10) -> dict[DurationPeriod, int]:
    """
    Trip count per duration period 0..width-1, width..2*width-1, ...

    Periods run up to and including the one holding the longest trip;
    empty periods in between are kept with a zero count.
    """
    if not park.trips:
        return {}
    durations = np.fromiter((t.duration for t in park.trips), dtype=np.int64)
    counts = np.bincount(durations // width)
    return {DurationPeriod(k * width, k * width + width - 1): int(n) for k, n in enumerate(counts)}


def find_the_most_frequent_trip_duration_period(
    park: TaxiPark, *, width: int = 10
) -> DurationPeriod | None:
    """
    The most frequent trip duration period, or None when there are no trips.
    Any of the tied periods may come back when several are the most frequent.
    """
    histogram = duration_histogram(park, width=width)
    if not histogram:
        return None
    return max(histogram, key=histogram.__getitem__)
