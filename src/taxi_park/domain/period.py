# domain/period.py
from __future__ import annotations

from dataclasses import dataclass
from numbers import Integral


@dataclass(frozen=True)
class DurationPeriod:
    """Inclusive range of trip durations in minutes, e.g. 10..19."""

    start: int
    end: int

    @classmethod
    def bucket_of(cls, duration: int, width: int = 10) -> DurationPeriod:
        start = (duration // width) * width
        return cls(start, start + width - 1)

    def __contains__(self, duration: object) -> bool:
        if isinstance(duration, bool) or not isinstance(duration, Integral):
            return False
        return self.start <= duration <= self.end

    def as_pair(self) -> tuple[int, int]:
        return self.start, self.end
