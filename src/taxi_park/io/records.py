# io/records.py
from dataclasses import dataclass
from typing import Any

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.period import DurationPeriod


# One row per finished query, shaped for JSON sinks
@dataclass
class QueryRecord:
    run_id: str
    seq: int
    name: str  # name given in the report config
    kind: str
    value: Any
    ms: float | None = None


def to_jsonable(value: Any) -> Any:
    """Sets of people become sorted name lists, periods become [start, end]."""
    if isinstance(value, (Driver, Passenger)):
        return value.name
    if isinstance(value, DurationPeriod):
        return list(value.as_pair())
    if isinstance(value, (set, frozenset)):
        return sorted(to_jsonable(v) for v in value)
    return value
