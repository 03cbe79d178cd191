# domain/park.py
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.entities.trip import Trip


@dataclass(frozen=True)
class TaxiPark:
    """
    Read-only dataset the analysis queries run against.

    Trips may name drivers or passengers that are not part of
    ``all_drivers`` / ``all_passengers``; queries tolerate that.
    """

    all_drivers: frozenset[Driver] = field(default_factory=frozenset)
    all_passengers: frozenset[Passenger] = field(default_factory=frozenset)
    trips: tuple[Trip, ...] = ()

    @classmethod
    def of(
        cls,
        drivers: Iterable[Driver],
        passengers: Iterable[Passenger],
        trips: Iterable[Trip],
    ) -> "TaxiPark":
        return cls(frozenset(drivers), frozenset(passengers), tuple(trips))

    # --------------- Grouping -----------------------------
    # One pass over the trips each; callers build the index they need once.

    def trips_by_driver(self) -> dict[Driver, list[Trip]]:
        by_driver: dict[Driver, list[Trip]] = defaultdict(list)
        for t in self.trips:
            by_driver[t.driver].append(t)
        return dict(by_driver)

    def trips_by_passenger(self) -> dict[Passenger, list[Trip]]:
        by_passenger: dict[Passenger, list[Trip]] = defaultdict(list)
        for t in self.trips:
            for p in t.passengers:
                by_passenger[p].append(t)
        return dict(by_passenger)
