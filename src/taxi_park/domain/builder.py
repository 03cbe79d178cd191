# domain/builder.py
"""
Small constructors for hand-written parks, mostly used by tests:

    park = taxi_park(range(3), range(2), trip(0, [0, 1]), trip(1, [1], discount=0.2))
"""

from collections.abc import Iterable

from taxi_park.config.models import ParkModel
from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.entities.trip import Trip
from taxi_park.domain.park import TaxiPark


def driver(i: int) -> Driver:
    return Driver(f"D-{i}")


def passenger(i: int) -> Passenger:
    return Passenger(f"P-{i}")


def trip(
    driver_index: int,
    passenger_indexes: Iterable[int] = (),
    duration: int = 10,
    distance: float = 3.0,
    discount: float | None = None,
) -> Trip:
    # fare is one unit per minute plus one per km, less the discount share
    cost = (1 - (discount or 0.0)) * (duration + distance)
    return Trip(
        driver=driver(driver_index),
        passengers=frozenset(passenger(i) for i in passenger_indexes),
        duration=duration,
        cost=cost,
        discount=discount,
    )


def taxi_park(
    driver_indexes: Iterable[int], passenger_indexes: Iterable[int], *trips: Trip
) -> TaxiPark:
    return TaxiPark.of(
        (driver(i) for i in driver_indexes),
        (passenger(i) for i in passenger_indexes),
        trips,
    )


def park_from_model(cfg: ParkModel) -> TaxiPark:
    trips = [
        Trip(
            driver=Driver(t.driver),
            passengers=frozenset(Passenger(p) for p in t.passengers),
            duration=t.duration,
            cost=t.cost,
            discount=t.discount,
        )
        for t in cfg.trips
    ]
    return TaxiPark.of(
        (Driver(d) for d in cfg.drivers), (Passenger(p) for p in cfg.passengers), trips
    )
