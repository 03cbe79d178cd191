# analysis/passengers.py
from collections import Counter

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger
from taxi_park.domain.park import TaxiPark


def find_faithful_passengers(park: TaxiPark, min_trips: int) -> frozenset[Passenger]:
    """Passengers who completed at least ``min_trips`` trips."""
    by_passenger = park.trips_by_passenger()
    return frozenset(
        p for p in park.all_passengers if len(by_passenger.get(p, ())) >= min_trips
    )


def find_frequent_passengers(park: TaxiPark, driver: Driver) -> frozenset[Passenger]:
    """Passengers taken by ``driver`` more than once."""
    rides = Counter(p for t in park.trips_by_driver().get(driver, ()) for p in t.passengers)
    return frozenset(p for p in park.all_passengers if rides[p] > 1)


def find_smart_passengers(park: TaxiPark) -> frozenset[Passenger]:
    """Passengers who had a discount on a strict majority of their trips."""
    by_passenger = park.trips_by_passenger()
    smart = set()
    for p in park.all_passengers:
        trips = by_passenger.get(p, ())
        discounted = sum(1 for t in trips if t.discounted)
        if discounted > len(trips) - discounted:
            smart.add(p)
    return frozenset(smart)
