# domain/generator.py
import numpy as np

from taxi_park.config.models import GeneratorModel
from taxi_park.domain.builder import driver, passenger
from taxi_park.domain.entities.trip import Trip
from taxi_park.domain.park import TaxiPark
from taxi_park.runtime.rng import RNGRegistry


def generate_park(cfg: GeneratorModel, *, rng_registry: RNGRegistry) -> TaxiPark:
    """
    Synthetic park drawn from named streams, so each attribute only depends on
    its own stream: changing the discount settings leaves durations untouched.
    """
    drivers = [driver(i) for i in range(cfg.drivers)]
    passengers = [passenger(i) for i in range(cfg.passengers)]

    n = cfg.trips
    driver_ix = rng_registry.stream("drivers").integers(0, max(cfg.drivers, 1), size=n)
    durations = rng_registry.stream("durations").integers(0, cfg.max_duration + 1, size=n)

    riders = rng_registry.stream("passengers")
    sizes = riders.integers(0, min(cfg.max_passengers, cfg.passengers) + 1, size=n)

    discounts = rng_registry.stream("discounts")
    has_discount = discounts.random(n) < cfg.discount_p
    picked = (
        discounts.choice(np.asarray(cfg.discounts, dtype=float), size=n)
        if cfg.discounts
        else np.zeros(n)
    )

    # a little noise on top of the per-minute fare
    noise = rng_registry.stream("fares").uniform(0.9, 1.1, size=n)

    trips: list[Trip] = []
    for i in range(n):
        group = riders.choice(cfg.passengers, size=int(sizes[i]), replace=False)
        discount = float(picked[i]) if has_discount[i] else None
        base = float(durations[i]) * cfg.fare_per_minute * float(noise[i])
        trips.append(
            Trip(
                driver=drivers[int(driver_ix[i])],
                passengers=frozenset(passengers[int(j)] for j in group),
                duration=int(durations[i]),
                cost=base * (1 - (discount or 0.0)),
                discount=discount,
            )
        )
    return TaxiPark.of(drivers, passengers, trips)
