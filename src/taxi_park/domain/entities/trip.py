# domain/entities/trip.py
from dataclasses import dataclass, field

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.entities.passenger import Passenger


@dataclass(frozen=True)
class Trip:
    driver: Driver
    passengers: frozenset[Passenger] = field(default_factory=frozenset)
    duration: int = 0  # minutes
    cost: float = 0.0
    discount: float | None = None  # None == full price

    @property
    def discounted(self) -> bool:
        return self.discount is not None
