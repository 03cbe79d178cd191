# analysis/drivers.py
import math

import numpy as np

from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.park import TaxiPark


def find_fake_drivers(park: TaxiPark) -> frozenset[Driver]:
    """Drivers of the park who performed no trips."""
    # trips driven by outsiders do not count for anyone in all_drivers
    real = {t.driver for t in park.trips if t.driver in park.all_drivers}
    return park.all_drivers - real


def driver_incomes(park: TaxiPark) -> dict[Driver, float]:
    by_driver = park.trips_by_driver()
    return {d: math.fsum(t.cost for t in by_driver.get(d, ())) for d in park.all_drivers}


def check_pareto_principle(
    park: TaxiPark, *, top_share: float = 0.2, income_share: float = 0.8
) -> bool:
    """
    True when the richest ``top_share`` of drivers earn at least ``income_share``
    of the total income.

    A park without income never satisfies the principle; neither does one whose
    driver count rounds the top group down to nobody.
    """
    # fsum everywhere, so a driver holding every trip earns exactly the total
    total = math.fsum(t.cost for t in park.trips)
    if total == 0:
        return False

    top_count = int(len(park.all_drivers) * top_share)
    incomes = np.fromiter(driver_incomes(park).values(), dtype=float)
    ranked = np.sort(incomes)[::-1]
    top = math.fsum(ranked[:top_count].tolist())
    return top / total >= income_share
