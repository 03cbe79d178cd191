# runtime/registries.py
from collections.abc import Callable
from typing import Any

from taxi_park.analysis.drivers import check_pareto_principle, find_fake_drivers
from taxi_park.analysis.durations import find_the_most_frequent_trip_duration_period
from taxi_park.analysis.passengers import (
    find_faithful_passengers,
    find_frequent_passengers,
    find_smart_passengers,
)
from taxi_park.config.models import (
    DurationPeriodQueryModel,
    FaithfulPassengersQueryModel,
    FakeDriversQueryModel,
    FrequentPassengersQueryModel,
    ParetoQueryModel,
    QueryUnion,
    SmartPassengersQueryModel,
)
from taxi_park.domain.entities.driver import Driver
from taxi_park.domain.park import TaxiPark

Query = Callable[[TaxiPark], Any]
QueryFactory = Callable[[QueryUnion], Query]

_query_registry: dict[str, QueryFactory] = {}


def register_query(kind: str):
    def deco(fn: QueryFactory):
        _query_registry[kind] = fn
        return fn

    return deco


def make_query(cfg: QueryUnion) -> Query:
    try:
        factory = _query_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown query kind {cfg.kind!r}")
    return factory(cfg)


@register_query("fake_drivers")
def _make_fake_drivers(cfg: FakeDriversQueryModel):
    return find_fake_drivers


@register_query("faithful_passengers")
def _make_faithful(cfg: FaithfulPassengersQueryModel):
    return lambda park: find_faithful_passengers(park, cfg.min_trips)


@register_query("frequent_passengers")
def _make_frequent(cfg: FrequentPassengersQueryModel):
    d = Driver(cfg.driver)
    return lambda park: find_frequent_passengers(park, d)


@register_query("smart_passengers")
def _make_smart(cfg: SmartPassengersQueryModel):
    return find_smart_passengers


@register_query("duration_period")
def _make_duration_period(cfg: DurationPeriodQueryModel):
    return lambda park: find_the_most_frequent_trip_duration_period(park, width=cfg.width)


@register_query("pareto")
def _make_pareto(cfg: ParetoQueryModel):
    return lambda park: check_pareto_principle(
        park, top_share=cfg.top_share, income_share=cfg.income_share
    )
