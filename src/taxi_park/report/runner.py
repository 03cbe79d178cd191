# report/runner.py
import time
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from taxi_park.config.models import QueryUnion
from taxi_park.domain.park import TaxiPark
from taxi_park.report.hooks import NoopHooks, ReportHooks
from taxi_park.runtime.registries import make_query


@dataclass(frozen=True)
class QueryResult:
    name: str
    kind: str
    value: Any


class ReportRunner:
    def __init__(self, hooks: ReportHooks | None = None):
        self._hooks = hooks or NoopHooks()

    def run(self, park: TaxiPark, queries: Iterable[QueryUnion]) -> list[QueryResult]:
        queries = list(queries)
        t0 = time.perf_counter()
        self._hooks.run_start(park=park, queries=queries)
        results: list[QueryResult] = []
        for seq, cfg in enumerate(queries, start=1):
            fn = make_query(cfg)
            self._hooks.query_start(cfg, seq=seq)
            t1 = time.perf_counter()
            try:
                value = fn(park)
            except Exception as exc:
                self._hooks.error(cfg, exc=exc, seq=seq)
                raise
            res = QueryResult(name=cfg.name, kind=cfg.kind, value=value)
            self._hooks.query_end(cfg, seq=seq, result=res, ms=(time.perf_counter() - t1) * 1000)
            results.append(res)
        self._hooks.run_end(processed=len(results), wall_ms=(time.perf_counter() - t0) * 1000)
        return results
