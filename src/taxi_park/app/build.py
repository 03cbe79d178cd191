# app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from taxi_park.config.models import GeneratorModel, ParkModel, ReportModel
from taxi_park.domain.builder import park_from_model
from taxi_park.domain.generator import generate_park
from taxi_park.domain.park import TaxiPark
from taxi_park.io.recorder import JsonlSink, Recorder, Sink
from taxi_park.io.report_logging import ReportLogging
from taxi_park.report.hooks import NoopHooks
from taxi_park.report.runner import QueryResult, ReportRunner
from taxi_park.runtime.rng import RNGRegistry


@dataclass
class App:
    model: ReportModel
    park: TaxiPark
    rng: RNGRegistry
    runner: ReportRunner
    recorder: Recorder

    def run(self) -> list[QueryResult]:
        return self.runner.run(self.park, self.model.queries)


def make_park(cfg: ParkModel | GeneratorModel, *, rng_registry: RNGRegistry) -> TaxiPark:
    if isinstance(cfg, ParkModel):
        return park_from_model(cfg)
    elif isinstance(cfg, GeneratorModel):
        return generate_park(cfg, rng_registry=rng_registry)
    else:
        raise TypeError(cfg)


def build(
    cfg: ReportModel | Mapping, *, sinks: list[Sink] | None = None, use_logging: bool = True
) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ReportModel) else ReportModel.model_validate(cfg)

    # 1) RNG & dataset
    rng_registry = RNGRegistry(model.seed, scenario=model.name)
    park = make_park(model.park or model.generator, rng_registry=rng_registry)

    # 2) Recorder and hooks
    recorder = Recorder(*(sinks or [JsonlSink()]))
    hooks = (
        ReportLogging(
            run_id=model.run_id,
            recorder=recorder,
            level=model.log.level,
            debug=model.log.debug,
        )
        if use_logging
        else NoopHooks()
    )

    return App(
        model=model,
        park=park,
        rng=rng_registry,
        runner=ReportRunner(hooks=hooks),
        recorder=recorder,
    )
