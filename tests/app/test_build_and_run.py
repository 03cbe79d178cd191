# tests/app/test_build_and_run.py
import pytest
from pydantic import ValidationError

from taxi_park.app.build import build, make_park
from taxi_park.io.recorder import MemorySink
from taxi_park.runtime.rng import RNGRegistry


def test_build_runs_on_a_generated_park():
    cfg = {
        "name": "test",
        "run_id": "t-1",
        "seed": 7,
        "generator": {"drivers": 5, "passengers": 12, "trips": 40},
    }
    sink = MemorySink()
    app = build(cfg, sinks=[sink])
    results = app.run()
    assert [r.kind for r in results] == [q.kind for q in app.model.queries]
    assert len(sink.records) == len(results)
    assert all(r.run_id == "t-1" for r in sink.records)
    # same config, same park
    assert build(cfg, use_logging=False).park == app.park


def test_build_runs_on_an_explicit_park():
    cfg = {
        "name": "explicit",
        "park": {
            "drivers": ["A", "B"],
            "passengers": ["P"],
            "trips": [
                {"driver": "A", "passengers": ["P"], "duration": 5, "cost": 10},
                {"driver": "A", "passengers": ["P"], "duration": 15, "cost": 20, "discount": 2},
            ],
        },
        "queries": [
            {"kind": "fake_drivers"},
            {"kind": "frequent_passengers", "driver": "A"},
            {"kind": "smart_passengers"},
        ],
    }
    sink = MemorySink()
    build(cfg, sinks=[sink]).run()
    assert [r.value for r in sink.records] == [["B"], ["P"], []]


def test_build_rejects_bad_config():
    with pytest.raises(ValidationError):
        build({"name": "nothing"})


def test_make_park_rejects_unknown_sources():
    with pytest.raises(TypeError):
        make_park(object(), rng_registry=RNGRegistry(0))
