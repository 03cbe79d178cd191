# main.py
import json
import sys

from taxi_park.app.build import build

DEMO = {
    "name": "demo",
    "run_id": "local",
    "seed": 2025,
    "generator": {"drivers": 10, "passengers": 40, "trips": 500},
    "queries": [
        {"kind": "fake_drivers"},
        {"kind": "faithful_passengers", "min_trips": 40},
        {"kind": "frequent_passengers", "driver": "D-0"},
        {"kind": "smart_passengers"},
        {"kind": "duration_period"},
        {"kind": "pareto"},
    ],
}


def run(cfg) -> None:
    app = build(cfg)
    app.run()


if __name__ == "__main__":
    if len(sys.argv) > 1:
        with open(sys.argv[1]) as fp:
            run(json.load(fp))
    else:
        run(DEMO)
