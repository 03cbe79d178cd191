# tests/report/test_report_logging.py
import io
import json
import logging

from taxi_park.config.models import DurationPeriodQueryModel, FakeDriversQueryModel
from taxi_park.domain.builder import taxi_park, trip
from taxi_park.domain.period import DurationPeriod
from taxi_park.io.recorder import JsonlSink, MemorySink, Recorder
from taxi_park.io.records import QueryRecord, to_jsonable
from taxi_park.io.report_logging import ReportLogging, _default_json_logger
from taxi_park.report.runner import ReportRunner


def _park():
    return taxi_park(range(2), range(1), trip(0, [0], duration=4), trip(0, [0], duration=6))


def test_to_jsonable():
    park = _park()
    assert to_jsonable(park.all_drivers) == ["D-0", "D-1"]
    assert to_jsonable(DurationPeriod(20, 29)) == [20, 29]
    assert to_jsonable(None) is None
    assert to_jsonable(True) is True


def test_finished_queries_reach_logs_and_recorder(caplog):
    sink = MemorySink()
    hooks = ReportLogging(
        run_id="r-1", logger=logging.getLogger("taxi_park.test.report"), recorder=Recorder(sink)
    )
    with caplog.at_level(logging.INFO, logger="taxi_park.test.report"):
        queries = [FakeDriversQueryModel(), DurationPeriodQueryModel()]
        ReportRunner(hooks=hooks).run(_park(), queries)

    msgs = [r.getMessage() for r in caplog.records]
    assert msgs == ["run_start", "fake_drivers", "duration_period", "run_end"]
    start = caplog.records[0].extra
    assert start["run_id"] == "r-1"
    assert (start["drivers"], start["trips"], start["queries"]) == (2, 2, 2)

    assert [(r.seq, r.name, r.value) for r in sink.records] == [
        (1, "fake_drivers", ["D-1"]),
        (2, "duration_period", [0, 9]),
    ]


def test_json_logger_writes_one_object_per_line(capsys):
    log = _default_json_logger(name="taxi_park.test.json", level="INFO")
    ReportLogging(run_id="r-2", logger=log).run_end(processed=3)
    line = capsys.readouterr().out.strip().splitlines()[-1]
    assert json.loads(line) == {
        "level": "INFO",
        "msg": "run_end",
        "logger": "taxi_park.test.json",
        "run_id": "r-2",
        "processed": 3,
    }


def test_broken_sink_does_not_starve_the_others():
    class _Broken:
        def write(self, rec):
            raise OSError("disk full")

    buf = io.StringIO()
    mem = MemorySink()
    rec = QueryRecord(run_id="r", seq=1, name="pareto", kind="pareto", value=True)
    Recorder(_Broken(), JsonlSink(buf), mem).emit(rec)
    assert mem.records == [rec]
    assert json.loads(buf.getvalue())["value"] is True
