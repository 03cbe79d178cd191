# io/report_logging.py
import json
import logging
import sys

from taxi_park.io.recorder import Recorder
from taxi_park.io.records import QueryRecord, to_jsonable
from taxi_park.report.hooks import NoopHooks


def _default_json_logger(name="taxi_park", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class ReportLogging(NoopHooks):
    """
    Structured logs for a report run; finished queries also go to the recorder.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id, **extra}
        self.log.log(getattr(logging, level), msg, extra={"extra": payload})

    # --------------------------------------------------------

    def run_start(self, *, park, queries):
        self._emit(
            "INFO",
            "run_start",
            drivers=len(park.all_drivers),
            passengers=len(park.all_passengers),
            trips=len(park.trips),
            queries=len(queries),
        )

    def run_end(self, *, processed: int, **extra):
        self._emit("INFO", "run_end", processed=processed, **extra)

    def query_start(self, query, *, seq: int):
        if self.debug:
            self._emit("DEBUG", "query_start", name=query.name, kind=query.kind, seq=seq)

    def query_end(self, query, *, seq: int, result, ms: float):
        value = to_jsonable(result.value)
        self._emit("INFO", query.name, kind=query.kind, seq=seq, value=value, ms=round(ms, 3))
        if self.recorder:
            self.recorder.emit(
                QueryRecord(
                    run_id=self.run_id,
                    seq=seq,
                    name=query.name,
                    kind=query.kind,
                    value=value,
                    ms=ms,
                )
            )

    def error(self, query, *, exc: BaseException, **extra):
        self._emit(
            "ERROR", "query_error", name=query.name, kind=query.kind, error=str(exc), **extra
        )
