# report/hooks.py
from typing import Protocol


class ReportHooks(Protocol):
    def run_start(self, *, park, queries): ...
    def run_end(self, *, processed, wall_ms): ...
    def query_start(self, query, *, seq): ...
    def query_end(self, query, *, seq, result, ms): ...
    def error(self, query, *, exc: BaseException, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def query_start(self, *_, **__):
        pass

    def query_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass
