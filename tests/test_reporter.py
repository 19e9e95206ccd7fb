"""Tests for the reporter fan-out."""

from __future__ import annotations

import json
import logging

import pytest

from sysinfo_influxdb.collectors import BaseCollector
from sysinfo_influxdb.core import collect_series
from sysinfo_influxdb.errors import SinkConnectError, SinkWriteError
from sysinfo_influxdb.reporter import report
from sysinfo_influxdb.series import Series, series_name
from sysinfo_influxdb.sink import SinkConfig

SERIES = [
    Series("h.cpu", ("id", "user", "total"), [("cpu", 1.5, 3.0), ("cpu0", 0.75, 1.5)]),
    Series("h.load", ("one", "five", "fifteen"), [(0.42, 0.37, 0.3)]),
]

CONFIG = SinkConfig(host="influx:8086", username="root", password="root", database="metrics")


class FakeSink:
    def __init__(self, fail: bool = False) -> None:
        self.fail = fail
        self.writes: list[list[Series]] = []
        self.closed = False

    def write(self, series):
        if self.fail:
            raise SinkWriteError("influx:8086", "write rejected")
        self.writes.append(list(series))

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.closed = True


class Connector:
    def __init__(self, sink: FakeSink) -> None:
        self.sink = sink
        self.configs: list[SinkConfig] = []

    def __call__(self, config: SinkConfig) -> FakeSink:
        self.configs.append(config)
        return self.sink


def test_no_sink_renders_even_when_not_verbose(capsys) -> None:
    report(SERIES, None, verbose=False)

    out = capsys.readouterr().out
    assert "#0: h.cpu" in out
    assert "#1: h.load" in out
    assert out.index("h.cpu") < out.index("h.load")
    for column in ("id", "user", "total", "one", "five", "fifteen"):
        assert column in out
    assert "cpu0" in out
    assert "0.42" in out


def test_sink_without_verbose_writes_once_silently(capsys) -> None:
    connect = Connector(FakeSink())

    report(SERIES, CONFIG, verbose=False, connect=connect)

    assert capsys.readouterr().out == ""
    assert connect.configs == [CONFIG]
    assert connect.sink.writes == [SERIES]
    assert connect.sink.closed


def test_sink_with_verbose_renders_and_writes(capsys) -> None:
    connect = Connector(FakeSink())

    report(SERIES, CONFIG, verbose=True, connect=connect)

    assert "h.load" in capsys.readouterr().out
    assert len(connect.sink.writes) == 1


def test_sink_failure_propagates_after_rendering(capsys) -> None:
    connect = Connector(FakeSink(fail=True))

    with pytest.raises(SinkWriteError):
        report(SERIES, CONFIG, verbose=True, connect=connect)

    assert "h.cpu" in capsys.readouterr().out
    assert connect.sink.closed


def test_connect_failure_propagates() -> None:
    def refuse(config: SinkConfig):
        raise SinkConnectError(config.host, "connection refused")

    with pytest.raises(SinkConnectError, match="influx:8086: connection refused"):
        report(SERIES, CONFIG, verbose=False, connect=refuse)


def test_json_view(capsys) -> None:
    report(SERIES, None, fmt="json")

    payload = json.loads(capsys.readouterr().out)
    assert payload[0] == {
        "name": "h.cpu",
        "columns": ["id", "user", "total"],
        "points": [["cpu", 1.5, 3.0], ["cpu0", 0.75, 1.5]],
    }


def test_output_file_is_appended(tmp_path, capsys) -> None:
    out_file = tmp_path / "series.txt"

    report(SERIES[1:], None, output=str(out_file))
    report(SERIES[1:], None, output=str(out_file))

    assert capsys.readouterr().out == ""
    assert out_file.read_text().count("#0: h.load") == 2


def test_render_failure_still_writes_to_sink(tmp_path, caplog) -> None:
    connect = Connector(FakeSink())
    unwritable = tmp_path / "missing-dir" / "out.txt"

    with caplog.at_level(logging.ERROR, logger="sysinfo_influxdb.reporter"):
        report(SERIES, CONFIG, verbose=True, output=str(unwritable), connect=connect)

    assert connect.sink.writes == [SERIES]
    assert caplog.records[0].code == "FileNotFoundError"


def test_empty_batch_skips_sink(capsys) -> None:
    connect = Connector(FakeSink())

    report([], CONFIG, verbose=False, connect=connect)

    assert connect.configs == []
    assert connect.sink.writes == []


class BrokenCollector(BaseCollector):
    @property
    def name(self) -> str:
        return "mem"

    def _query(self, prefix: str) -> Series:
        raise OSError("device unavailable")


class LoadStub(BaseCollector):
    @property
    def name(self) -> str:
        return "load"

    def _query(self, prefix: str) -> Series:
        return Series(series_name(prefix, "load"), ("one", "five", "fifteen"), [(0.1, 0.2, 0.3)])


def test_failing_collector_leaves_others_in_sink_write(capsys) -> None:
    connect = Connector(FakeSink())

    series = collect_series("h", [BrokenCollector(), LoadStub(), BrokenCollector()])
    report(series, CONFIG, verbose=False, connect=connect)

    assert len(connect.sink.writes) == 1
    assert [s.name for s in connect.sink.writes[0]] == ["h.load"]
    assert capsys.readouterr().out == ""
