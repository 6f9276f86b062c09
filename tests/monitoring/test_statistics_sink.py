from __future__ import annotations

import gzip
import io

import numpy as np
import pytest

from moostats.foundation.exceptions import ConfigurationError, SinkOpenError
from moostats.monitoring.sink import StatisticsSink, format_field


def test_format_field():
    assert format_field(3) == "3"
    assert format_field(np.int64(-7)) == "-7"
    assert format_field(0.5) == "0.5"
    assert format_field(np.float64(2.0)) == "2.0"
    assert format_field(None) == "nan"
    assert format_field(float("nan")) == "nan"
    with pytest.raises(TypeError):
        format_field(True)


def test_fields_are_space_separated_per_line(buffer, sink):
    sink.write_field(0)
    sink.write_fields(1.5, 2)
    assert sink.line_started
    sink.end_line()
    sink.write_field(1)
    sink.end_line()
    assert buffer.getvalue() == "0 1.5 2\n1\n"
    assert not sink.line_started


def test_close_terminates_pending_line_without_closing_foreign_stream():
    stream = io.StringIO()
    sink = StatisticsSink(stream=stream)
    sink.write_field(4)
    sink.close()
    assert stream.getvalue() == "4\n"
    assert not stream.closed


def test_plain_file(tmp_path):
    path = tmp_path / "stats.log"
    with StatisticsSink(path) as sink:
        sink.write_fields(0, 1.0)
        sink.end_line()
    assert path.read_text(encoding="utf-8") == "0 1.0\n"


def test_gzip_adds_suffix(tmp_path):
    path = tmp_path / "stats.log"
    with StatisticsSink(path, compress=True) as sink:
        assert sink.path == tmp_path / "stats.log.gz"
        sink.write_fields(0, 2.5)
        sink.end_line()
    with gzip.open(tmp_path / "stats.log.gz", "rt", encoding="utf-8") as fh:
        assert fh.read() == "0 2.5\n"
    assert not path.exists()


def test_gzip_keeps_existing_suffix(tmp_path):
    with StatisticsSink(tmp_path / "stats.gz", compress=True) as sink:
        assert sink.path.name == "stats.gz"


def test_unopenable_destination_is_fatal(tmp_path):
    target = tmp_path / "missing-dir" / "stats.log"
    with pytest.raises(SinkOpenError) as excinfo:
        StatisticsSink(target)
    assert isinstance(excinfo.value, ConfigurationError)


def test_default_is_stdout(capsys):
    sink = StatisticsSink()
    sink.write_fields(0, 1)
    sink.end_line()
    assert capsys.readouterr().out == "0 1\n"
