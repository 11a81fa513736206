import io
from decimal import Decimal
from pathlib import Path

import pytest

from geodata.common.models import GeoRecord
from geodata.pipeline.export import FanOutSink, MemorySink, TsvStreamSink, format_row, open_output_sink


def _record(identity: str = "5", obsolete: str = "") -> GeoRecord:
    return GeoRecord(
        name="A",
        description="B",
        min_lat=Decimal("1.0"),
        max_lat=Decimal("2.0"),
        min_lon=Decimal("-3.5"),
        max_lon=Decimal("4.0"),
        obsolete_description=obsolete,
        identity=identity,
        proj_value="merc",
    )


def test_format_row_field_order():
    assert format_row(_record(obsolete="DEPRECATED")) == "5\tA\tB\t1.0\t2.0\t-3.5\t4.0\tmerc\tDEPRECATED"


def test_format_row_renders_absent_values_as_empty_strings():
    assert format_row(GeoRecord(identity="7")) == "7" + "\t" * 8


def test_tsv_stream_sink_writes_one_line_per_record():
    stream = io.StringIO()
    sink = TsvStreamSink(stream)
    sink.accept(_record("1"))
    sink.accept(_record("2"))

    assert stream.getvalue().splitlines() == [format_row(_record("1")), format_row(_record("2"))]
    assert sink.rows_written == 2


def test_fan_out_sink_forwards_to_every_sink():
    first, second = MemorySink(), MemorySink()
    FanOutSink(first, second).accept(_record())
    assert first.records == second.records == [_record()]


def test_open_output_sink_truncates_previous_output_and_echoes(tmp_path: Path):
    path = tmp_path / "out" / "output.txt"
    path.parent.mkdir()
    path.write_text("stale\n", encoding="utf-8")
    console = io.StringIO()

    with open_output_sink(path, console=console) as sink:
        sink.accept(_record())

    expected = format_row(_record()) + "\n"
    assert path.read_text(encoding="utf-8") == expected
    assert console.getvalue() == expected


def test_open_output_sink_keeps_rows_written_before_failure(tmp_path: Path):
    path = tmp_path / "output.txt"

    with pytest.raises(RuntimeError):
        with open_output_sink(path) as sink:
            sink.accept(_record("1"))
            raise RuntimeError("boom")

    assert path.read_text(encoding="utf-8") == format_row(_record("1")) + "\n"
