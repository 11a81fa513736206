"""Catalog-to-table conversion driver."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, Mapping

from geodata.common.errors import InputNotFoundError, NumericFormatError, UnrecognizedLineFormatError
from geodata.pipeline.accumulate import RecordAccumulator
from geodata.pipeline.classify import LineType, classify
from geodata.pipeline.export import RecordSink

_MUTATIONS: dict[LineType, Callable[[RecordAccumulator, Mapping[str, str]], RecordAccumulator]] = {
    LineType.LOCATION: RecordAccumulator.apply_location,
    LineType.HEADER: RecordAccumulator.apply_header,
    LineType.OBSOLETION: RecordAccumulator.apply_obsoletion,
    LineType.IDENTITY: RecordAccumulator.apply_identity,
}


@dataclass
class ConversionStats:
    lines_read: int = 0
    records_written: int = 0
    # Line numbers of the blank lines that flushed a record missing a required group.
    incomplete_records: list[int] = field(default_factory=list)
    trailing_record_discarded: bool = False


def convert_lines(
    lines: Iterable[str],
    sink: RecordSink,
    *,
    flush_trailing_record: bool = False,
    stats: ConversionStats | None = None,
) -> ConversionStats:
    """Classify ``lines`` in order and hand each completed record to ``sink``.

    Processing stops at the first line that cannot be classified or whose
    bounds are not valid decimals; records already accepted by the sink stay
    there. Pass ``stats`` to keep the counts when an error propagates.

    Raises:
        UnrecognizedLineFormatError, NumericFormatError
    """
    stats = stats if stats is not None else ConversionStats()
    current = RecordAccumulator()

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        stats.lines_read = line_number
        result = classify(line)

        if result.line_type is LineType.EMPTY:
            if current.is_pristine:
                continue
            if current.missing_groups():
                stats.incomplete_records.append(line_number)
            record, current = current.flush()
            sink.accept(record)
            stats.records_written += 1
            continue

        if result.line_type is LineType.UNKNOWN:
            raise UnrecognizedLineFormatError("Line is in unexpected format", line_number=line_number, line=line)

        try:
            current = _MUTATIONS[result.line_type](current, result.fields)
        except NumericFormatError as exc:
            raise NumericFormatError(exc.value, line_number=line_number, line=line) from exc

    if not current.is_pristine:
        if flush_trailing_record:
            if current.missing_groups():
                stats.incomplete_records.append(stats.lines_read)
            record, current = current.flush()
            sink.accept(record)
            stats.records_written += 1
        else:
            stats.trailing_record_discarded = True

    return stats


def ensure_input_exists(path: Path) -> None:
    if not path.is_file():
        raise InputNotFoundError(path)


def convert_file(
    path: Path,
    sink: RecordSink,
    *,
    encoding: str = "utf-8",
    flush_trailing_record: bool = False,
    stats: ConversionStats | None = None,
) -> ConversionStats:
    ensure_input_exists(path)
    with path.open("r", encoding=encoding, newline="") as f:
        return convert_lines(f, sink, flush_trailing_record=flush_trailing_record, stats=stats)
