"""Tab-separated record output."""

from __future__ import annotations

import contextlib
from pathlib import Path
from typing import Iterator, Protocol, TextIO

from geodata.common.fs import ensure_dir
from geodata.common.models import GeoRecord


class RecordSink(Protocol):
    def accept(self, record: GeoRecord) -> None:
        ...


def format_row(record: GeoRecord) -> str:
    return "\t".join(record.to_row())


class MemorySink:
    def __init__(self) -> None:
        self.records: list[GeoRecord] = []

    def accept(self, record: GeoRecord) -> None:
        self.records.append(record)


class TsvStreamSink:
    def __init__(self, stream: TextIO) -> None:
        self.stream = stream
        self.rows_written = 0

    def accept(self, record: GeoRecord) -> None:
        self.stream.write(format_row(record) + "\n")
        self.rows_written += 1

    def flush(self) -> None:
        self.stream.flush()


class FanOutSink:
    """Forwards every record to each wrapped sink, in order."""

    def __init__(self, *sinks: RecordSink) -> None:
        self.sinks = sinks

    def accept(self, record: GeoRecord) -> None:
        for sink in self.sinks:
            sink.accept(record)


@contextlib.contextmanager
def open_output_sink(path: Path, *, console: TextIO | None = None) -> Iterator[FanOutSink]:
    """Open ``path`` (truncating any previous run) and optionally echo rows to ``console``.

    Both streams are flushed on exit, including when the conversion fails
    part way, so rows accepted before the failure are kept.
    """
    ensure_dir(path.parent)
    sinks: list[TsvStreamSink] = []
    with path.open("w", encoding="utf-8", newline="") as f:
        sinks.append(TsvStreamSink(f))
        if console is not None:
            sinks.append(TsvStreamSink(console))
        try:
            yield FanOutSink(*sinks)
        finally:
            for sink in sinks:
                sink.flush()
