"""Run summary report."""

from __future__ import annotations

from pathlib import Path

from geodata.common.errors import GeoDataError, LineError
from geodata.common.fs import write_json
from geodata.common.time_utils import utc_timestamp_iso
from geodata.pipeline.convert import ConversionStats


def write_run_summary(
    path: Path,
    *,
    run_id: str,
    input_path: Path,
    output_path: Path,
    stats: ConversionStats | None,
    error: GeoDataError | None = None,
) -> Path:
    stats = stats or ConversionStats()
    payload = {
        "run_id": run_id,
        "finished_at": utc_timestamp_iso(),
        "status": "error" if error is not None else "success",
        "input_path": str(input_path),
        "output_path": str(output_path),
        "counts": {
            "lines_read": stats.lines_read,
            "records_written": stats.records_written,
            "incomplete_records": len(stats.incomplete_records),
        },
        "incomplete_record_lines": list(stats.incomplete_records),
        "trailing_record_discarded": stats.trailing_record_discarded,
        "error": None,
    }
    if error is not None:
        payload["error"] = {
            "error_code": error.error_code,
            "message": str(error),
            "line_number": error.line_number if isinstance(error, LineError) else None,
        }
    write_json(path, payload)
    return path
