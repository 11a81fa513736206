"""CLI entrypoint for converting projection catalogs to tab-separated rows."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from geodata.common.config_loader import load_config
from geodata.common.constants import EXIT_HARD_FAIL, EXIT_SUCCESS
from geodata.common.errors import GeoDataError, LineError
from geodata.common.logging import build_logger, close_logger, log_event
from geodata.common.time_utils import generate_run_id
from geodata.pipeline.convert import ConversionStats, convert_file, ensure_input_exists
from geodata.pipeline.export import open_output_sink
from geodata.pipeline.reports import write_run_summary


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="geodata", description=__doc__)
    parser.add_argument("path", nargs="?", default=None, help="Input catalog (default: input.txt)")
    parser.add_argument("--output", default=None, help="Output TSV file (default: output.txt)")
    parser.add_argument("--config", default=None)
    parser.add_argument("--overlay-config", default=None)
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"])
    parser.add_argument("--run-id", default=None)
    parser.add_argument("--summary", default=None, help="Write a JSON run summary to this path")
    parser.add_argument("--no-echo", action="store_true", help="Do not echo rows to stdout")
    parser.add_argument("--flush-trailing", action="store_true", help="Keep a final record with no blank line after it")
    return parser.parse_args(argv)


def _log_stats(logger: logging.Logger, run_id: str, input_path: Path, stats: ConversionStats) -> None:
    for line_number in stats.incomplete_records:
        log_event(
            logger,
            "record flushed without all of header, location and identity",
            level=logging.WARNING,
            run_id=run_id,
            event="INCOMPLETE_RECORD",
            status="warning",
            input_path=str(input_path),
            line_number=line_number,
        )
    if stats.trailing_record_discarded:
        log_event(
            logger,
            "input ended without a blank line; last record discarded",
            level=logging.WARNING,
            run_id=run_id,
            event="TRAILING_RECORD_DISCARDED",
            status="warning",
            input_path=str(input_path),
            line_number=stats.lines_read,
        )


def run_command(args: argparse.Namespace) -> int:
    run_id = args.run_id or generate_run_id()
    config = load_config(
        Path(args.config) if args.config else None,
        overlay_path=Path(args.overlay_config) if args.overlay_config else None,
    )

    input_path = Path(args.path or config["input"]["default_path"])
    output_path = Path(args.output or config["output"]["path"])
    summary = args.summary or config["output"]["summary_path"]
    echo = config["output"]["echo_console"] and not args.no_echo
    flush_trailing = args.flush_trailing or config["parsing"]["flush_trailing_record"]
    log_dir = config["logging"]["log_dir"]

    logger = build_logger(
        run_id,
        log_dir=Path(log_dir) if log_dir else None,
        level=args.log_level or config["logging"]["level"],
    )
    stats = ConversionStats()
    failure: GeoDataError | None = None

    log_event(logger, "conversion start", run_id=run_id, event="RUN_START", status="ok", input_path=str(input_path))
    try:
        ensure_input_exists(input_path)
        with open_output_sink(output_path, console=sys.stdout if echo else None) as sink:
            convert_file(
                input_path,
                sink,
                encoding=config["input"]["encoding"],
                flush_trailing_record=flush_trailing,
                stats=stats,
            )
    except GeoDataError as exc:
        failure = exc
        log_event(
            logger,
            f"conversion failed: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            event="RUN_FAIL",
            status="error",
            input_path=str(input_path),
            line_number=exc.line_number if isinstance(exc, LineError) else None,
            line=exc.line if isinstance(exc, LineError) else None,
            lines_in=stats.lines_read,
            rows_out=stats.records_written,
            error_code=exc.error_code,
        )
    except Exception as exc:
        failure = GeoDataError(f"unexpected failure: {exc}")
        log_event(
            logger,
            f"unexpected failure: {exc}",
            level=logging.ERROR,
            run_id=run_id,
            event="RUN_FAIL",
            status="error",
            input_path=str(input_path),
            lines_in=stats.lines_read,
            rows_out=stats.records_written,
            error_code="UNEXPECTED_ERROR",
        )
    else:
        _log_stats(logger, run_id, input_path, stats)
        log_event(
            logger,
            "conversion end",
            run_id=run_id,
            event="RUN_END",
            status="ok",
            input_path=str(input_path),
            lines_in=stats.lines_read,
            rows_out=stats.records_written,
        )
    finally:
        if summary:
            write_run_summary(
                Path(summary),
                run_id=run_id,
                input_path=input_path,
                output_path=output_path,
                stats=stats,
                error=failure,
            )
        close_logger(logger)

    if failure is not None:
        return EXIT_HARD_FAIL
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    try:
        return run_command(args)
    except GeoDataError as exc:
        sys.stderr.write(f"error [{exc.error_code}]: {exc}\n")
        return EXIT_HARD_FAIL
    except Exception as exc:
        sys.stderr.write(f"error [UNEXPECTED_ERROR]: {exc}\n")
        return EXIT_HARD_FAIL


if __name__ == "__main__":
    raise SystemExit(main())
