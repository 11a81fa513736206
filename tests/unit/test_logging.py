import json
import logging
from pathlib import Path

from geodata.common.constants import JSON_LOG_FIELDS
from geodata.common.logging import JsonLineFormatter, build_logger, close_logger, log_event


def test_json_formatter_emits_every_schema_field():
    record = logging.LogRecord("geodata.test", logging.ERROR, __file__, 1, "failed", None, None)
    record.error_code = "UNRECOGNIZED_LINE_FORMAT"
    record.line_number = 3

    payload = json.loads(JsonLineFormatter().format(record))

    assert set(JSON_LOG_FIELDS) <= set(payload)
    assert payload["level"] == "ERROR"
    assert payload["error_code"] == "UNRECOGNIZED_LINE_FORMAT"
    assert payload["line_number"] == 3
    assert payload["message"] == "failed"


def test_build_logger_writes_jsonl_file_and_close_flushes(tmp_path: Path):
    logger = build_logger("run-test", log_dir=tmp_path / "logs", level="warn")
    log_event(logger, "ignored below threshold", run_id="run-test", event="RUN_START")
    log_event(logger, "kept", level=logging.WARNING, run_id="run-test", event="TRAILING_RECORD_DISCARDED")
    close_logger(logger)

    lines = (tmp_path / "logs" / "run-test.log.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["event"] == "TRAILING_RECORD_DISCARDED"
    assert logger.handlers == []
