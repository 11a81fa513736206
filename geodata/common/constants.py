"""Application constants."""

DEFAULT_INPUT_PATH = "input.txt"
DEFAULT_OUTPUT_PATH = "output.txt"
EXIT_SUCCESS = 0
EXIT_HARD_FAIL = 20
OUTPUT_FIELDS = (
    "identity",
    "name",
    "description",
    "min_lat",
    "max_lat",
    "min_lon",
    "max_lon",
    "proj_value",
    "obsolete_description",
)
OBSOLETE_MARKERS = ("DISCONTINUED", "DEPRECATED")
JSON_LOG_FIELDS = (
    "timestamp",
    "level",
    "run_id",
    "event",
    "status",
    "input_path",
    "line_number",
    "line",
    "lines_in",
    "rows_out",
    "error_code",
    "message",
)
DEFAULT_CONFIG = {
    "input": {
        "default_path": DEFAULT_INPUT_PATH,
        "encoding": "utf-8",
    },
    "output": {
        "path": DEFAULT_OUTPUT_PATH,
        "echo_console": True,
        "summary_path": None,
    },
    "parsing": {
        "flush_trailing_record": False,
    },
    "logging": {
        "level": "INFO",
        "log_dir": None,
    },
}
