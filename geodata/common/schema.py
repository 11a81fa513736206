"""Minimal strict schema for the YAML run configuration."""

from __future__ import annotations

from geodata.common.errors import ConfigError

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "WARNING", "ERROR")

_SECTIONS = {
    "input": {"default_path", "encoding"},
    "output": {"path", "echo_console", "summary_path"},
    "parsing": {"flush_trailing_record"},
    "logging": {"level", "log_dir"},
}


def _assert_required_keys(obj: dict, required: set[str], ctx: str) -> None:
    missing = required - set(obj)
    if missing:
        missing_str = ", ".join(sorted(missing))
        raise ConfigError(f"Missing keys in {ctx}: {missing_str}")


def _assert_no_unknown_keys(obj: dict, known: set[str], ctx: str, allow_unknown: bool) -> None:
    if allow_unknown:
        return
    unknown = set(obj) - known
    if unknown:
        unknown_str = ", ".join(sorted(unknown))
        raise ConfigError(f"Unknown keys in {ctx}: {unknown_str}")


def _assert_type(value: object, expected: type, ctx: str, *, nullable: bool = False) -> None:
    if value is None and nullable:
        return
    if not isinstance(value, expected):
        raise ConfigError(f"Invalid value for {ctx}: {value!r}")


def validate_run_config(cfg: dict, *, allow_unknown: bool = False) -> dict:
    _assert_required_keys(cfg, set(_SECTIONS), "config")
    _assert_no_unknown_keys(cfg, set(_SECTIONS), "config", allow_unknown)

    for section, keys in _SECTIONS.items():
        if not isinstance(cfg[section], dict):
            raise ConfigError(f"Config section {section} must be a mapping")
        _assert_required_keys(cfg[section], keys, section)
        _assert_no_unknown_keys(cfg[section], keys, section, allow_unknown)

    _assert_type(cfg["input"]["default_path"], str, "input.default_path")
    _assert_type(cfg["input"]["encoding"], str, "input.encoding")
    _assert_type(cfg["output"]["path"], str, "output.path")
    _assert_type(cfg["output"]["echo_console"], bool, "output.echo_console")
    _assert_type(cfg["output"]["summary_path"], str, "output.summary_path", nullable=True)
    _assert_type(cfg["parsing"]["flush_trailing_record"], bool, "parsing.flush_trailing_record")
    _assert_type(cfg["logging"]["log_dir"], str, "logging.log_dir", nullable=True)

    level = cfg["logging"]["level"]
    if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
        raise ConfigError(f"Invalid value for logging.level: {level!r}")

    return cfg
