"""Domain errors and failure typing."""

from __future__ import annotations


class GeoDataError(Exception):
    """Base class for conversion failures."""

    error_code = "GEODATA_ERROR"


class ConfigError(GeoDataError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputNotFoundError(GeoDataError):
    """Raised when the input path does not resolve to a readable file."""

    error_code = "INPUT_NOT_FOUND"

    def __init__(self, path) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class LineError(GeoDataError):
    """Base class for failures tied to a single input line."""

    error_code = "LINE_ERROR"

    def __init__(self, message: str, *, line_number: int | None = None, line: str | None = None) -> None:
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"{message} (line {line_number}: {line!r})"
        super().__init__(message)


class UnrecognizedLineFormatError(LineError):
    """Raised when a line matches none of the classification rules."""

    error_code = "UNRECOGNIZED_LINE_FORMAT"


class NumericFormatError(LineError):
    """Raised when a location bound is shaped like a number but is not one."""

    error_code = "NUMERIC_FORMAT_ERROR"

    def __init__(
        self,
        value: str,
        *,
        line_number: int | None = None,
        line: str | None = None,
    ) -> None:
        self.value = value
        super().__init__(f"Invalid decimal value {value!r}", line_number=line_number, line=line)
