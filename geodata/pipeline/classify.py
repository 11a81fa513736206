"""Line classification for PROJ-style projection catalogs.

A catalog record is a block of lines terminated by a blank line::

    # NAD27 / Alabama East [NAD27 / Alabama East]
    # Area of use: (lat: 30.99, 35.00) - (lon: -86.79, -84.89)
    # DEPRECATED
    <26729> +proj=tmerc +lat_0=30.5 ... <>

Each line is classified on its own, with no lookback or lookahead, by the
first rule in ``LINE_RULES`` whose pattern is found in the line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Mapping

from geodata.common.constants import OBSOLETE_MARKERS
from geodata.common.errors import NumericFormatError


class LineType(Enum):
    LOCATION = "location"
    HEADER = "header"
    OBSOLETION = "obsoletion"
    IDENTITY = "identity"
    EMPTY = "empty"
    UNKNOWN = "unknown"


# The separator between integer and fraction is deliberately ``.`` (any
# character) so malformed bounds such as ``1,5`` still classify as a location
# line and surface as a numeric error instead of an unrecognized line.
_BOUND = r"-*\d+.\d+"

LOCATION_PATTERN = re.compile(
    rf"\(lat: (?P<min_lat>{_BOUND}), (?P<max_lat>{_BOUND})\) - "
    rf"\(lon: (?P<min_lon>{_BOUND}), (?P<max_lon>{_BOUND})"
)
HEADER_PATTERN = re.compile(r"# (?P<name>.+?) \[(?P<description>.+?)\]")
OBSOLETION_PATTERN = re.compile(rf"# (?P<obsolete_description>{'|'.join(OBSOLETE_MARKERS)})")
IDENTITY_PATTERN = re.compile(r"<(?P<identity>\d+)> \+proj=(?P<proj_value>\S+)")
EMPTY_PATTERN = re.compile(r"^\s*$")

# HEADER_PATTERN also matches location lines that carry a bracketed area
# name, so LOCATION must stay ahead of HEADER.
LINE_RULES: tuple[tuple[LineType, re.Pattern[str]], ...] = (
    (LineType.LOCATION, LOCATION_PATTERN),
    (LineType.HEADER, HEADER_PATTERN),
    (LineType.OBSOLETION, OBSOLETION_PATTERN),
    (LineType.IDENTITY, IDENTITY_PATTERN),
    (LineType.EMPTY, EMPTY_PATTERN),
)

_RULE_ORDER = [line_type for line_type, _pattern in LINE_RULES]
assert _RULE_ORDER.index(LineType.LOCATION) < _RULE_ORDER.index(LineType.HEADER)

_DECIMAL_RE = re.compile(r"^-?\d+(?:\.\d+)?$")


@dataclass(frozen=True)
class Classification:
    line_type: LineType
    fields: Mapping[str, str] = field(default_factory=dict)


def classify(line: str) -> Classification:
    for line_type, pattern in LINE_RULES:
        match = pattern.search(line)
        if match is None:
            continue
        if line_type is LineType.EMPTY:
            return Classification(LineType.EMPTY)
        return Classification(line_type, match.groupdict())
    return Classification(LineType.UNKNOWN)


def parse_decimal(text: str) -> Decimal:
    """Parse a bound using ``.`` as the decimal separator regardless of locale.

    Raises:
        NumericFormatError: if ``text`` is not a plain signed decimal.
    """
    if not _DECIMAL_RE.match(text):
        raise NumericFormatError(text)
    return Decimal(text)
