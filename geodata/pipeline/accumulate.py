"""In-progress record assembly."""

from __future__ import annotations

from typing import Mapping

from geodata.common.models import GeoRecord
from geodata.pipeline.classify import LineType, parse_decimal

REQUIRED_GROUPS = (LineType.HEADER, LineType.LOCATION, LineType.IDENTITY)


class RecordAccumulator:
    """Mutable holder for the record currently being read.

    Each ``apply_*`` method overwrites its own field group, so a category that
    repeats inside one block keeps the last value seen.
    """

    def __init__(self) -> None:
        self._values: dict[str, object] = {}
        self._applied: set[LineType] = set()

    @property
    def is_pristine(self) -> bool:
        return not self._applied

    def missing_groups(self) -> list[LineType]:
        return [group for group in REQUIRED_GROUPS if group not in self._applied]

    def apply_location(self, fields: Mapping[str, str]) -> "RecordAccumulator":
        # Parse all four bounds before touching state.
        bounds = {key: parse_decimal(fields[key]) for key in ("min_lat", "max_lat", "min_lon", "max_lon")}
        self._values.update(bounds)
        self._applied.add(LineType.LOCATION)
        return self

    def apply_header(self, fields: Mapping[str, str]) -> "RecordAccumulator":
        self._values["name"] = fields["name"]
        self._values["description"] = fields["description"]
        self._applied.add(LineType.HEADER)
        return self

    def apply_obsoletion(self, fields: Mapping[str, str]) -> "RecordAccumulator":
        self._values["obsolete_description"] = fields["obsolete_description"]
        self._applied.add(LineType.OBSOLETION)
        return self

    def apply_identity(self, fields: Mapping[str, str]) -> "RecordAccumulator":
        self._values["identity"] = fields["identity"]
        self._values["proj_value"] = fields["proj_value"]
        self._applied.add(LineType.IDENTITY)
        return self

    def flush(self) -> tuple[GeoRecord, "RecordAccumulator"]:
        return GeoRecord(**self._values), RecordAccumulator()
