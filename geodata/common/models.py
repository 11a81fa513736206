"""Data models used across the pipeline."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from typing import Any

from geodata.common.constants import OUTPUT_FIELDS


@dataclass(frozen=True)
class GeoRecord:
    name: str = ""
    description: str = ""
    min_lat: Decimal | None = None
    max_lat: Decimal | None = None
    min_lon: Decimal | None = None
    max_lon: Decimal | None = None
    obsolete_description: str = ""
    identity: str = ""
    proj_value: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_row(self) -> list[str]:
        return ["" if getattr(self, field) is None else str(getattr(self, field)) for field in OUTPUT_FIELDS]
