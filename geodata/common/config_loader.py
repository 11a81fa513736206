"""Configuration loading and validation."""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Any

from geodata.common.constants import DEFAULT_CONFIG
from geodata.common.fs import read_yaml
from geodata.common.schema import validate_run_config


def _deep_merge(base: Any, overlay: Any) -> Any:
    if isinstance(base, dict) and isinstance(overlay, dict):
        merged = dict(base)
        for key, value in overlay.items():
            if key in merged:
                merged[key] = _deep_merge(merged[key], value)
            else:
                merged[key] = value
        return merged
    return overlay


def load_config(
    config_path: Path | None = None,
    *,
    overlay_path: Path | None = None,
    allow_unknown: bool = False,
) -> dict:
    """Merge the built-in defaults, an optional config file and an optional overlay.

    A missing ``config_path`` is an error; a missing overlay file is skipped so
    environment-specific overlays can be optional.
    """
    cfg = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is not None:
        cfg = _deep_merge(cfg, read_yaml(config_path))
    if overlay_path is not None and overlay_path.exists():
        cfg = _deep_merge(cfg, read_yaml(overlay_path))
    return validate_run_config(cfg, allow_unknown=allow_unknown)
