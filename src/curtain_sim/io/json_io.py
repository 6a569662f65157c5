# MIT License (see LICENSE)
"""
JSON serialization for curtain configuration and frames.

Only configuration is ever written to disk; particle state is rebuilt from
the viewport on every start. Frames can be serialized for an external
(e.g. browser) renderer.

Config JSON Schema Overview:
----------------------------
{
  "gravity": float,          # Default: 0.15
  "friction": float,         # Default: 0.98
  "spacing": float,          # Default: 15
  "stiffness": float,        # Default: 0.8
  "opening_speed": float,    # Default: 0.05
  "mouse_radius": float,     # Default: 50
  "mouse_strength": float,   # Default: 0.5
  "solver_iters": int,       # Default: 5
  "top": float,              # Default: -20
  "folds": int,              # Default: 8
  "open_margin": float,      # Default: 100
  "open_bunch": float,       # Default: 50
  "open_lift": float,        # Default: 50
  "open_lift_slope": float   # Default: 20
}
Every key is optional. Unknown keys are rejected.

Frame JSON:
-----------
{
  "tick": int,
  "time": float,
  "panels": [
    {"side": "left" | "right", "rows": int, "cols": int,
     "positions": [[x, y], ...]}     # row-major, rows*cols entries
  ]
}
"""
from __future__ import annotations
import json
import logging
from dataclasses import fields
from typing import TYPE_CHECKING, Any

from ..config import SimConfig

if TYPE_CHECKING:
    from ..scene import Frame

logger = logging.getLogger(__name__)

_INT_FIELDS = {"solver_iters", "folds"}


def config_from_json(d: dict[str, Any]) -> SimConfig:
    """
    Build a SimConfig from a dictionary, filling in defaults.

    Args:
        d: Mapping of field name to number.

    Returns:
        The parsed configuration.

    Raises:
        ValueError: On unknown keys or non-numeric values.
    """
    if not isinstance(d, dict):
        raise ValueError(f"Config must be a JSON object, got {type(d).__name__}")

    known = SimConfig.field_names()
    unknown = sorted(set(d) - set(known))
    if unknown:
        raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for name, raw in d.items():
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ValueError(f"Config value '{name}' must be a number, got {raw!r}")
        if name in _INT_FIELDS:
            if isinstance(raw, float) and not raw.is_integer():
                raise ValueError(f"Config value '{name}' must be an integer, got {raw!r}")
            values[name] = int(raw)
        else:
            values[name] = float(raw)
    return SimConfig(**values)


def config_to_json(config: SimConfig) -> dict[str, Any]:
    """
    Serialize a SimConfig to a dictionary (round-trip compatible).

    Only fields that differ from the defaults are included.
    """
    default = SimConfig()
    result = {}
    for f in fields(SimConfig):
        value = getattr(config, f.name)
        if value != getattr(default, f.name):
            result[f.name] = value
    return result


def load_config_raw(path: str) -> dict[str, Any]:
    """Load raw JSON data from a config file without validation."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def load_config(path: str) -> SimConfig:
    """
    Load and validate a configuration file.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the content is not a valid configuration.
    """
    logger.info("Loading config from: %s", path)
    return config_from_json(load_config_raw(path))


def save_config(config: SimConfig, path: str, indent: int = 2) -> None:
    """Save a configuration to a JSON file on disk."""
    logger.info("Saving config to: %s", path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config_to_json(config), f, indent=indent)


def frame_to_json(frame: "Frame") -> dict[str, Any]:
    """Serialize a Frame to a JSON-compatible dictionary."""
    return {
        "tick": frame.tick,
        "time": frame.time,
        "panels": [
            {
                "side": pf.side.value,
                "rows": pf.rows,
                "cols": pf.cols,
                "positions": pf.positions.tolist(),
            }
            for pf in frame.panels
        ],
    }
