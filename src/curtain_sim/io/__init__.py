# MIT License (see LICENSE)
"""
Input/Output utilities for the curtain simulation.

This subpackage provides:
    - Config serialization: Save and load SimConfig to/from JSON files.
    - Frame export: Turn a scene Frame into plain JSON for a renderer.

Typical usage:
    from curtain_sim.io import load_config, save_config, frame_to_json

    config = load_config("curtain.json")
    save_config(config, "output.json")
    data = frame_to_json(scene.frame())
"""
from .json_io import (
    load_config,
    load_config_raw,
    save_config,
    config_from_json,
    config_to_json,
    frame_to_json,
)

__all__ = [
    # Loading
    "load_config",
    "load_config_raw",
    # Saving
    "save_config",
    # Serialization
    "config_from_json",
    "config_to_json",
    "frame_to_json",
]
