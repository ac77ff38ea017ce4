# MIT License (see LICENSE)
"""
Input/Output utilities for rope configurations.

This subpackage provides:
    - JSON configuration: save and load the parameters and pins a rope is
      built from. Simulation state (free particle positions, velocities) is
      never persisted.

Typical usage:
    from rope_sim.io import load_rope_config, save_rope_config

    rope = load_rope_config("rope.json")
    save_rope_config(rope, "copy.json")
"""
from .json_io import (
    load_config_raw,
    load_rope_config,
    save_rope_config,
    rope_from_json,
    rope_to_json,
)

__all__ = [
    # Loading
    "load_config_raw",
    "load_rope_config",
    # Saving
    "save_rope_config",
    # Serialization
    "rope_from_json",
    "rope_to_json",
]
