# MIT License (see LICENSE)
"""
JSON configuration files for ropes.

Only construction parameters and boundary conditions are stored: free
particle positions and velocities are never written, so loading a file
always yields a freshly laid out rope.

JSON Schema Overview:
---------------------
{
  "origin": [x, y],                # Default: [0, 0]
  "count": int,                    # Required, >= 1
  "length": float,                 # Required, > 0
  "gravity": float,                # Default: 20
  "iterations": int,               # Default: 10
  "min_distance": float,           # Default: 1e-9
  "pinned": [                      # Default: [0]
    int,                           # Pin at the construction position
    {"index": int, "position": [x, y]}   # Pin and move
  ]
}
"""
from __future__ import annotations
import json
import logging
from typing import Any

from ..constants import DEFAULT_ITERATIONS, GRAVITY, MIN_DISTANCE
from ..rope import Rope

logger = logging.getLogger(__name__)


def load_config_raw(path: str) -> dict[str, Any]:
    """
    Load raw JSON data from a rope configuration file.

    Args:
        path: Absolute or relative path to the JSON file.

    Returns:
        Dictionary containing the raw JSON data.
    """
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def rope_from_json(data: dict[str, Any]) -> Rope:
    """
    Construct a Rope from a configuration dictionary.

    Raises:
        ValueError: If 'count' or 'length' is missing, a parameter is out of
            range, or a pin entry is malformed or out of range.
    """
    for key in ("count", "length"):
        if key not in data:
            raise ValueError(f"Rope configuration missing required '{key}' field.")

    origin = data.get("origin", [0.0, 0.0])
    if len(origin) != 2:
        raise ValueError(f"'origin' must be [x, y], got {origin!r}")

    rope = Rope(
        origin=(float(origin[0]), float(origin[1])),
        count=int(data["count"]),
        length=float(data["length"]),
        gravity=float(data.get("gravity", GRAVITY)),
        iterations=int(data.get("iterations", DEFAULT_ITERATIONS)),
        min_distance=float(data.get("min_distance", MIN_DISTANCE)),
    )

    pinned = data.get("pinned")
    if pinned is None:
        return rope

    # An explicit list replaces the default pin on particle 0
    rope.unpin(0)
    for entry in pinned:
        if isinstance(entry, dict):
            if "index" not in entry:
                raise ValueError(f"Pin entry missing 'index': {entry!r}")
            index = int(entry["index"])
            position = entry.get("position")
            if position is not None:
                if len(position) != 2:
                    raise ValueError(f"Pin position must be [x, y], got {position!r}")
                position = (float(position[0]), float(position[1]))
        else:
            index, position = int(entry), None

        if not 0 <= index < rope.count:
            raise ValueError(f"Pin index {index} out of range for rope of {rope.count} particles")
        rope.pin(index, position)

    return rope


def rope_to_json(rope: Rope) -> dict[str, Any]:
    """
    Serialize a rope's configuration to a dictionary.

    Every anchored particle is written as a pin with its current position,
    so a particle that is being dragged at save time is saved as pinned.
    """
    result: dict[str, Any] = {
        "origin": list(rope.origin),
        "count": rope.count,
        "length": rope.length,
    }

    # Optional parameters (skip if standard defaults)
    if rope.gravity != GRAVITY:
        result["gravity"] = rope.gravity
    if rope.iterations != DEFAULT_ITERATIONS:
        result["iterations"] = rope.iterations
    if rope.min_distance != MIN_DISTANCE:
        result["min_distance"] = rope.min_distance

    result["pinned"] = [
        {"index": i, "position": [p.position.x, p.position.y]}
        for i, p in enumerate(rope.particles)
        if p.anchored
    ]
    return result


def load_rope_config(path: str) -> Rope:
    """
    Load a rope configuration file and build the Rope.

    Raises:
        FileNotFoundError: If the file cannot be found.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the configuration is invalid.
    """
    logger.info(f"Loading rope configuration from: {path}")
    return rope_from_json(load_config_raw(path))


def save_rope_config(rope: Rope, path: str, indent: int = 2) -> None:
    """Write a rope's configuration to a JSON file."""
    data = rope_to_json(rope)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)
    logger.info(f"Rope configuration saved to: {path}")
