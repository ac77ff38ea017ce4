# MIT License (see LICENSE)
"""
Diagnostic measures for the rope chain.

Used by tests, examples and benchmarks to check how well the relaxation
solver satisfies the distance constraints. A perfectly relaxed rope has
zero error on every edge and a chain length of (n-1) * rest_distance.
"""
from __future__ import annotations
from typing import Sequence

import numpy as np

from ..types import Particle
from ..util import to_array


def edge_lengths(particles: Sequence[Particle]) -> np.ndarray:
    """
    Length of each chain edge (i, i+1).

    Returns:
        Array of shape (n-1,). Empty for chains with fewer than 2 particles.
    """
    pts = to_array(p.position for p in particles)
    if len(pts) < 2:
        return np.zeros(0, dtype=np.float64)
    return np.linalg.norm(np.diff(pts, axis=0), axis=1)


def constraint_errors(particles: Sequence[Particle], rest_distance: float) -> np.ndarray:
    """
    Signed constraint violation per edge: |x_{i+1} - x_i| - rest_distance.

    Positive values mean the edge is stretched, negative compressed.
    """
    return edge_lengths(particles) - rest_distance


def max_constraint_error(particles: Sequence[Particle], rest_distance: float) -> float:
    """Largest absolute edge violation (0.0 for a single particle)."""
    err = constraint_errors(particles, rest_distance)
    if err.size == 0:
        return 0.0
    return float(np.max(np.abs(err)))


def chain_length(particles: Sequence[Particle]) -> float:
    """Total polyline length of the chain."""
    return float(np.sum(edge_lengths(particles)))


def all_finite(particles: Sequence[Particle]) -> bool:
    """True if every position and previous position is finite."""
    cur = to_array(p.position for p in particles)
    prev = to_array(p.previous_position for p in particles)
    return bool(np.isfinite(cur).all() and np.isfinite(prev).all())
