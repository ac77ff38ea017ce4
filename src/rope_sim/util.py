# MIT License (see LICENSE)
"""
2D vector value type and vector math helpers.

Vec2 is an immutable (x, y) pair used for every position, previous position
and acceleration in the simulation. The module-level functions are the pure
vector operations used by the integrator and the constraint solver; the
operators on Vec2 delegate to them.

numpy helpers convert points to float64 arrays for renderers and diagnostics.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np


@dataclass(frozen=True)
class Vec2:
    """
    Immutable 2D point/vector.

    Attributes:
        x: Horizontal component.
        y: Vertical component (+y points down in screen space).
    """
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        """Store components as plain floats (accepts ints and numpy scalars)."""
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))

    @classmethod
    def of(cls, p: "Vec2 | Iterable[float]") -> "Vec2":
        """Build a Vec2 from another Vec2, a tuple/list or a numpy array."""
        if isinstance(p, Vec2):
            return p
        x, y = p
        return cls(x, y)

    def __add__(self, other: "Vec2") -> "Vec2":
        return add(self, other)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return sub(self, other)

    def __mul__(self, k: float) -> "Vec2":
        return scale(k, self)

    def __rmul__(self, k: float) -> "Vec2":
        return scale(k, self)

    def __neg__(self) -> "Vec2":
        return scale(-1.0, self)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def to_array(self) -> np.ndarray:
        """Return the vector as a float64 array of shape (2,)."""
        return np.array([self.x, self.y], dtype=np.float64)


def zero() -> Vec2:
    """The zero vector."""
    return Vec2(0.0, 0.0)


def add(a: Vec2, b: Vec2) -> Vec2:
    """Component-wise sum a + b."""
    return Vec2(a.x + b.x, a.y + b.y)


def scale(k: float, v: Vec2) -> Vec2:
    """Scalar multiple k * v."""
    return Vec2(v.x * k, v.y * k)


def sub(a: Vec2, b: Vec2) -> Vec2:
    """Difference a - b, computed as a + (-1 * b)."""
    return add(a, scale(-1.0, b))


def magnitude(v: Vec2) -> float:
    """Euclidean length sqrt(x² + y²)."""
    return float(np.sqrt(v.x * v.x + v.y * v.y))


def distance(a: Vec2, b: Vec2) -> float:
    """Euclidean distance between two points."""
    return magnitude(sub(a, b))


def to_array(points: Iterable[Vec2]) -> np.ndarray:
    """
    Stack points into a float64 array of shape (n, 2).

    An empty input yields an array of shape (0, 2).
    """
    pts = [(p.x, p.y) for p in points]
    if not pts:
        return np.zeros((0, 2), dtype=np.float64)
    return np.array(pts, dtype=np.float64)
