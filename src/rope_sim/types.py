# MIT License (see LICENSE)
"""
Core type definitions for the rope simulation.

A Particle is a single point mass of the chain. Its velocity is never stored:
the Verlet integrator infers it from the difference between the current and
the previous position. Anchored particles are skipped by the integrator and
treated as immovable by the constraint solver.
"""
from __future__ import annotations
from dataclasses import dataclass, field

from .util import Vec2, sub, zero


@dataclass
class Particle:
    """
    A point mass in the rope chain.

    Attributes:
        position: Current position.
        previous_position: Position at the previous frame. Defaults to
            `position`, i.e. the particle starts at rest.
        acceleration: Acceleration applied during the next integration.
        anchored: If True the particle is pinned: integration skips it and
            constraint corrections move only its neighbour.
    """
    position: Vec2
    previous_position: Vec2 | None = None
    acceleration: Vec2 = field(default_factory=zero)
    anchored: bool = False

    def __post_init__(self) -> None:
        """Accept tuples for positions and start at rest when no history is given."""
        self.position = Vec2.of(self.position)
        if self.previous_position is None:
            self.previous_position = self.position
        else:
            self.previous_position = Vec2.of(self.previous_position)
        self.acceleration = Vec2.of(self.acceleration)

    @property
    def velocity(self) -> Vec2:
        """Implicit per-frame displacement (position - previous_position)."""
        return sub(self.position, self.previous_position)

    def move_to(self, position: Vec2 | tuple[float, float], keep_velocity: bool = True) -> None:
        """
        Teleport the particle.

        With keep_velocity=False the previous position is moved as well so
        the particle carries no implied velocity afterwards.
        """
        self.position = Vec2.of(position)
        if not keep_velocity:
            self.previous_position = self.position
