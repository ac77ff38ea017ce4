# MIT License (see LICENSE)
"""
Force generators for the rope simulation.

Particles have unit mass, so a force is applied by setting the particle's
acceleration directly. Acceleration is overwritten, not accumulated: each
frame starts from gravity alone.
"""
from __future__ import annotations

from ..types import Particle
from ..util import Vec2


def apply_gravity(particle: Particle, g: float) -> None:
    """
    Set the particle's acceleration to (0, g).

    Anchored particles are left untouched; the integrator ignores their
    acceleration anyway.

    Args:
        particle: Particle to update in-place.
        g: Gravity magnitude along +y (screen "down").
    """
    if particle.anchored:
        return
    particle.acceleration = Vec2(0.0, g)
