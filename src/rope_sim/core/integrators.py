# MIT License (see LICENSE)
"""
Position Verlet (Störmer-Verlet) integration.

Velocity is never stored. It is inferred from the last two positions:

    v        = x(t) - x(t - dt)
    x(t+dt)  = x(t) + v + a * dt²

Because velocity is implicit, any positional correction applied afterwards
(constraint relaxation, dragging) automatically becomes part of the
particle's velocity for the next frame. This makes the scheme very stable
under position-based constraint solving.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration#Basic_St%C3%B6rmer%E2%80%93Verlet
"""
from __future__ import annotations

from ..types import Particle
from ..util import add, scale, sub


def verlet_step(particle: Particle, dt: float) -> None:
    """
    Advance one particle by dt.

    Anchored particles are not touched (position and previous position stay
    as they are). With dt = 0 the acceleration term vanishes but the implied
    velocity is still applied, so a moving particle keeps drifting.

    Args:
        particle: Particle to integrate (modified in-place).
        dt: Timestep in seconds.
    """
    if particle.anchored:
        return

    v = sub(particle.position, particle.previous_position)
    particle.previous_position = particle.position
    particle.position = add(particle.position, add(v, scale(dt * dt, particle.acceleration)))
