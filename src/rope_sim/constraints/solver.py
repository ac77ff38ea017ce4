# MIT License (see LICENSE)
"""
Position-based distance constraint solver.

Constraints are relaxed with Gauss-Seidel sweeps in the style of Jakobsen's
"Advanced Character Physics": each constraint moves its two particles along
the line joining them until their separation equals the target length, and
the next constraint sees the already corrected positions. Repeating the sweep
a fixed number of times approximates satisfying all constraints at once.

For a single constraint one sweep is exact. For longer chains correcting one
edge disturbs its neighbours, so a finite number of sweeps only reduces the
total violation. Sweeps always run in list order; for a rope built front to
back this converges fastest near particle 0.

Anchored particles take no part of the correction: if one end is anchored
the free end moves by the full amount, if both are free each moves by half.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence

from ..constants import DEFAULT_ITERATIONS, MIN_DISTANCE
from ..types import Particle
from ..util import add, magnitude, scale, sub


@dataclass(frozen=True)
class DistanceConstraint:
    """
    Keeps two particles a fixed distance apart.

    Particles are referenced by index into the owning rope's particle list,
    never by object, so the rope stays their only owner.

    Attributes:
        a: Index of the first particle.
        b: Index of the second particle.
        length: Target separation (rest distance).
    """
    a: int
    b: int
    length: float


def solve_distance_constraint(
    pa: Particle,
    pb: Particle,
    length: float,
    min_distance: float = MIN_DISTANCE,
) -> bool:
    """
    Apply one relaxation step to a single pair.

    Args:
        pa: First particle.
        pb: Second particle.
        length: Target separation.
        min_distance: Separations below this are considered coincident.

    Returns:
        False if the pair was skipped because the particles coincide,
        True otherwise (including when both are anchored).
    """
    if pa.anchored and pb.anchored:
        return True

    delta = sub(pb.position, pa.position)
    d = magnitude(delta)
    if d < min_distance:
        return False

    diff = (d - length) / d

    if pa.anchored:
        pb.position = sub(pb.position, scale(diff, delta))
    elif pb.anchored:
        pa.position = add(pa.position, scale(diff, delta))
    else:
        offset = scale(0.5 * diff, delta)
        pa.position = add(pa.position, offset)
        pb.position = sub(pb.position, offset)
    return True


def solve_distance_constraints(
    particles: Sequence[Particle],
    constraints: Sequence[DistanceConstraint],
    iters: int = DEFAULT_ITERATIONS,
    min_distance: float = MIN_DISTANCE,
) -> int:
    """
    Relax all constraints with repeated Gauss-Seidel sweeps.

    Args:
        particles: Particles referenced by the constraints (modified in-place).
        constraints: Constraints, solved in list order on every sweep.
        iters: Number of sweeps.
        min_distance: Coincidence threshold passed to each pair solve.

    Returns:
        Number of constraint visits skipped because the two particles
        coincided. Zero in normal operation.
    """
    skipped = 0
    for _ in range(iters):
        for c in constraints:
            if not solve_distance_constraint(particles[c.a], particles[c.b], c.length, min_distance):
                skipped += 1
    return skipped


def chain_constraints(count: int, rest_distance: float) -> list[DistanceConstraint]:
    """Build the n-1 constraints (i, i+1) of a chain of `count` particles, in ascending order."""
    return [DistanceConstraint(a=i, b=i + 1, length=rest_distance) for i in range(count - 1)]
