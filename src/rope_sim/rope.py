# MIT License (see LICENSE)
"""
The rope: a chain of particles and its per-frame update cycle.

The Rope owns its particles and the distance constraints between neighbours.
Each call to update(dt):
    1. Sets gravity on every free particle.
    2. Integrates every particle with position Verlet.
    3. Relaxes the chain constraints for a fixed number of sweeps.

Structure:
    - User creates a Rope with an origin, a particle count and a length.
      Particles are laid out along +x from the origin, particle 0 pinned.
    - An external loop calls rope.update(dt) once per frame.
    - A renderer reads rope.positions() and draws them as a polyline.
    - A PointerController may pin and move single particles between frames.
"""
from __future__ import annotations
from contextlib import nullcontext
from dataclasses import dataclass, field
import logging

import numpy as np

from .constants import DEFAULT_ITERATIONS, GRAVITY, MIN_DISTANCE
from .types import Particle
from .util import Vec2, distance, to_array
from .profiler import Profiler
from .core.forces import apply_gravity
from .core.integrators import verlet_step
from .constraints.solver import (
    DistanceConstraint,
    chain_constraints,
    solve_distance_constraints,
)

logger = logging.getLogger(__name__)


@dataclass
class Rope:
    """
    Hanging rope simulated as a chain of point masses.

    Attributes:
        origin: Position of particle 0 (x0, y0).
        count: Number of particles n (>= 1).
        length: Total rope length L (> 0). The rest distance between
            neighbours is L / n.
        gravity: Gravity magnitude along +y in units/s². Default: 20.
        iterations: Constraint relaxation sweeps per update. Default: 10.
        min_distance: Neighbours closer than this are treated as coincident
            and their constraint is skipped for that sweep.
        profiler: Optional Profiler receiving per-phase timings.
    """
    origin: tuple[float, float]
    count: int
    length: float
    gravity: float = GRAVITY
    iterations: int = DEFAULT_ITERATIONS
    min_distance: float = MIN_DISTANCE
    profiler: Profiler | None = None

    # Internal state
    particles: list[Particle] = field(default_factory=list, init=False)
    constraints: list[DistanceConstraint] = field(default_factory=list, init=False)
    time: float = field(default=0.0, init=False)
    frame: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Validate parameters and lay out the particles."""
        if self.count < 1:
            raise ValueError(f"Rope needs at least one particle, got count={self.count}")
        if self.length <= 0:
            raise ValueError(f"Rope length must be positive, got {self.length}")
        if self.iterations < 0:
            raise ValueError(f"Iteration count must be non-negative, got {self.iterations}")
        if self.min_distance < 0:
            raise ValueError(f"min_distance must be non-negative, got {self.min_distance}")

        x0, y0 = self.origin
        self.origin = (float(x0), float(y0))
        self.length = float(self.length)

        step = self.rest_distance
        self.particles = [
            Particle(position=Vec2(x0 + step * i, y0), anchored=(i == 0))
            for i in range(self.count)
        ]
        self.constraints = chain_constraints(self.count, step)
        logger.debug(
            f"Created rope: {self.count} particles, length {self.length}, rest distance {step:.4f}"
        )

    @property
    def rest_distance(self) -> float:
        """Target separation between neighbours (length / count)."""
        return self.length / self.count

    def __len__(self) -> int:
        return len(self.particles)

    def _section(self, name: str):
        """Profiler section if a profiler is attached, otherwise a no-op context."""
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def _check_index(self, index: int) -> int:
        if not 0 <= index < len(self.particles):
            raise IndexError(f"Particle index {index} out of range for rope of {len(self.particles)}")
        return index

    def _apply_forces(self) -> None:
        """Set gravity on every free particle."""
        for p in self.particles:
            apply_gravity(p, self.gravity)

    def _integrate(self, dt: float) -> None:
        """Integrate every particle; each step reads only that particle's state."""
        for p in self.particles:
            verlet_step(p, dt)

    def relax(self, iterations: int | None = None) -> int:
        """
        Relax the chain constraints.

        Args:
            iterations: Number of sweeps. Defaults to self.iterations (10).

        Returns:
            Number of constraint visits skipped because neighbours coincided.
        """
        iters = self.iterations if iterations is None else int(iterations)
        if iters < 0:
            raise ValueError(f"Iteration count must be non-negative, got {iters}")
        skipped = solve_distance_constraints(
            self.particles, self.constraints, iters=iters, min_distance=self.min_distance
        )
        if skipped:
            logger.debug(f"Frame {self.frame}: skipped {skipped} coincident constraint visits")
        return skipped

    def update(self, dt: float) -> None:
        """
        Advance the rope by one frame.

        Large dt values are not clamped here; a frame loop that may be
        suspended should clamp them itself (see FrameClock.max_dt).

        Args:
            dt: Elapsed time in seconds (>= 0).
        """
        dt = float(dt)
        if not dt >= 0.0:
            raise ValueError(f"dt must be non-negative, got {dt}")
        if self.iterations < 0:
            raise ValueError(f"Iteration count must be non-negative, got {self.iterations}")

        with self._section("forces"):
            self._apply_forces()
        with self._section("integrate"):
            self._integrate(dt)
        with self._section("relax"):
            self.relax()

        self.time += dt
        self.frame += 1

    def query_point(self, point: Vec2 | tuple[float, float]) -> int:
        """
        Index of the particle nearest to a point.

        Ties go to the lowest index: a later particle replaces the current
        best only if it is strictly closer.

        Used for pointer picking.
        """
        q = Vec2.of(point)
        best = 0
        best_d = distance(self.particles[0].position, q)
        for i in range(1, len(self.particles)):
            d = distance(self.particles[i].position, q)
            if d < best_d:
                best, best_d = i, d
        return best

    def pin(self, index: int, position: Vec2 | tuple[float, float] | None = None) -> None:
        """
        Anchor a particle, optionally moving it.

        A moved particle also has its previous position reset so that, if it
        is unpinned later, it starts at rest.
        """
        p = self.particles[self._check_index(index)]
        p.anchored = True
        if position is not None:
            p.move_to(position, keep_velocity=False)

    def unpin(self, index: int) -> None:
        """Release an anchored particle back into the simulation."""
        self.particles[self._check_index(index)].anchored = False

    def positions(self) -> np.ndarray:
        """Particle positions in chain order as a float64 array of shape (n, 2)."""
        return to_array(p.position for p in self.particles)

    def anchored_mask(self) -> np.ndarray:
        """Boolean array of shape (n,), True where a particle is anchored."""
        return np.array([p.anchored for p in self.particles], dtype=bool)
