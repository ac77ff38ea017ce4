# MIT License (see LICENSE)
"""
rope_sim - A 2D hanging rope simulation.

A rope is a chain of point masses joined by distance constraints, advanced
each frame with position Verlet integration and iterative constraint
relaxation (Position Based Dynamics). One end is pinned by default and any
particle can be dragged with a pointer.

Main entry points:
    - Rope: The particle chain and its update cycle.
    - Particle: A single point mass.
    - Vec2: Immutable 2D vector.
    - PointerController: Press/move/release dragging of particles.
    - FrameClock: Elapsed-time source for a frame loop.

Submodules:
    - core: Gravity, Verlet integrator, diagnostics.
    - constraints: Distance constraints and the relaxation solver.
    - io: JSON rope configuration files.
    - renderer: Optional visualization adapters.

Example:
    from rope_sim import Rope

    rope = Rope(origin=(250, 100), count=23, length=200)
    rope.update(1 / 60)
    points = rope.positions()
"""
from .rope import Rope
from .types import Particle
from .util import Vec2
from .interaction import InteractionState, PointerController
from .clock import FrameClock

__all__ = [
    # Core simulation
    "Rope",
    "Particle",
    "Vec2",
    # Interaction
    "InteractionState",
    "PointerController",
    "FrameClock",
]
