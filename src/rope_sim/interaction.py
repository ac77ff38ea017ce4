# MIT License (see LICENSE)
"""
Pointer interaction: dragging rope particles.

PointerController is a two-state machine (idle, dragging) driven by pointer
events delivered by the host:

    press(p)    idle -> dragging   pick the nearest particle, anchor it and
                                   snap it to the pointer
    move(p)     dragging           move the bound particle to the pointer
    release()   dragging -> idle   un-anchor the particle and unbind it

While bound, the particle is anchored, so the integrator leaves it alone and
the constraint solver pulls its neighbours towards it. On release it rejoins
the simulation with whatever velocity its last two positions imply.

The controller references the bound particle by index only; the rope stays
the sole owner of its particles.
"""
from __future__ import annotations
from dataclasses import dataclass
import logging

from .rope import Rope
from .types import Particle
from .util import Vec2

logger = logging.getLogger(__name__)


@dataclass
class InteractionState:
    """
    Pointer session state.

    Attributes:
        pointer_down: True between a press and the matching release.
        bound_index: Index of the dragged particle, or None when idle.
    """
    pointer_down: bool = False
    bound_index: int | None = None


class PointerController:
    """
    Binds pointer input to a single rope particle.

    Args:
        rope: The rope whose particles are dragged.
        state: Optional pre-existing session state (a fresh one by default).
        restore_anchor: If True, release() restores the particle's anchored
            flag to what it was before the press, so dragging a pinned
            particle leaves it pinned. If False (default) release always
            frees the particle.
    """

    def __init__(self, rope: Rope, state: InteractionState | None = None, restore_anchor: bool = False):
        self.rope = rope
        self.state = state if state is not None else InteractionState()
        self.restore_anchor = restore_anchor
        self._was_anchored = False

    @property
    def dragging(self) -> bool:
        """True while a particle is bound to the pointer."""
        return self.state.bound_index is not None

    @property
    def bound_particle(self) -> Particle | None:
        """The bound particle, looked up through the rope, or None."""
        if self.state.bound_index is None:
            return None
        return self.rope.particles[self.state.bound_index]

    def press(self, point: Vec2 | tuple[float, float]) -> int | None:
        """
        Start dragging the particle nearest to `point`.

        A press while already dragging is ignored (only one particle can be
        bound at a time).

        Returns:
            Index of the bound particle, or None if the press was ignored.
        """
        if self.dragging:
            logger.debug(f"Ignoring press while particle {self.state.bound_index} is bound")
            return None

        pos = Vec2.of(point)
        index = self.rope.query_point(pos)
        p = self.rope.particles[index]

        self._was_anchored = p.anchored
        p.anchored = True
        p.position = pos

        self.state.pointer_down = True
        self.state.bound_index = index
        logger.debug(f"Bound particle {index} at ({pos.x:.2f}, {pos.y:.2f})")
        return index

    def move(self, point: Vec2 | tuple[float, float]) -> None:
        """Move the bound particle to `point`. No-op when idle."""
        p = self.bound_particle
        if p is None:
            return
        p.position = Vec2.of(point)

    def release(self) -> None:
        """Unbind the dragged particle. No-op when idle."""
        self.state.pointer_down = False
        index = self.state.bound_index
        if index is None:
            return

        p = self.rope.particles[index]
        p.anchored = self._was_anchored if self.restore_anchor else False
        self.state.bound_index = None
        self._was_anchored = False
        logger.debug(f"Released particle {index} (anchored={p.anchored})")

    # Host event plumbing names
    on_pointer_down = press
    on_pointer_move = move
    on_pointer_up = release
