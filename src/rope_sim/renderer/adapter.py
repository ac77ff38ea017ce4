# MIT License (see LICENSE)
"""
Renderer adapters for rope visualization.

This module provides an abstract base class for rendering and a few concrete
implementations. The simulation has no rendering dependency; a host wires
one of these (or its own subclass for a canvas, pygame surface, etc.) to
rope.positions() once per frame.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

if TYPE_CHECKING:
    from ..rope import Rope


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    The rope is drawn as a single polyline through the particle positions
    in chain order.

    Usage:
        renderer.begin_frame(rope.time)
        renderer.draw_rope(rope.positions(), rope.anchored_mask())
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_rope(rope)
    """

    @abstractmethod
    def begin_frame(self, time: float) -> None:
        """
        Begin a new frame.

        Args:
            time: Current simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_rope(self, points: np.ndarray, anchored: np.ndarray) -> None:
        """
        Draw the rope.

        Args:
            points: Array of shape (n, 2), particle positions in chain order.
            anchored: Boolean array of shape (n,), True for pinned particles.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_rope(self, rope: "Rope") -> None:
        """Render one frame showing the rope's current positions."""
        self.begin_frame(rope.time)
        self.draw_rope(rope.positions(), rope.anchored_mask())
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Text renderer writing one line per particle.

    Output:
        === Frame t=0.0167 ===
        [0]* (250.00, 100.00)
        [1]  (258.70, 100.01)
    """

    def __init__(self, output: TextIO | None = None, precision: int = 2):
        self.output = output or sys.stdout
        self.precision = precision

    def begin_frame(self, time: float) -> None:
        self.output.write(f"=== Frame t={time:.4f} ===\n")

    def draw_rope(self, points: np.ndarray, anchored: np.ndarray) -> None:
        prec = self.precision
        for i, (x, y) in enumerate(points):
            mark = "*" if anchored[i] else " "
            self.output.write(f"[{i}]{mark} ({x:.{prec}f}, {y:.{prec}f})\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """
    No-op renderer, for headless runs and benchmarks.
    """

    def begin_frame(self, time: float) -> None:
        pass

    def draw_rope(self, points: np.ndarray, anchored: np.ndarray) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Records every frame in memory.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            rope.update(1 / 60)
            renderer.render_rope(rope)

        for frame in renderer.frames:
            print(frame["time"], frame["points"][-1])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, time: float) -> None:
        self._current_frame = {
            "time": time,
            "points": [],
            "anchored": [],
        }

    def draw_rope(self, points: np.ndarray, anchored: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["points"] = np.asarray(points, dtype=np.float64).tolist()
        self._current_frame["anchored"] = [bool(a) for a in anchored]

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def trajectory(self, index: int) -> np.ndarray:
        """Positions of one particle across all recorded frames, shape (frames, 2)."""
        if not self.frames:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([f["points"][index] for f in self.frames], dtype=np.float64)

    def clear(self) -> None:
        """Clear all buffered frames."""
        self.frames.clear()
