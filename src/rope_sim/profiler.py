# MIT License (see LICENSE)
"""
Lightweight timing of the rope update phases.

When a Profiler is attached to a Rope, every update records the time spent
in the "forces", "integrate" and "relax" sections.

Example:
    profiler = Profiler()
    rope = Rope(origin=(250, 100), count=23, length=200, profiler=profiler)
    for _ in range(600):
        rope.update(1 / 60)
    print(profiler.stats.summary())
"""
from __future__ import annotations
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator


@dataclass
class ProfileStats:
    """
    Timing samples per named section, in seconds.
    """
    samples: dict[str, list[float]] = field(default_factory=dict)

    def add(self, name: str, dt: float) -> None:
        """Record one sample for a section."""
        self.samples.setdefault(name, []).append(dt)

    def summary(self) -> dict[str, dict[str, float]]:
        """
        Summary statistics per section.

        Returns:
            Dict mapping section name to:
            - 'n': sample count
            - 'mean_ms': average time in milliseconds
            - 'max_ms': maximum time in milliseconds
        """
        out = {}
        for name, times in self.samples.items():
            n = len(times)
            out[name] = {
                "n": n,
                "mean_ms": 1e3 * (sum(times) / n),
                "max_ms": 1e3 * max(times),
            }
        return out


class Profiler:
    """
    Context-manager based section timer.

    Usage:
        profiler = Profiler()
        with profiler.section("relax"):
            rope.relax()
        stats = profiler.stats.summary()
    """

    def __init__(self) -> None:
        self.stats = ProfileStats()

    @contextmanager
    def section(self, name: str) -> Iterator[None]:
        """Time the enclosed block under `name`. The sample is recorded even if the block raises."""
        t0 = time.perf_counter()
        try:
            yield
        finally:
            self.stats.add(name, time.perf_counter() - t0)
