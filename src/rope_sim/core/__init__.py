# MIT License (see LICENSE)
"""
Core simulation components.

This subpackage provides:
    - Force generators: gravity.
    - Integrators: position (Störmer) Verlet.
    - Invariants: per-edge constraint error and chain length diagnostics.

Typical usage:
    from rope_sim.core import apply_gravity, verlet_step

    apply_gravity(particle, 20.0)
    verlet_step(particle, dt=1/60)
"""
from .forces import apply_gravity
from .integrators import verlet_step
from .invariants import (
    edge_lengths,
    constraint_errors,
    max_constraint_error,
    chain_length,
    all_finite,
)

__all__ = [
    # Forces
    "apply_gravity",
    # Integrators
    "verlet_step",
    # Invariants
    "edge_lengths",
    "constraint_errors",
    "max_constraint_error",
    "chain_length",
    "all_finite",
]
