# MIT License (see LICENSE)
"""
Constraint solvers for the rope simulation.

This subpackage provides constraint types and solvers:
    - DistanceConstraint: Fixed separation between two particles (by index).
    - solve_distance_constraints: Iterative Gauss-Seidel relaxation.
    - chain_constraints: Builds the adjacency constraints of a chain.

Typical usage:
    from rope_sim.constraints import chain_constraints, solve_distance_constraints

    constraints = chain_constraints(len(particles), rest_distance=10.0)
    solve_distance_constraints(particles, constraints, iters=10)
"""
from .solver import (
    DistanceConstraint,
    chain_constraints,
    solve_distance_constraint,
    solve_distance_constraints,
)

__all__ = [
    "DistanceConstraint",
    "chain_constraints",
    "solve_distance_constraint",
    "solve_distance_constraints",
]
