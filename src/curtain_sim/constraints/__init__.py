# MIT License (see LICENSE)
"""
Constraint solvers for the curtain simulation.

This subpackage provides:
    - Constraint: Index-based distance constraint with a fixed rest length.
    - resolve_constraint: One relaxation step for a single constraint.
    - relax_constraints: Gauss-Seidel passes over a constraint list.

Typical usage:
    from curtain_sim.constraints import Constraint, relax_constraints

    c = Constraint.between(particles, 0, 1)
    relax_constraints(particles, [c], stiffness=0.8, iters=5)
"""
from .solver import Constraint, resolve_constraint, relax_constraints

__all__ = [
    "Constraint",
    "resolve_constraint",
    "relax_constraints",
]
