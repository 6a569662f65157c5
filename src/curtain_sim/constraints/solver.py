# MIT License (see LICENSE)
"""
Distance constraint relaxation for the curtain grid.

This module provides a position-based Gauss-Seidel solver: each pass walks
the constraint list in order and moves both endpoints of every constraint
part of the way back toward its rest length. Later constraints in a pass see
the corrections made by earlier ones. Repeated passes approximate, without
guaranteeing, full constraint satisfaction.

Key concepts:
- Constraints reference particles by index into the owning panel's list.
- The correction is split 50/50 between the endpoints. A pinned endpoint
  does not move and its half of the correction is dropped, so a constraint
  with one pinned end only partially corrects toward rest length.
- A constraint whose endpoints coincide (closer than 1e-12) has no
  defined direction and is skipped for that pass.
"""
from __future__ import annotations
from dataclasses import dataclass

import numpy as np

from ..types import Particle
from ..util import distance

# Endpoints closer than this are treated as coincident
_MIN_DIST = 1e-12


@dataclass(frozen=True)
class Constraint:
    """
    Keeps two particles of the same panel at a fixed distance.

    Attributes:
        i: Index of the first particle in the panel's particle list.
        j: Index of the second particle.
        rest_length: Distance captured at build time. Never changes.
    """
    i: int
    j: int
    rest_length: float

    @classmethod
    def between(cls, particles: list[Particle], i: int, j: int) -> "Constraint":
        """Create a constraint whose rest length is the current distance."""
        return cls(i=i, j=j, rest_length=distance(particles[i].position, particles[j].position))


def resolve_constraint(particles: list[Particle], c: Constraint, stiffness: float) -> bool:
    """
    Apply one relaxation step for a single constraint.

    Args:
        particles: The panel's particle list (modified in-place).
        c: Constraint to resolve.
        stiffness: Fraction of the error to correct.

    Returns:
        False if the constraint was skipped because its endpoints coincide
        (distance below 1e-12),
        True otherwise.
    """
    p1 = particles[c.i]
    p2 = particles[c.j]
    d = p2.position - p1.position
    dist = float(np.hypot(d[0], d[1]))

    if dist < _MIN_DIST:
        return False

    diff = (c.rest_length - dist) / dist * stiffness
    offset = d * diff * 0.5

    if not p1.pinned:
        p1.position -= offset
    if not p2.pinned:
        p2.position += offset
    return True


def relax_constraints(
    particles: list[Particle],
    constraints: list[Constraint],
    stiffness: float,
    iters: int = 5,
) -> int:
    """
    Run `iters` Gauss-Seidel passes over all constraints.

    Args:
        particles: The panel's particle list (modified in-place).
        constraints: Constraints in resolution order.
        stiffness: Fraction of each constraint's error corrected per pass.
        iters: Number of passes.

    Returns:
        Number of (constraint, pass) evaluations skipped as degenerate.
    """
    skipped = 0
    for _ in range(iters):
        for c in constraints:
            if not resolve_constraint(particles, c, stiffness):
                skipped += 1
    return skipped
