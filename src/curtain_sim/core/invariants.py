# MIT License (see LICENSE)
"""
Diagnostics for checking simulation health.

Used for verifying solver behaviour in tests and for spotting numerical
blow-ups while tuning parameters. A settled curtain has near-zero implied
kinetic energy and small constraint strain.
"""
from __future__ import annotations
import numpy as np

from ..constraints.solver import Constraint
from ..types import Particle
from ..util import distance, norm2


def implied_kinetic_energy(particles: list[Particle]) -> float:
    """
    Total kinetic energy of the free particles, using unit mass.

    T = Σ 0.5 * |x - x_prev|²

    Pinned particles are driven kinematically and are excluded.
    """
    ke = 0.0
    for p in particles:
        if p.pinned:
            continue
        ke += 0.5 * norm2(p.velocity)
    return ke


def max_strain(particles: list[Particle], constraints: list[Constraint]) -> float:
    """
    Largest relative deviation |d - L| / L over all constraints.

    Constraints with zero rest length are ignored. Returns 0.0 for an
    empty constraint list.
    """
    worst = 0.0
    for c in constraints:
        if c.rest_length <= 0:
            continue
        d = distance(particles[c.i].position, particles[c.j].position)
        worst = max(worst, abs(d - c.rest_length) / c.rest_length)
    return worst


def all_finite(particles: list[Particle]) -> bool:
    """True if every position and previous position is finite."""
    for p in particles:
        if not (np.all(np.isfinite(p.position)) and np.all(np.isfinite(p.previous_position))):
            return False
    return True
