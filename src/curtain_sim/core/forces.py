# MIT License (see LICENSE)
"""
Positional "force" generators for curtain particles.

The curtain is integrated with position-based dynamics, so both effects
here move a particle's position directly instead of accumulating a force:

1. Pointer repulsion: pushes free particles away from an active pointer.
   Displacement = dir(p - m) * s * (1 - d/R) for d < R, where d = |p - m|.
   It is strongest at the pointer, falls off linearly and vanishes at R.

2. Gravity: a constant offset added to y after the Verlet step.
   y += g
"""
from __future__ import annotations

import numpy as np

from ..types import Particle, PointerState

# Push direction for a particle sitting exactly under the pointer
_COINCIDENT_DIRECTION = np.array([0.0, 1.0], dtype=np.float64)


def repulsion_offset(
    position: np.ndarray,
    pointer: PointerState,
    radius: float,
    strength: float,
) -> np.ndarray | None:
    """
    Displacement the pointer applies to a point, or None if out of reach.

    Args:
        position: Particle position [x, y].
        pointer: Pointer snapshot for this tick.
        radius: Repulsion radius R.
        strength: Peak displacement s at the pointer centre.

    Returns:
        Offset vector of length s * (1 - d/R) pointing away from the
        pointer, or None when the pointer is inactive or d >= R.
    """
    if not pointer.active:
        return None

    dx = position[0] - pointer.x
    dy = position[1] - pointer.y
    dist = float(np.hypot(dx, dy))
    if dist >= radius:
        return None

    falloff = strength * (1.0 - dist / radius)
    if dist == 0.0:
        return _COINCIDENT_DIRECTION * falloff
    return np.array([dx / dist, dy / dist], dtype=np.float64) * falloff


def apply_pointer_repulsion(
    p: Particle,
    pointer: PointerState,
    radius: float,
    strength: float,
) -> bool:
    """
    Push a free particle away from the pointer.

    Modifies position only; the displacement therefore also shows up as
    implied velocity on the following Verlet step.

    Returns:
        True if the particle was displaced.
    """
    if p.pinned:
        return False
    offset = repulsion_offset(p.position, pointer, radius, strength)
    if offset is None:
        return False
    p.position += offset
    return True


def apply_gravity(p: Particle, g: float) -> None:
    """Offset the particle's y coordinate by g (screen y points down)."""
    if not p.pinned:
        p.position[1] += g
