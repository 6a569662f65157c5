# MIT License (see LICENSE)
"""
Per-tick integration of curtain particles.

The curtain is advanced one tick at a time with no explicit timestep:
every tick is one frame. Two update rules are used:

- Pinned particles ease toward their target (first-order exponential
  approach). After n ticks with a fixed target the remaining distance is
      |target - x_n| = |target - x_0| * (1 - k)^n
  so the target is approached asymptotically and never reached exactly.

- Free particles use position Verlet with friction:
      v      = (x - x_prev) * friction
      x_prev = x
      x      = x + v
      x.y    = x.y + g
  Gravity is a positional offset, not an acceleration integrated into v.

Reference:
    https://en.wikipedia.org/wiki/Verlet_integration
"""
from __future__ import annotations

from ..config import SimConfig
from ..types import Particle, PointerState
from .forces import apply_gravity, apply_pointer_repulsion


def ease_pinned(p: Particle, speed: float) -> None:
    """Move a pinned particle a fraction `speed` of the way to its target."""
    p.position += (p.target - p.position) * speed


def verlet_step(p: Particle, friction: float) -> None:
    """
    Advance a free particle by its damped implied velocity.

    Args:
        p: Particle to integrate (modified in-place).
        friction: Damping factor applied to the implied velocity.
    """
    v = (p.position - p.previous_position) * friction
    p.previous_position[:] = p.position
    p.position += v


def integrate_particle(p: Particle, config: SimConfig, pointer: PointerState) -> None:
    """
    Apply one tick of motion to a single particle.

    Order for free particles: pointer repulsion, Verlet step, gravity.
    Pinned particles only ease toward their target.
    """
    if p.pinned:
        ease_pinned(p, config.opening_speed)
        return

    apply_pointer_repulsion(p, pointer, config.mouse_radius, config.mouse_strength)
    verlet_step(p, config.friction)
    apply_gravity(p, config.gravity)


def integrate_particles(
    particles: list[Particle],
    config: SimConfig,
    pointer: PointerState,
) -> None:
    """Integrate every particle of a panel for one tick."""
    for p in particles:
        integrate_particle(p, config, pointer)
