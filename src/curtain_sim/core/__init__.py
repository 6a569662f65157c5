# MIT License (see LICENSE)
"""
Core particle dynamics.

This subpackage provides:
    - Positional effects: pointer repulsion, gravity offset.
    - Integrators: pinned easing, friction-damped position Verlet.
    - Diagnostics: implied kinetic energy, constraint strain, finiteness.

Typical usage:
    from curtain_sim.core import integrate_particles

    integrate_particles(panel.particles, config, pointer)
"""
from .forces import apply_gravity, apply_pointer_repulsion, repulsion_offset
from .integrators import ease_pinned, verlet_step, integrate_particle, integrate_particles
from .invariants import implied_kinetic_energy, max_strain, all_finite

__all__ = [
    # Forces
    "apply_gravity",
    "apply_pointer_repulsion",
    "repulsion_offset",
    # Integrators
    "ease_pinned",
    "verlet_step",
    "integrate_particle",
    "integrate_particles",
    # Diagnostics
    "implied_kinetic_energy",
    "max_strain",
    "all_finite",
]
