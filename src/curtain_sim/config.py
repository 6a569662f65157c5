# MIT License (see LICENSE)
"""
Simulation configuration.

All tunables of the curtain are gathered in one immutable value that is
passed explicitly into each tick (see types.StepContext). No bounds are
enforced: callers are expected to clamp to sane ranges themselves.
"""
from __future__ import annotations
from dataclasses import dataclass, fields


@dataclass(frozen=True)
class SimConfig:
    """
    Tunable parameters of the curtain simulation.

    Attributes:
        gravity: Downward positional offset added to every free particle
                 per tick (pixels/tick). Not integrated into velocity.
        friction: Damping factor applied to the implied velocity [0, 1].
        spacing: Rest distance between neighbouring grid points in pixels.
        stiffness: Fraction of the constraint error corrected per pass.
        opening_speed: Fraction of the remaining distance a pinned particle
                       travels toward its target each tick.
        mouse_radius: Radius of pointer repulsion in pixels.
        mouse_strength: Peak push in pixels per tick, applied at the pointer
                        centre and falling linearly to zero at mouse_radius.
                        The push direction is normalised, so the
                        default 0.5 is a gentle nudge.
        solver_iters: Constraint relaxation passes per tick.
        top: y coordinate of the pinned row when closed (slightly off-screen).
        folds: Number of visual folds a renderer may use for shading.
        open_margin: How far past the viewport edge the outermost pinned
                     point travels when opened.
        open_bunch: Horizontal span the pinned row is compressed into.
        open_lift: Upward lift of the pinned row when opened.
        open_lift_slope: Extra lift toward the inner edge of the panel.
    """
    gravity: float = 0.15
    friction: float = 0.98
    spacing: float = 15.0
    stiffness: float = 0.8
    opening_speed: float = 0.05
    mouse_radius: float = 50.0
    mouse_strength: float = 0.5
    solver_iters: int = 5
    top: float = -20.0
    folds: int = 8
    open_margin: float = 100.0
    open_bunch: float = 50.0
    open_lift: float = 50.0
    open_lift_slope: float = 20.0

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

