# MIT License (see LICENSE)
"""
Core type definitions for the curtain simulation.

Defines the fundamental data structures:
- Side: which half of the viewport a panel covers.
- Particle: a point mass integrated with position-based (Verlet) dynamics.
- PointerState: an immutable snapshot of the pointer, read once per tick.
- StepContext: configuration plus pointer snapshot handed to each tick.

Particles carry no explicit velocity. The implied velocity is the
difference between the current and previous position:
  v = (x - x_prev) * friction
"""
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from .config import SimConfig
from .util import f64


class Side(str, Enum):
    """Curtain half. The value doubles as the serialized name."""
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Particle:
    """
    A single point mass of the curtain grid.

    Attributes:
        position: Current position [x, y] in pixels (y grows downwards).
        previous_position: Position at the previous tick. Defaults to
            `position`, giving zero implied velocity.
        pinned: Pinned particles skip physics and ease toward `target`.
        target: Easing goal for pinned particles. Defaults to `position`.

    Note:
        Position arrays are converted to float64 on init and then mutated
        in-place by the solver, so a particle's arrays are never shared
        with another particle.
    """
    position: np.ndarray | tuple[float, float]
    previous_position: np.ndarray | tuple[float, float] | None = None
    pinned: bool = False
    target: np.ndarray | tuple[float, float] | None = None

    def __post_init__(self) -> None:
        """Convert coordinates to independent float64 arrays."""
        self.position = f64(self.position)
        self.previous_position = f64(
            self.position if self.previous_position is None else self.previous_position
        )
        self.target = f64(self.position if self.target is None else self.target)

    @property
    def velocity(self) -> np.ndarray:
        """Undamped implied velocity (position - previous_position)."""
        return self.position - self.previous_position


@dataclass(frozen=True)
class PointerState:
    """
    Immutable pointer snapshot.

    Attributes:
        x, y: Pointer position in viewport pixels.
        active: Whether the pointer currently repels the cloth.
    """
    x: float = 0.0
    y: float = 0.0
    active: bool = False


# Shared default snapshot for "no pointer"
INACTIVE_POINTER = PointerState()


@dataclass(frozen=True)
class StepContext:
    """
    Everything a tick reads besides the panel state itself.

    A tick is a function of (panel state, context) only, so the same
    context applied to the same state always produces the same result.
    """
    config: SimConfig = field(default_factory=SimConfig)
    pointer: PointerState = INACTIVE_POINTER
