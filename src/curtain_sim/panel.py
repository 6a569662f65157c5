# MIT License (see LICENSE)
"""
Curtain panels: grid topology, per-tick stepping and open/close targets.

A Panel is one half of the curtain. It owns a row-major grid of particles
(index = y * cols + x) and the structural constraints between grid
neighbours:
    - horizontal: (x-1, y) -> (x, y) for x > 0
    - vertical:   (x, y-1) -> (x, y) for y > 0
There is no diagonal bracing, so the cloth can shear and fold freely.

Row 0 is pinned to a curtain rod. Opening and closing only rewrite the
targets of the pinned row; the easing in core.integrators carries the rod
there over the following ticks and the rest of the cloth follows through
the constraints.
"""
from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field

import numpy as np

from .config import SimConfig
from .constraints.solver import Constraint, relax_constraints
from .core.integrators import integrate_particles
from .types import Particle, Side, StepContext
from .util import f64

logger = logging.getLogger(__name__)


def grid_shape(width: float, height: float, spacing: float) -> tuple[int, int]:
    """
    Grid (rows, cols) for one panel of a width x height viewport.

    Each panel covers half the viewport width:
        cols = ceil((width / 2) / spacing) + 1
        rows = ceil(height / spacing) + 2

    Non-positive viewport dimensions give an empty (0, 0) grid.

    Raises:
        ValueError: If spacing is not positive.
    """
    if spacing <= 0:
        raise ValueError(f"Grid spacing must be positive, got {spacing}")
    if width <= 0 or height <= 0:
        return 0, 0
    cols = math.ceil((width / 2) / spacing) + 1
    rows = math.ceil(height / spacing) + 2
    return rows, cols


@dataclass
class Panel:
    """
    One curtain half.

    Attributes:
        side: Which half of the viewport this panel covers.
        rows: Number of grid rows (row 0 is pinned).
        cols: Number of grid columns.
        spacing: Rest distance between neighbouring grid points.
        start_x: x coordinate of column 0.
        top: y coordinate of row 0.
        viewport_width: Full viewport width, used for open targets of the
                        right panel.
        particles: Row-major particle grid (built on init).
        constraints: Structural constraints in build order (built on init).
    """
    side: Side
    rows: int
    cols: int
    spacing: float = 15.0
    start_x: float = 0.0
    top: float = -20.0
    viewport_width: float = 0.0

    particles: list[Particle] = field(default_factory=list, init=False)
    constraints: list[Constraint] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        """Validate the grid description and build particles/constraints."""
        self.side = Side(self.side)
        if self.rows < 0 or self.cols < 0:
            raise ValueError(f"Grid dimensions must be non-negative, got {self.rows}x{self.cols}")
        if self.spacing <= 0:
            raise ValueError(f"Grid spacing must be positive, got {self.spacing}")
        if self.rows == 0 or self.cols == 0:
            self.rows = self.cols = 0
        self._build()

    @classmethod
    def for_viewport(cls, side: Side | str, width: float, height: float, config: SimConfig | None = None) -> "Panel":
        """
        Build the panel covering one half of a width x height viewport.

        The left panel starts at x = 0, the right one at x = width / 2.
        """
        config = config or SimConfig()
        side = Side(side)
        rows, cols = grid_shape(width, height, config.spacing)
        start_x = 0.0 if side is Side.LEFT else width / 2
        return cls(
            side=side,
            rows=rows,
            cols=cols,
            spacing=config.spacing,
            start_x=start_x,
            top=config.top,
            viewport_width=float(width),
        )

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def _build(self) -> None:
        """
        Create the particle grid and its constraints.

        Constraints are appended per particle in row-major order,
        horizontal before vertical. The Gauss-Seidel solver resolves them
        in this order.
        """
        particles: list[Particle] = []
        constraints: list[Constraint] = []
        cols = self.cols

        for y in range(self.rows):
            for x in range(cols):
                p = Particle(position=self.grid_point(x, y), pinned=(y == 0))
                particles.append(p)
                idx = len(particles) - 1

                if x > 0:
                    constraints.append(Constraint.between(particles, idx - 1, idx))
                if y > 0:
                    constraints.append(Constraint.between(particles, idx - cols, idx))

        self.particles = particles
        self.constraints = constraints
        logger.debug(
            "Built %s panel: %dx%d grid, %d particles, %d constraints",
            self.side.value, self.rows, self.cols, len(particles), len(constraints),
        )

    def grid_point(self, x: int, y: int) -> tuple[float, float]:
        """Rest coordinate of grid point (x, y)."""
        return (self.start_x + x * self.spacing, y * self.spacing + self.top)

    def index(self, x: int, y: int) -> int:
        """Row-major particle index of grid point (x, y)."""
        if not (0 <= x < self.cols and 0 <= y < self.rows):
            raise IndexError(f"Grid point ({x}, {y}) outside {self.cols}x{self.rows} grid")
        return y * self.cols + x

    def particle(self, x: int, y: int) -> Particle:
        return self.particles[self.index(x, y)]

    @property
    def pinned(self) -> list[Particle]:
        """The pinned row, in column order."""
        return self.particles[:self.cols]

    def horizontal_constraints(self) -> list[Constraint]:
        """Constraints joining two particles of the same row."""
        cols = self.cols
        return [c for c in self.constraints if c.i // cols == c.j // cols]

    def vertical_constraints(self) -> list[Constraint]:
        """Constraints joining two particles of adjacent rows."""
        cols = self.cols
        return [c for c in self.constraints if c.i // cols != c.j // cols]

    def has_constraint(self, i: int, j: int) -> bool:
        """True if a constraint joins particles i and j (in either order)."""
        pair = {i, j}
        return any({c.i, c.j} == pair for c in self.constraints)

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def positions(self) -> np.ndarray:
        """Row-major particle positions as a (rows*cols, 2) float64 array."""
        if not self.particles:
            return np.zeros((0, 2), dtype=np.float64)
        return np.array([p.position for p in self.particles], dtype=np.float64)

    # ------------------------------------------------------------------
    # Open / close
    # ------------------------------------------------------------------

    def open(self, config: SimConfig | None = None) -> None:
        """
        Send the pinned row off-screen, bunched toward the outer edge.

        Column x gets ratio = x/cols on the left panel and 1 - x/cols on
        the right. The target is a linear function of the ratio:
            left:  (-margin + ratio * bunch,          -lift - ratio * slope)
            right: (width + margin - ratio * bunch,   -lift - ratio * slope)

        Margin, bunch, lift and slope are read from `config` (defaults
        when omitted).
        """
        cfg = config or SimConfig()
        cols = self.cols
        for x, p in enumerate(self.pinned):
            if self.side is Side.LEFT:
                ratio = x / cols
                tx = -cfg.open_margin + ratio * cfg.open_bunch
            else:
                ratio = 1 - x / cols
                tx = self.viewport_width + cfg.open_margin - ratio * cfg.open_bunch
            ty = -cfg.open_lift - ratio * cfg.open_lift_slope
            p.target = f64((tx, ty))

    def close(self) -> None:
        """Reset every pinned target to the exact grid point it was built at."""
        for x, p in enumerate(self.pinned):
            p.target = f64(self.grid_point(x, 0))

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def step(self, ctx: StepContext) -> int:
        """
        Advance the panel by one tick.

        Relaxes constraints for `ctx.config.solver_iters` passes, then
        integrates every particle.

        Returns:
            Number of degenerate (zero-length) constraint evaluations skipped.
        """
        cfg = ctx.config
        skipped = relax_constraints(self.particles, self.constraints, cfg.stiffness, cfg.solver_iters)
        integrate_particles(self.particles, cfg, ctx.pointer)
        return skipped
