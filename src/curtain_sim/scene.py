# MIT License (see LICENSE)
"""
The curtain scene and its per-frame step.

The Scene acts as the world container and simulation controller.
It manages:
- The viewport size and the two panels built for it.
- The buffered input (pointer cell and event queue).
- The main tick (step), which:
    1. Drains queued events (pointer updates, open/close, resize).
    2. Takes one pointer snapshot for the whole tick.
    3. For each panel: relaxes constraints, then integrates particles.

Structure:
    - Host creates a Scene for the current viewport.
    - Host posts events (or calls open()/close()/resize() between ticks).
    - A driver calls scene.step() once per frame.
    - A renderer reads scene.frame() or the panels directly.
"""
from __future__ import annotations
import logging
from contextlib import nullcontext
from dataclasses import dataclass, field

import numpy as np

from .config import SimConfig
from .core.invariants import all_finite
from .input import (
    EventQueue,
    Event,
    PointerInput,
    PointerMoved,
    PointerPressed,
    PointerReleased,
    OpenCommand,
    CloseCommand,
    ViewportResized,
)
from .panel import Panel
from .profiler import Profiler
from .types import Side, StepContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PanelFrame:
    """Per-panel output of one tick: the side and a row-major position grid."""
    side: Side
    rows: int
    cols: int
    positions: np.ndarray


@dataclass(frozen=True)
class Frame:
    """Snapshot of every panel after a tick."""
    tick: int
    time: float
    panels: tuple[PanelFrame, ...]


@dataclass
class Scene:
    """
    Two-panel curtain simulation.

    Attributes:
        width: Viewport width in pixels.
        height: Viewport height in pixels.
        config: Simulation parameters, passed to every tick and to open().
                May be reassigned between ticks; spacing and top only take
                effect on the next rebuild.
        dt: Nominal frame duration in seconds. Only advances `time`; the
            physics itself is per-tick.
        profiler: Optional Profiler instance for timing statistics.
    """
    width: float = 0.0
    height: float = 0.0
    config: SimConfig = field(default_factory=SimConfig)
    dt: float = 1 / 60
    profiler: Profiler | None = None

    # Internal state
    panels: list[Panel] = field(default_factory=list)
    pointer: PointerInput = field(default_factory=PointerInput)
    events: EventQueue = field(default_factory=EventQueue)
    time: float = 0.0
    tick: int = 0
    skipped_constraints: int = 0

    def __post_init__(self) -> None:
        self.rebuild()

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def rebuild(self) -> None:
        """Discard all panels and build fresh ones for the current viewport."""
        self.panels = [
            Panel.for_viewport(side, self.width, self.height, self.config)
            for side in (Side.LEFT, Side.RIGHT)
        ]
        logger.info(
            "Built curtain for %gx%g viewport (%d particles per panel)",
            self.width, self.height, len(self.panels[0].particles),
        )

    def resize(self, width: float, height: float) -> None:
        """Change the viewport size. All particle state is discarded."""
        self.width = float(width)
        self.height = float(height)
        self.rebuild()

    def panel(self, side: Side | str) -> Panel:
        side = Side(side)
        for p in self.panels:
            if p.side is side:
                return p
        raise KeyError(side)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def open(self) -> None:
        """Set every panel's rod targets to the open pose."""
        logger.info("Opening curtain")
        for p in self.panels:
            p.open(self.config)

    def close(self) -> None:
        """Set every panel's rod targets back to the closed pose."""
        logger.info("Closing curtain")
        for p in self.panels:
            p.close()

    def post(self, event: Event) -> None:
        """Queue an input event for the next tick."""
        self.events.post(event)

    def _apply_events(self) -> None:
        """Apply queued events in arrival order."""
        for event in self.events.drain():
            if isinstance(event, PointerMoved):
                self.pointer.move(event.x, event.y)
            elif isinstance(event, PointerPressed):
                self.pointer.press()
            elif isinstance(event, PointerReleased):
                self.pointer.release()
            elif isinstance(event, OpenCommand):
                self.open()
            elif isinstance(event, CloseCommand):
                self.close()
            elif isinstance(event, ViewportResized):
                self.resize(event.width, event.height)

    # ------------------------------------------------------------------
    # Simulation
    # ------------------------------------------------------------------

    def _section(self, name: str):
        if self.profiler is None:
            return nullcontext()
        return self.profiler.section(name)

    def context(self) -> StepContext:
        """Context for the next tick: current config and a pointer snapshot."""
        return StepContext(config=self.config, pointer=self.pointer.snapshot())

    def step(self, dt: float | None = None) -> None:
        """
        Advance the simulation by one frame.

        Args:
            dt: Frame duration added to `time`. Defaults to `self.dt`.
        """
        dt = float(self.dt if dt is None else dt)

        with self._section("events"):
            self._apply_events()

        ctx = self.context()
        skipped = 0
        for panel in self.panels:
            with self._section(f"step_{panel.side.value}"):
                skipped += panel.step(ctx)

        if skipped:
            logger.debug("Tick %d: skipped %d zero-length constraint evaluations", self.tick, skipped)
        self.skipped_constraints += skipped
        self.tick += 1
        self.time += dt

    def frame(self) -> Frame:
        """Copy of the current panel positions for a renderer."""
        return Frame(
            tick=self.tick,
            time=self.time,
            panels=tuple(
                PanelFrame(side=p.side, rows=p.rows, cols=p.cols, positions=p.positions())
                for p in self.panels
            ),
        )

    def check_finite(self) -> bool:
        """True if every particle of every panel has finite coordinates."""
        return all(all_finite(p.particles) for p in self.panels)
