# MIT License (see LICENSE)
"""
Renderer adapters for curtain visualization.

This module provides an abstract base class for rendering and simple
concrete implementations. The simulation has no rendering dependency;
these adapters are the boundary a real canvas backend plugs into.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO
import sys

import numpy as np

from ..types import Side
from .geometry import hem_line

if TYPE_CHECKING:
    from ..scene import Scene


class RendererAdapter(ABC):
    """
    Abstract base class for renderer implementations.

    Subclasses implement the drawing methods for a concrete backend
    (matplotlib, pygame, a web canvas, ...).

    Usage:
        renderer = MyRenderer()
        renderer.begin_frame(scene.tick, scene.time)
        for panel in scene.panels:
            renderer.draw_panel(panel.side, panel.rows, panel.cols, panel.positions())
        renderer.end_frame()

    Or use the convenience method:
        renderer.render_scene(scene)
    """

    @abstractmethod
    def begin_frame(self, tick: int, time: float) -> None:
        """
        Begin a new frame.

        Args:
            tick: Number of ticks simulated so far.
            time: Simulation time in seconds.
        """
        ...

    @abstractmethod
    def draw_panel(self, side: Side, rows: int, cols: int, positions: np.ndarray) -> None:
        """
        Draw one curtain panel.

        Args:
            side: Which half the panel covers.
            rows, cols: Grid dimensions.
            positions: Row-major (rows*cols, 2) position array.
        """
        ...

    @abstractmethod
    def end_frame(self) -> None:
        """Finalize the current frame."""
        ...

    def render_scene(self, scene: "Scene") -> None:
        """Render every panel of a scene as one frame."""
        frame = scene.frame()
        self.begin_frame(frame.tick, frame.time)
        for pf in frame.panels:
            self.draw_panel(pf.side, pf.rows, pf.cols, pf.positions)
        self.end_frame()


class DebugRenderer(RendererAdapter):
    """
    Console/text renderer for development and testing.

    Output:
        === Frame 120 t=2.0000 ===
        [left] 42x21 x=[-3.1, 301.7] y=[-20.0, 633.4] hem_y=614.2
        [right] 42x21 x=[298.3, 603.1] y=[-20.0, 633.4] hem_y=614.2
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output or sys.stdout

    def begin_frame(self, tick: int, time: float) -> None:
        self.output.write(f"=== Frame {tick} t={time:.4f} ===\n")

    def draw_panel(self, side: Side, rows: int, cols: int, positions: np.ndarray) -> None:
        if len(positions) == 0:
            self.output.write(f"[{side.value}] empty\n")
            return
        lo = positions.min(axis=0)
        hi = positions.max(axis=0)
        line = (
            f"[{side.value}] {rows}x{cols} "
            f"x=[{lo[0]:.1f}, {hi[0]:.1f}] y=[{lo[1]:.1f}, {hi[1]:.1f}]"
        )
        hem = hem_line(rows, cols, positions)
        if len(hem):
            line += f" hem_y={hem[:, 1].mean():.1f}"
        self.output.write(line + "\n")

    def end_frame(self) -> None:
        self.output.write("\n")
        self.output.flush()


class NullRenderer(RendererAdapter):
    """No-op renderer, for benchmarking without drawing overhead."""

    def begin_frame(self, tick: int, time: float) -> None:
        pass

    def draw_panel(self, side: Side, rows: int, cols: int, positions: np.ndarray) -> None:
        pass

    def end_frame(self) -> None:
        pass


class BufferedRenderer(RendererAdapter):
    """
    Renderer that records frames for later playback or export.

    Example:
        renderer = BufferedRenderer()
        for _ in range(100):
            scene.step()
            renderer.render_scene(scene)

        for frame in renderer.frames:
            print(frame["tick"], [p["side"] for p in frame["panels"]])
    """

    def __init__(self):
        self.frames: list[dict] = []
        self._current_frame: dict | None = None

    def begin_frame(self, tick: int, time: float) -> None:
        self._current_frame = {"tick": tick, "time": time, "panels": []}

    def draw_panel(self, side: Side, rows: int, cols: int, positions: np.ndarray) -> None:
        if self._current_frame is None:
            return
        self._current_frame["panels"].append({
            "side": side.value,
            "rows": rows,
            "cols": cols,
            "positions": np.array(positions, dtype=np.float64),
        })

    def end_frame(self) -> None:
        if self._current_frame is not None:
            self.frames.append(self._current_frame)
            self._current_frame = None

    def clear(self) -> None:
        self.frames.clear()
