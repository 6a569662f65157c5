# MIT License (see LICENSE)
"""
curtain_sim - A 2D position-based cloth simulation of a two-panel curtain.

This package simulates two curtain panels, each a grid of point masses held
together by distance constraints and hung from a pinned rod. Opening and
closing move the rod; the cloth follows through the constraints. A pointer
can push the fabric locally.

Main entry points:
    - Scene: Viewport, panels, input buffering and the per-frame step.
    - Panel: One curtain half (grid topology and open/close targets).
    - SimConfig: All tunable parameters.
    - FixedStepDriver, RealtimeDriver: Call Scene.step() per frame.

Submodules:
    - constraints: Index-based distance constraints and relaxation.
    - core: Particle integration, pointer repulsion, diagnostics.
    - io: JSON configuration and frame export.
    - renderer: Optional visualization adapters.

Example:
    from curtain_sim import Scene

    scene = Scene(width=1280, height=720)
    scene.open()
    for _ in range(120):
        scene.step()
    left, right = scene.frame().panels
"""
from .config import SimConfig
from .types import Particle, PointerState, Side, StepContext
from .panel import Panel
from .scene import Scene, Frame, PanelFrame
from .driver import FixedStepDriver, RealtimeDriver

__all__ = [
    # Core simulation
    "Scene",
    "Panel",
    "Particle",
    "Side",
    # Configuration and context
    "SimConfig",
    "PointerState",
    "StepContext",
    # Output
    "Frame",
    "PanelFrame",
    # Drivers
    "FixedStepDriver",
    "RealtimeDriver",
]
