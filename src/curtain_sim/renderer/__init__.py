# MIT License (see LICENSE)
"""
Rendering adapters for visualization.

This subpackage provides abstract and concrete renderer implementations:
    - RendererAdapter: Abstract base class defining the rendering interface.
    - DebugRenderer: Text/console output for debugging.
    - NullRenderer: No-op renderer for performance testing.
    - BufferedRenderer: Records frames for playback or export.
    - fold_strips, fold_shade, hem_line: Geometry for canvas backends.

The simulation has no rendering dependency; these adapters are optional.

Typical usage:
    from curtain_sim.renderer import DebugRenderer

    renderer = DebugRenderer()
    renderer.render_scene(scene)
"""
from .adapter import (
    RendererAdapter,
    DebugRenderer,
    NullRenderer,
    BufferedRenderer,
)
from .geometry import fold_strip, fold_strips, fold_shade, hem_line

__all__ = [
    "RendererAdapter",
    "DebugRenderer",
    "NullRenderer",
    "BufferedRenderer",
    "fold_strip",
    "fold_strips",
    "fold_shade",
    "hem_line",
]
