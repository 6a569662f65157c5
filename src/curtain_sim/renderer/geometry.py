# MIT License (see LICENSE)
"""
Drawable geometry extracted from a panel's position grid.

Nothing here draws. These helpers turn the row-major (rows*cols, 2) position
array into the polylines a 2D canvas backend fills or strokes:

- fold_strips: one filled path per column gap, walking down the grid.
- fold_shade: alternating two-tone index per column (velvet folds).
- hem_line: the trim polyline along the second-to-last row.
"""
from __future__ import annotations
from typing import Iterator

import numpy as np


def fold_strip(rows: int, cols: int, positions: np.ndarray, x: int) -> np.ndarray:
    """
    Path of the strip between columns x and x+1.

    The path starts at the top-left point and, for every row y < rows-1,
    visits (x+1, y), (x+1, y+1), (x, y+1).

    Returns:
        Array of shape (1 + 3*(rows-1), 2).
    """
    if not (0 <= x < cols - 1):
        raise IndexError(f"Strip {x} outside 0..{cols - 2}")
    path = [positions[x]]
    for y in range(rows - 1):
        idx = y * cols + x
        path.append(positions[idx + 1])
        path.append(positions[idx + cols + 1])
        path.append(positions[idx + cols])
    return np.array(path, dtype=np.float64)


def fold_strips(rows: int, cols: int, positions: np.ndarray) -> Iterator[tuple[int, np.ndarray]]:
    """Yield (x, path) for every strip of the panel, left to right."""
    if rows < 2:
        return
    for x in range(cols - 1):
        yield x, fold_strip(rows, cols, positions, x)


def fold_shade(x: int) -> int:
    """Shade index (0 or 1) for strip x; neighbouring strips alternate."""
    return x % 2


def hem_line(rows: int, cols: int, positions: np.ndarray) -> np.ndarray:
    """
    Trim polyline along row rows-2.

    The last row hangs below the viewport, so the visible hem sits one row
    above it. Returns an empty (0, 2) array for grids with fewer than two
    rows.
    """
    if rows < 2 or cols == 0:
        return np.zeros((0, 2), dtype=np.float64)
    start = (rows - 2) * cols
    return np.array(positions[start:start + cols], dtype=np.float64)
