import numpy as np
import pytest

from curtain_sim.config import SimConfig
from curtain_sim.panel import Panel, grid_shape
from curtain_sim.scene import Scene
from curtain_sim.types import Side


def test_reference_grid_indices():
    """
    spacing=15, half-viewport width 300, height 600:
      cols = ceil(300/15) + 1 = 21
      rows = ceil(600/15) + 2 = 42
    Grid point (5, 3) has index 3*21 + 5 = 68 and is joined to
    67 (left neighbour) and 47 (upper neighbour).
    """
    panel = Panel.for_viewport(Side.LEFT, 600, 600, SimConfig(spacing=15))

    assert panel.cols == 21
    assert panel.rows == 42
    assert panel.index(5, 3) == 68
    assert len(panel.particles) == 21 * 42

    horizontal = {(c.i, c.j) for c in panel.horizontal_constraints()}
    vertical = {(c.i, c.j) for c in panel.vertical_constraints()}
    assert (67, 68) in horizontal
    assert (47, 68) in vertical
    assert panel.has_constraint(68, 67)


@pytest.mark.parametrize("rows,cols", [(1, 1), (1, 6), (5, 1), (3, 7), (10, 10)])
def test_grid_counts(rows, cols):
    """Particle and constraint counts follow the grid dimensions."""
    panel = Panel(Side.LEFT, rows, cols, spacing=10.0)

    assert len(panel.particles) == rows * cols
    assert len(panel.horizontal_constraints()) == rows * (cols - 1)
    assert len(panel.vertical_constraints()) == (rows - 1) * cols
    assert len(panel.constraints) == rows * (cols - 1) + (rows - 1) * cols


@pytest.mark.parametrize("rows,cols", [(1, 4), (4, 4), (6, 3)])
def test_only_top_row_is_pinned(rows, cols):
    panel = Panel(Side.RIGHT, rows, cols, spacing=12.0)
    for y in range(rows):
        for x in range(cols):
            assert panel.particle(x, y).pinned == (y == 0)


def test_no_diagonal_constraints():
    """Every constraint joins horizontal or vertical grid neighbours."""
    panel = Panel(Side.LEFT, 6, 5, spacing=10.0)
    for c in panel.constraints:
        assert c.j - c.i in (1, panel.cols)
        if c.j - c.i == 1:
            assert c.i // panel.cols == c.j // panel.cols


def test_rest_lengths_match_spacing():
    panel = Panel.for_viewport(Side.RIGHT, 640, 480, SimConfig(spacing=20))
    for c in panel.constraints:
        assert c.rest_length == pytest.approx(20.0)


def test_panel_placement():
    """Left panel starts at x=0, right panel at half the viewport width."""
    cfg = SimConfig(spacing=15, top=-20)
    left = Panel.for_viewport(Side.LEFT, 800, 600, cfg)
    right = Panel.for_viewport(Side.RIGHT, 800, 600, cfg)

    assert tuple(left.particle(0, 0).position) == (0.0, -20.0)
    assert tuple(right.particle(0, 0).position) == (400.0, -20.0)
    assert tuple(right.particle(2, 3).position) == (430.0, 25.0)
    assert left.cols == right.cols
    assert left.rows == right.rows


def test_pinned_target_defaults_to_position():
    panel = Panel(Side.LEFT, 3, 4, spacing=10.0)
    for p in panel.particles:
        assert np.array_equal(p.target, p.position)
        assert p.target is not p.position


def test_new_particles_have_zero_velocity():
    panel = Panel.for_viewport(Side.LEFT, 300, 200)
    for p in panel.particles:
        assert np.array_equal(p.previous_position, p.position)


@pytest.mark.parametrize("width,height", [(0, 600), (800, 0), (-10, 600), (800, -5)])
def test_non_positive_viewport_gives_empty_grid(width, height):
    panel = Panel.for_viewport(Side.LEFT, width, height)
    assert panel.rows == 0 and panel.cols == 0
    assert panel.particles == []
    assert panel.constraints == []
    assert panel.positions().shape == (0, 2)


def test_non_positive_spacing_rejected():
    with pytest.raises(ValueError):
        grid_shape(800, 600, 0)
    with pytest.raises(ValueError):
        Panel(Side.LEFT, 3, 3, spacing=-1.0)


def test_index_out_of_range():
    panel = Panel(Side.LEFT, 3, 4, spacing=10.0)
    with pytest.raises(IndexError):
        panel.index(4, 0)
    with pytest.raises(IndexError):
        panel.index(0, 3)


def test_resize_rebuilds_with_zero_velocity():
    """After a viewport change every particle starts at rest."""
    scene = Scene(400, 300)
    scene.pointer.move(100, 100)
    for _ in range(20):
        scene.step()

    moving = [p for p in scene.panels[0].particles if not np.array_equal(p.position, p.previous_position)]
    assert moving, "cloth should be in motion before the resize"

    scene.resize(500, 350)
    rows, cols = grid_shape(500, 350, scene.config.spacing)
    for panel in scene.panels:
        assert (panel.rows, panel.cols) == (rows, cols)
        for p in panel.particles:
            assert np.array_equal(p.previous_position, p.position)
