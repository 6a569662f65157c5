import dataclasses

import numpy as np
import pytest

from curtain_sim.config import SimConfig
from curtain_sim.core.forces import apply_pointer_repulsion, repulsion_offset
from curtain_sim.core.integrators import integrate_particle
from curtain_sim.input import (
    CloseCommand,
    EventQueue,
    OpenCommand,
    PointerInput,
    PointerMoved,
    PointerReleased,
)
from curtain_sim.scene import Scene
from curtain_sim.types import Particle, PointerState

RADIUS = 50.0
STRENGTH = 0.5


def _magnitude(d: float) -> float:
    pointer = PointerState(100.0, 100.0, active=True)
    offset = repulsion_offset(np.array([100.0 + d, 100.0]), pointer, RADIUS, STRENGTH)
    return 0.0 if offset is None else float(np.linalg.norm(offset))


def test_falloff_strictly_decreasing_inside_radius():
    mags = [_magnitude(d) for d in np.linspace(0.0, RADIUS, 26, endpoint=False)]
    assert mags[0] == pytest.approx(STRENGTH)
    assert all(a > b for a, b in zip(mags, mags[1:]))
    assert all(m > 0 for m in mags)


def test_default_peak_push_is_mouse_strength_pixels():
    """With the default config a particle under the pointer moves 0.5 px."""
    cfg = SimConfig()
    pointer = PointerState(100.0, 100.0, active=True)
    offset = repulsion_offset(np.array([100.0, 100.0]), pointer, cfg.mouse_radius, cfg.mouse_strength)
    assert np.allclose(offset, (0.0, cfg.mouse_strength))
    assert cfg.mouse_strength == 0.5


@pytest.mark.parametrize("d", [RADIUS, RADIUS + 0.001, 80.0, 1e6])
def test_no_displacement_at_or_beyond_radius(d):
    assert _magnitude(d) == 0.0


def test_falloff_is_linear():
    assert _magnitude(10.0) == pytest.approx(STRENGTH * (1 - 10.0 / RADIUS))
    assert _magnitude(25.0) == pytest.approx(STRENGTH * 0.5)


def test_offset_points_away_from_pointer():
    pointer = PointerState(0.0, 0.0, active=True)
    offset = repulsion_offset(np.array([-3.0, 4.0]), pointer, RADIUS, STRENGTH)
    assert offset is not None
    assert np.allclose(offset / np.linalg.norm(offset), (-0.6, 0.8))


def test_inactive_pointer_has_no_effect():
    pointer = PointerState(0.0, 0.0, active=False)
    assert repulsion_offset(np.array([1.0, 1.0]), pointer, RADIUS, STRENGTH) is None


def test_pinned_particle_not_repelled():
    p = Particle((1.0, 1.0), pinned=True)
    assert not apply_pointer_repulsion(p, PointerState(0.0, 0.0, True), RADIUS, STRENGTH)
    assert np.array_equal(p.position, (1.0, 1.0))


def test_repulsion_moves_position_which_becomes_velocity():
    """The push is positional, so Verlet picks it up as implied velocity."""
    cfg = SimConfig(gravity=0.0, friction=0.98, mouse_radius=RADIUS, mouse_strength=STRENGTH)
    p = Particle((10.0, 0.0))

    integrate_particle(p, cfg, PointerState(0.0, 0.0, active=True))

    push = STRENGTH * (1 - 10.0 / RADIUS)
    assert np.allclose(p.previous_position, (10.0 + push, 0.0))
    assert np.allclose(p.position, (10.0 + push + push * 0.98, 0.0))


# =============================================================================
# Input buffering
# =============================================================================

def test_pointer_input_state_machine():
    pointer = PointerInput()
    assert not pointer.snapshot().active

    pointer.move(10, 20)
    assert pointer.snapshot() == PointerState(10.0, 20.0, True)

    pointer.release()
    assert pointer.snapshot() == PointerState(10.0, 20.0, False)

    pointer.press()
    assert pointer.snapshot().active


def test_snapshot_is_immutable_and_detached():
    pointer = PointerInput()
    pointer.move(1, 2)
    snap = pointer.snapshot()
    pointer.move(3, 4)

    assert (snap.x, snap.y) == (1.0, 2.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        snap.x = 5.0


def test_event_queue_preserves_order():
    queue = EventQueue()
    events = [PointerMoved(1, 1), OpenCommand(), PointerReleased(), CloseCommand()]
    for e in events:
        queue.post(e)
    assert len(queue) == 4
    assert list(queue.drain()) == events
    assert len(queue) == 0


def test_event_queue_rejects_unknown_events():
    with pytest.raises(TypeError):
        EventQueue().post("open")


def test_scene_uses_last_pointer_position_per_tick():
    scene = Scene(400, 300)
    for x in range(10):
        scene.post(PointerMoved(float(x), 50.0))

    assert not scene.pointer.snapshot().active
    scene.step()
    assert scene.context().pointer == PointerState(9.0, 50.0, True)


def test_pointer_pushes_cloth_in_scene():
    """An active pointer inside the cloth moves nearby particles apart."""
    cfg = SimConfig(gravity=0.0)
    quiet = Scene(400, 300, config=cfg)
    pushed = Scene(400, 300, config=cfg)
    pushed.pointer.move(100.0, 100.0)

    for _ in range(3):
        quiet.step()
        pushed.step()

    target = quiet.panels[0].index(6, 8)
    assert not np.allclose(quiet.panels[0].particles[target].position,
                           pushed.panels[0].particles[target].position)
    # Far away panel is untouched by the pointer
    assert np.allclose(quiet.panels[1].positions(), pushed.panels[1].positions())
