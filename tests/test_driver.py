import pytest

from curtain_sim.driver import FixedStepDriver, RealtimeDriver
from curtain_sim.scene import Scene


class FakeClock:
    """Manual clock: time only advances when the driver sleeps."""

    def __init__(self):
        self.t = 0.0
        self.sleeps = []

    def __call__(self) -> float:
        return self.t

    def sleep(self, s: float) -> None:
        self.sleeps.append(s)
        self.t += s


def test_fixed_step_driver_runs_n_frames():
    scene = Scene(200, 100)
    seen = []
    driver = FixedStepDriver(scene, dt=1 / 30, on_frame=lambda s: seen.append(s.tick))

    assert driver.run(10) == 10
    assert scene.tick == 10
    assert scene.time == pytest.approx(10 / 30)
    assert seen == list(range(1, 11))


def test_fixed_step_driver_can_be_stopped():
    scene = Scene(200, 100)

    def on_frame(s):
        if s.tick == 3:
            driver.stop()

    driver = FixedStepDriver(scene, on_frame=on_frame)
    assert driver.run(100) == 3
    assert scene.tick == 3


def test_fixed_step_is_deterministic():
    a, b = Scene(300, 200), Scene(300, 200)
    for s in (a, b):
        s.open()
        s.pointer.move(80, 60)
        FixedStepDriver(s).run(40)
    for pa, pb in zip(a.panels, b.panels):
        assert (pa.positions() == pb.positions()).all()


def test_realtime_driver_paces_frames():
    clock = FakeClock()
    scene = Scene(200, 100)
    driver = RealtimeDriver(scene, fps=50, clock=clock, sleep=clock.sleep)

    assert driver.run(max_frames=5) == 5
    assert scene.tick == 5
    assert scene.time == pytest.approx(5 / 50)
    assert clock.sleeps == pytest.approx([1 / 50] * 5)


def test_realtime_driver_duration():
    clock = FakeClock()
    scene = Scene(200, 100)
    driver = RealtimeDriver(scene, fps=60, clock=clock, sleep=clock.sleep)

    frames = driver.run(duration=0.1)
    assert 6 <= frames <= 7


def test_realtime_driver_stop_from_callback():
    clock = FakeClock()
    scene = Scene(200, 100)

    def on_frame(s):
        if s.tick == 2:
            driver.stop()

    driver = RealtimeDriver(scene, on_frame=on_frame, clock=clock, sleep=clock.sleep)
    assert driver.run() == 2


def test_realtime_driver_rejects_bad_fps():
    with pytest.raises(ValueError):
        RealtimeDriver(Scene(), fps=0)
