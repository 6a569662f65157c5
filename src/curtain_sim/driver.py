# MIT License (see LICENSE)
"""
Frame drivers.

A driver decides *when* Scene.step() runs; the scene itself has no notion
of wall-clock time. Two implementations are provided:

- FixedStepDriver: steps as fast as possible with a fixed dt. Used in tests,
  benchmarks and offline rendering.
- RealtimeDriver: paces steps against time.perf_counter at a target frame
  rate, the way a display refresh would.

Both accept an optional per-frame callback (e.g. a renderer) that runs
after each step, and both can be stopped from that callback.
"""
from __future__ import annotations
import logging
import time
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from .scene import Scene

logger = logging.getLogger(__name__)

FrameCallback = Callable[["Scene"], None]


class FixedStepDriver:
    """
    Deterministic driver: n ticks with constant dt, no sleeping.

    Example:
        driver = FixedStepDriver(scene, dt=1/60)
        driver.run(120)
    """

    def __init__(self, scene: "Scene", dt: float = 1 / 60, on_frame: FrameCallback | None = None):
        self.scene = scene
        self.dt = dt
        self.on_frame = on_frame
        self._running = False

    def stop(self) -> None:
        """Stop after the current tick."""
        self._running = False

    def run(self, frames: int) -> int:
        """
        Run up to `frames` ticks.

        Returns:
            Number of ticks actually performed (fewer if stopped early).
        """
        logger.debug("FixedStepDriver: running %d frames at dt=%g", frames, self.dt)
        self._running = True
        done = 0
        while self._running and done < frames:
            self.scene.step(self.dt)
            done += 1
            if self.on_frame is not None:
                self.on_frame(self.scene)
        self._running = False
        return done


class RealtimeDriver:
    """
    Wall-clock driver targeting a fixed frame rate.

    Each tick is stepped with the measured frame duration as dt. When a
    frame overruns its budget the next one starts immediately; ticks are
    never skipped or doubled up.

    Args:
        scene: Scene to drive.
        fps: Target frames per second.
        on_frame: Optional callback after every tick.
        clock: Monotonic clock in seconds (injectable for testing).
        sleep: Sleep function (injectable for testing).
    """

    def __init__(
        self,
        scene: "Scene",
        fps: float = 60.0,
        on_frame: FrameCallback | None = None,
        clock: Callable[[], float] = time.perf_counter,
        sleep: Callable[[float], None] = time.sleep,
    ):
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.scene = scene
        self.frame_time = 1.0 / fps
        self.on_frame = on_frame
        self._clock = clock
        self._sleep = sleep
        self._running = False

    def stop(self) -> None:
        self._running = False

    def run(self, duration: float | None = None, max_frames: int | None = None) -> int:
        """
        Step until stopped, `duration` seconds elapse or `max_frames` ticks run.

        Returns:
            Number of ticks performed.
        """
        logger.debug("RealtimeDriver: starting at %.1f fps", 1.0 / self.frame_time)
        self._running = True
        start = last = self._clock()
        frames = 0
        while self._running:
            if max_frames is not None and frames >= max_frames:
                break
            now = self._clock()
            if duration is not None and now - start >= duration:
                break

            self.scene.step(max(now - last, 0.0) if frames else self.frame_time)
            last = now
            frames += 1
            if self.on_frame is not None:
                self.on_frame(self.scene)

            remaining = self.frame_time - (self._clock() - now)
            if remaining > 0:
                self._sleep(remaining)

        self._running = False
        logger.debug("RealtimeDriver: stopped after %d frames", frames)
        return frames
