"""
Microbenchmark: time per step vs viewport size.
Run:
  python benchmarks/bench_steps.py
"""
import time
from curtain_sim import Scene, SimConfig
from curtain_sim.profiler import Profiler

def run(width: int, height: int, steps: int = 120):
    prof = Profiler()
    scene = Scene(width, height, config=SimConfig(), profiler=prof)
    scene.pointer.move(width / 2, height / 2)

    # warmup
    for _ in range(10):
        scene.step()
    prof.stats.reset()

    scene.open()
    t0 = time.perf_counter()
    for _ in range(steps):
        scene.step()
    t1 = time.perf_counter()

    per_step = (t1 - t0) / steps
    n = sum(len(p.particles) for p in scene.panels)
    return n, per_step, prof.stats.summary()

if __name__ == "__main__":
    for w, h in [(320, 240), (640, 480), (1280, 720), (1920, 1080)]:
        n, per_step, summary = run(w, h)
        print(f"{w}x{h}  particles={n:5d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}")
        for k in ["events", "step_left", "step_right"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
