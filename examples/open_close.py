# examples/open_close.py
import logging

from curtain_sim import FixedStepDriver, Scene
from curtain_sim.logging_config import setup_logging
from curtain_sim.renderer import DebugRenderer

setup_logging(logging.INFO)

scene = Scene(width=1280, height=720)
renderer = DebugRenderer()

def on_frame(s):
    if s.tick % 30 == 0:
        renderer.render_scene(s)

driver = FixedStepDriver(scene, dt=1/60, on_frame=on_frame)

driver.run(60)     # let the closed curtain settle
scene.open()
driver.run(180)    # rod travels off-screen
scene.close()
driver.run(240)

print("finite:", scene.check_finite())
