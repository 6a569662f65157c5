# examples/pointer_sweep.py
import json
import math

from curtain_sim import Scene, SimConfig
from curtain_sim.input import PointerMoved, PointerReleased
from curtain_sim.io import frame_to_json
from curtain_sim.core import max_strain

scene = Scene(width=800, height=600, config=SimConfig(mouse_radius=80, mouse_strength=2.0))

for k in range(240):
    x = 400 + 300 * math.sin(k / 40)
    scene.post(PointerMoved(x, 300))
    scene.step()

scene.post(PointerReleased())
scene.step()

for panel in scene.panels:
    print(panel.side.value, "max strain:", round(max_strain(panel.particles, panel.constraints), 3))

with open("frame.json", "w", encoding="utf-8") as f:
    json.dump(frame_to_json(scene.frame()), f)
