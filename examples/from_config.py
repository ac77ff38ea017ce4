# examples/from_config.py
import os

from rope_sim.clock import FrameClock
from rope_sim.io import load_rope_config
from rope_sim.renderer import NullRenderer

rope = load_rope_config(os.path.join(os.path.dirname(__file__), "rope.json"))
clock = FrameClock(max_dt=1/20)
renderer = NullRenderer()

# Simulated 60 Hz host timestamps with one long stall, which max_dt absorbs
now = 0.0
clock.tick(now)
while rope.time < 2.0:
    now += 1.0 if rope.frame == 30 else 1/60
    rope.update(clock.tick(now))
    renderer.render_rope(rope)

print("frames:", rope.frame, "midpoint:", rope.positions()[rope.count // 2])
