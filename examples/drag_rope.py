# examples/drag_rope.py
import logging

import numpy as np
from rope_sim.rope import Rope
from rope_sim.interaction import PointerController
from rope_sim.renderer import DebugRenderer
from rope_sim.logging_config import setup_logging

setup_logging(level=logging.DEBUG)

rope = Rope(origin=(250.0, 100.0), count=23, length=200.0)
pointer = PointerController(rope)

# Let the rope settle
for _ in range(300):
    rope.update(1/60)

# Grab the free end and sweep it along a circle around the pin
pointer.on_pointer_down(tuple(rope.positions()[-1]))
for k in range(120):
    a = np.pi * k / 120
    pointer.on_pointer_move((250.0 + 150.0 * np.sin(a), 100.0 + 150.0 * np.cos(a)))
    rope.update(1/60)
pointer.on_pointer_up()

# Let it swing freely after release
for _ in range(60):
    rope.update(1/60)

DebugRenderer().render_rope(rope)
