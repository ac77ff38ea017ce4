# examples/two_pins.py
from rope_sim.rope import Rope
from rope_sim.renderer import BufferedRenderer

rope = Rope(origin=(250.0, 100.0), count=23, length=200.0)
rope.pin(rope.count - 1, (350.0, 100.0))

renderer = BufferedRenderer()
for _ in range(600):
    rope.update(1/60)
    renderer.render_rope(rope)

mid = renderer.trajectory(rope.count // 2)
print("frames:", len(renderer.frames))
print("midpoint final:", mid[-1], "lowest:", mid[:, 1].max())
