# examples/hanging_rope.py
from rope_sim.rope import Rope
from rope_sim.core.invariants import max_constraint_error, chain_length

rope = Rope(origin=(250.0, 100.0), count=23, length=200.0)

t_end = 5.0
while rope.time < t_end:
    rope.update(1/60)

print("t:", rope.time, "frames:", rope.frame)
print("free end:", rope.positions()[-1])
print("max edge error:", max_constraint_error(rope.particles, rope.rest_distance))
print("chain length:", chain_length(rope.particles), "rest:", rope.rest_distance * (rope.count - 1))
