"""
Microbenchmark: time per update vs number of particles.
Run:
  python benchmarks/bench_steps.py
"""
import time
from rope_sim.rope import Rope
from rope_sim.profiler import Profiler
from rope_sim.core.invariants import max_constraint_error

def run(n: int, steps: int = 300):
    prof = Profiler()
    rope = Rope(origin=(0.0, 0.0), count=n, length=10.0 * n, profiler=prof)

    # warmup
    for _ in range(30):
        rope.update(1/60)

    t0 = time.perf_counter()
    for _ in range(steps):
        rope.update(1/60)
    t1 = time.perf_counter()

    total = t1 - t0
    per_step = total / steps
    return per_step, prof.stats.summary(), max_constraint_error(rope.particles, rope.rest_distance)

if __name__ == "__main__":
    for n in [10, 25, 50, 100, 250]:
        per_step, summary, err = run(n)
        print(f"N={n:4d}  update={1e3*per_step:8.3f} ms  updates/s={1/per_step:8.1f}  max_err={err:.4f}")
        for k in ["forces", "integrate", "relax"]:
            if k in summary:
                print(" ", k, summary[k])
        print()
