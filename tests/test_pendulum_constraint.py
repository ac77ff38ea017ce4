import numpy as np
from rope_sim.rope import Rope

def test_pendulum_small_angle_period():
    """
    Small-angle analytic pendulum:
      T = 2π sqrt(L / g)
    A two-particle rope (pin + bob) is a rigid pendulum under relaxation.
    Compare the period measured from successive zero crossings of x.
    """
    g = 20.0
    L = 10.0
    theta0 = 0.1  # small angle [rad]
    dt = 1/240

    rope = Rope(origin=(0.0, 0.0), count=2, length=2*L, gravity=g)
    assert rope.rest_distance == L
    bob = rope.particles[1]
    bob.move_to((L*np.sin(theta0), L*np.cos(theta0)), keep_velocity=False)

    xs = []
    for _ in range(int(12.0 / dt)):
        rope.update(dt)
        xs.append(bob.position.x)
    xs = np.array(xs)

    # Times of + -> - crossings (linear interpolation between frames)
    idx = np.where((xs[:-1] > 0) & (xs[1:] <= 0))[0]
    assert len(idx) >= 2
    t_cross = (idx + 1 + xs[idx] / (xs[idx] - xs[idx + 1])) * dt
    period_sim = float(np.mean(np.diff(t_cross)))

    period_exp = 2*np.pi*np.sqrt(L/g)
    err = abs(period_sim - period_exp) / period_exp
    print("period", period_sim, "exp", period_exp, "relerr", err)
    assert err <= 0.03

    # Rod length is held by the solver
    assert abs(np.hypot(bob.position.x, bob.position.y) - L) < 1e-9
