import pytest
from rope_sim.types import Particle
from rope_sim.util import Vec2
from rope_sim.core.forces import apply_gravity
from rope_sim.core.integrators import verlet_step


def test_particle_starts_at_rest():
    p = Particle(position=(3, 4))
    assert p.position == Vec2(3.0, 4.0)
    assert p.previous_position == p.position
    assert p.acceleration == Vec2(0.0, 0.0)
    assert p.velocity == Vec2(0.0, 0.0)
    assert not p.anchored


def test_verlet_formula():
    """x' = x + (x - x_prev) + a dt²"""
    p = Particle(position=Vec2(1.0, 1.0), previous_position=Vec2(0.5, 1.0), acceleration=Vec2(0.0, 20.0))
    verlet_step(p, 0.1)

    assert p.previous_position == Vec2(1.0, 1.0)
    assert p.position.x == pytest.approx(1.5)
    assert p.position.y == pytest.approx(1.0 + 20.0 * 0.01)


def test_free_fall_from_rest():
    """Two steps from rest: displacement a dt² then 3 a dt²."""
    dt = 0.05
    g = 20.0
    p = Particle(position=(0.0, 0.0))
    for _ in range(2):
        apply_gravity(p, g)
        verlet_step(p, dt)
    assert p.position.y == pytest.approx(3 * g * dt * dt)
    assert p.position.x == 0.0


def test_anchored_particle_is_not_integrated():
    p = Particle(position=Vec2(2.0, 2.0), previous_position=Vec2(0.0, 0.0), anchored=True)
    p.acceleration = Vec2(0.0, 100.0)
    verlet_step(p, 0.5)
    assert p.position == Vec2(2.0, 2.0)
    assert p.previous_position == Vec2(0.0, 0.0)


def test_zero_dt_still_applies_velocity():
    """With dt = 0 gravity does nothing but the implied velocity still moves the particle."""
    p = Particle(position=Vec2(1.0, 1.0), previous_position=Vec2(0.0, 0.0), acceleration=Vec2(0.0, 20.0))
    verlet_step(p, 0.0)
    assert p.position == Vec2(2.0, 2.0)
    assert p.previous_position == Vec2(1.0, 1.0)

    at_rest = Particle(position=Vec2(5.0, 5.0), acceleration=Vec2(0.0, 20.0))
    verlet_step(at_rest, 0.0)
    assert at_rest.position == Vec2(5.0, 5.0)


def test_gravity_skips_anchored():
    free = Particle(position=(0, 0))
    pinned = Particle(position=(0, 0), anchored=True, acceleration=Vec2(1.0, 1.0))
    apply_gravity(free, 20.0)
    apply_gravity(pinned, 20.0)
    assert free.acceleration == Vec2(0.0, 20.0)
    assert pinned.acceleration == Vec2(1.0, 1.0)


def test_move_to():
    p = Particle(position=Vec2(0.0, 0.0), previous_position=Vec2(-1.0, 0.0))
    p.move_to((5.0, 5.0))
    assert p.velocity == Vec2(6.0, 5.0)

    p.move_to((7.0, 7.0), keep_velocity=False)
    assert p.previous_position == Vec2(7.0, 7.0)
    assert p.velocity == Vec2(0.0, 0.0)
