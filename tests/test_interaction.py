import pytest
from rope_sim.rope import Rope
from rope_sim.util import Vec2
from rope_sim.interaction import InteractionState, PointerController


def make_rope():
    # Particles at x = 0, 10, 20, 30, 40; particle 0 pinned
    return Rope(origin=(0.0, 0.0), count=5, length=50.0)


def test_press_binds_nearest_particle():
    rope = make_rope()
    ctl = PointerController(rope)
    assert not ctl.dragging
    assert ctl.bound_particle is None

    index = ctl.press((31.0, 4.0))

    assert index == 3
    assert ctl.dragging
    assert ctl.state == InteractionState(pointer_down=True, bound_index=3)
    p = rope.particles[3]
    assert ctl.bound_particle is p
    assert p.anchored
    assert p.position == Vec2(31.0, 4.0)


def test_press_tie_goes_to_lowest_index():
    rope = make_rope()
    ctl = PointerController(rope)
    assert ctl.press((25.0, 0.0)) == 2


def test_bound_particle_follows_pointer_through_updates():
    rope = make_rope()
    ctl = PointerController(rope)
    ctl.press((40.0, 0.0))

    for k in range(10):
        target = (40.0 - k, 5.0 * k)
        ctl.move(target)
        rope.update(1 / 60)
        assert rope.particles[4].position == Vec2(*target)

    # Several moves between two frames: only the last one counts
    ctl.move((0.0, 10.0))
    ctl.move((1.0, 30.0))
    rope.update(1 / 60)
    assert rope.particles[4].position == Vec2(1.0, 30.0)


def test_release_frees_particle():
    rope = make_rope()
    ctl = PointerController(rope)
    ctl.press((20.0, 0.0))
    ctl.move((20.0, 15.0))
    ctl.release()

    assert not ctl.dragging
    assert ctl.state == InteractionState(pointer_down=False, bound_index=None)
    p = rope.particles[2]
    assert not p.anchored

    # Back in free simulation
    before = p.position
    rope.update(1 / 60)
    assert p.position != before


def test_release_after_dragging_pin_frees_it_by_default():
    rope = make_rope()
    ctl = PointerController(rope)
    assert ctl.press((0.0, 1.0)) == 0
    ctl.release()
    assert not rope.particles[0].anchored


def test_restore_anchor_keeps_pin():
    rope = make_rope()
    ctl = PointerController(rope, restore_anchor=True)
    ctl.press((0.0, 1.0))
    ctl.move((5.0, -5.0))
    ctl.release()

    pin = rope.particles[0]
    assert pin.anchored
    assert pin.position == Vec2(5.0, -5.0)

    # A free particle is still freed on release
    ctl.press((30.0, 0.0))
    ctl.release()
    assert not rope.particles[3].anchored


def test_idle_events_are_noops():
    rope = make_rope()
    ctl = PointerController(rope)
    start = rope.positions().copy()

    ctl.move((100.0, 100.0))
    ctl.release()

    assert (rope.positions() == start).all()
    assert ctl.state == InteractionState()


def test_second_press_ignored_while_dragging():
    rope = make_rope()
    ctl = PointerController(rope)
    ctl.press((10.0, 0.0))
    assert ctl.press((40.0, 0.0)) is None
    assert ctl.state.bound_index == 1
    assert not rope.particles[4].anchored
    assert rope.particles[4].position == Vec2(40.0, 0.0)


def test_event_aliases_and_shared_state():
    rope = make_rope()
    state = InteractionState()
    ctl = PointerController(rope, state=state)

    ctl.on_pointer_down(Vec2(10.0, 2.0))
    assert state.bound_index == 1
    ctl.on_pointer_move((12.0, 3.0))
    assert rope.particles[1].position == Vec2(12.0, 3.0)
    ctl.on_pointer_up()
    assert state.bound_index is None
    assert not state.pointer_down


def test_release_inherits_implied_velocity():
    """The released particle moves on with position - previous_position."""
    rope = Rope(origin=(0.0, 0.0), count=2, length=20.0)
    rope.unpin(0)
    rope.gravity = 0.0
    ctl = PointerController(rope)

    ctl.press((10.0, 0.0))
    ctl.move((13.0, 0.0))
    ctl.release()

    p = rope.particles[1]
    assert p.velocity == Vec2(3.0, 0.0)
