import numpy as np
import pytest
from rope_sim.util import Vec2, add, sub, scale, magnitude, distance, zero, to_array


def test_basic_operations():
    a = Vec2(1.0, 2.0)
    b = Vec2(4.0, -2.0)

    assert add(a, b) == Vec2(5.0, 0.0)
    assert sub(b, a) == Vec2(3.0, -4.0)
    assert scale(2.0, a) == Vec2(2.0, 4.0)
    assert magnitude(Vec2(3.0, 4.0)) == pytest.approx(5.0)
    assert distance(a, b) == pytest.approx(5.0)
    assert distance(b, a) == pytest.approx(5.0)
    assert zero() == Vec2(0.0, 0.0)


def test_operators_match_functions():
    a = Vec2(1.5, -0.5)
    b = Vec2(-2.0, 3.0)
    assert a + b == add(a, b)
    assert a - b == sub(a, b)
    assert 3 * a == scale(3, a)
    assert a * 3 == scale(3, a)
    assert -a == Vec2(-1.5, 0.5)


def test_vec2_is_immutable_value():
    a = Vec2(1, 2)
    assert isinstance(a.x, float)
    assert a == Vec2(1.0, 2.0)
    assert hash(a) == hash(Vec2(1.0, 2.0))
    with pytest.raises(AttributeError):
        a.x = 5.0

    # Operations return new objects and leave inputs alone
    add(a, Vec2(1, 1))
    assert a == Vec2(1.0, 2.0)


def test_conversions():
    assert Vec2.of((3, 4)) == Vec2(3.0, 4.0)
    assert Vec2.of(np.array([3.0, 4.0])) == Vec2(3.0, 4.0)
    v = Vec2(3, 4)
    assert Vec2.of(v) is v
    assert tuple(v) == (3.0, 4.0)

    np.testing.assert_array_equal(v.to_array(), [3.0, 4.0])

    arr = to_array([Vec2(0, 0), Vec2(1, 2)])
    assert arr.shape == (2, 2)
    assert arr.dtype == np.float64
    assert to_array([]).shape == (0, 2)
