import numpy as np
import pytest

from grav_sim.vector import Vec3


def test_arithmetic_is_componentwise():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-4.0, 0.5, 2.0)

    assert a + b == Vec3(-3.0, 2.5, 5.0)
    assert a - b == Vec3(5.0, 1.5, 1.0)
    assert a * 2.0 == Vec3(2.0, 4.0, 6.0)
    assert 2.0 * a == Vec3(2.0, 4.0, 6.0)
    assert a / 2.0 == Vec3(0.5, 1.0, 1.5)
    assert -a == Vec3(-1.0, -2.0, -3.0)


def test_operations_do_not_mutate():
    a = Vec3(1.0, 2.0, 3.0)
    _ = a + Vec3(1.0, 1.0, 1.0)
    _ = a * 10.0
    assert a == Vec3(1.0, 2.0, 3.0)
    with pytest.raises(AttributeError):
        a.x = 5.0


def test_norm():
    assert Vec3(3.0, 4.0, 12.0).norm() == pytest.approx(13.0)
    assert Vec3(3.0, 4.0, 12.0).norm2() == pytest.approx(169.0)
    assert Vec3.zero().norm() == 0.0


def test_normalized_has_unit_length():
    """|v/|v|| = 1 for every non-zero v, across a wide range of scales."""
    rng = np.random.default_rng(12345)
    for _ in range(200):
        scale = 10.0 ** rng.uniform(-8, 12)
        v = Vec3.from_array(rng.normal(size=3) * scale)
        assert v.normalized().norm() == pytest.approx(1.0, rel=1e-12)


def test_normalized_zero_vector_is_unchanged():
    z = Vec3.zero()
    assert z.normalized() == z


def test_dot_and_cross():
    ex, ey, ez = Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 0, 1)
    assert ex.cross(ey) == ez
    assert ey.cross(ez) == ex
    assert ez.cross(ex) == ey
    assert ey.cross(ex) == -ez

    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(4.0, -5.0, 6.0)
    c = a.cross(b)
    assert a.dot(b) == pytest.approx(12.0)
    # a × b is orthogonal to both inputs
    assert c.dot(a) == pytest.approx(0.0, abs=1e-12)
    assert c.dot(b) == pytest.approx(0.0, abs=1e-12)


def test_array_conversion():
    v = Vec3.from_array((1, 2, 3))
    assert v == Vec3(1.0, 2.0, 3.0)
    arr = v.to_array()
    assert arr.dtype == np.float64
    assert arr.shape == (3,)
    np.testing.assert_array_equal(arr, [1.0, 2.0, 3.0])
    assert v.to_list() == [1.0, 2.0, 3.0]

    with pytest.raises(ValueError):
        Vec3.from_array([1.0, 2.0])


def test_vector_times_vector_is_rejected():
    with pytest.raises(TypeError):
        Vec3(1, 2, 3) * Vec3(1, 2, 3)
