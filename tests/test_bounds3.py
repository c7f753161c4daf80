import pytest

from particlekit.bounds3 import FLT_MAX, Bounds3
from particlekit.vec3 import Vec3


def test_new_bounds_is_empty():
    b = Bounds3()
    assert b.min() == Vec3(FLT_MAX, FLT_MAX, FLT_MAX)
    assert b.max() == Vec3(-FLT_MAX, -FLT_MAX, -FLT_MAX)
    assert not b.contains(Vec3())


def test_inflate_single_point():
    b = Bounds3()
    p = Vec3(1, 2, 3)
    b.inflate(p)
    assert b.min() == p
    assert b.max() == p
    assert b.contains(p)


def test_inflate_two_points():
    b = Bounds3()
    b.inflate(Vec3(11, 11, 11))
    b.inflate(Vec3(10, 10, 10))
    assert b.min() == Vec3(10, 10, 10)
    assert b.max() == Vec3(11, 11, 11)


def test_inflate_mixed_components():
    b = Bounds3()
    b.inflate(Vec3(1, 5, -2))
    b.inflate(Vec3(4, -1, 3))
    assert b.min() == Vec3(1, -1, -2)
    assert b.max() == Vec3(4, 5, 3)


def test_contains_includes_border_and_excludes_outside():
    b = Bounds3()
    b.inflate(Vec3(0, 0, 0))
    b.inflate(Vec3(2, 2, 2))
    assert b.contains(Vec3(2, 0, 1))
    assert b.contains(Vec3(1, 1, 1))
    assert not b.contains(Vec3(2.5, 1, 1))
    assert not b.contains(Vec3(1, -0.1, 1))
    assert not b.contains(Vec3(1, 1, 3))


def test_inflate_with_bounds_merges():
    a = Bounds3()
    a.inflate(Vec3(0, 0, 0))
    other = Bounds3()
    other.inflate(Vec3(5, -5, 2))
    a.inflate(other)
    assert a.min() == Vec3(0, -5, 0)
    assert a.max() == Vec3(5, 0, 2)


def test_inflate_with_empty_bounds_changes_nothing():
    a = Bounds3()
    a.inflate(Vec3(1, 1, 1))
    a.inflate(Bounds3())
    assert a.min() == Vec3(1, 1, 1)
    assert a.max() == Vec3(1, 1, 1)


def test_inflate_rejects_other_types():
    with pytest.raises(TypeError):
        Bounds3().inflate((1, 2, 3))


def test_getitem_corners():
    b = Bounds3()
    b.inflate(Vec3(1, 2, 3))
    b.inflate(Vec3(4, 5, 6))
    assert b[0] == b.min()
    assert b[1] == b.max()
    with pytest.raises(IndexError):
        b[2]


def test_set_empty_resets():
    b = Bounds3()
    b.inflate(Vec3(1, 2, 3))
    b.set_empty()
    assert not b.contains(Vec3(1, 2, 3))
    assert b.min() == Bounds3().min()


def test_min_returns_copy():
    b = Bounds3()
    b.inflate(Vec3(1, 2, 3))
    corner = b.min()
    corner.x = 100
    assert b.min() == Vec3(1, 2, 3)


def test_str_format():
    b = Bounds3()
    b.inflate(Vec3(10, 10, 10))
    b.inflate(Vec3(11, 11, 11))
    assert str(b) == "min(10,10,10) max(11,11,11)"