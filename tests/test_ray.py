import pytest

from raytracer.ray import Ray
from raytracer.vec3 import Vec3


def test_at_zero_is_origin():
    r = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0))
    assert r.at(0.0) == r.origin


def test_at_one_is_origin_plus_direction():
    r = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0))
    assert r.at(1.0) == r.origin + r.direction


@pytest.mark.parametrize("t", [-2.0, 0.25, 3.0, 10.0])
def test_at_is_linear(t):
    r = Ray(Vec3(1.0, 2.0, 3.0), Vec3(0.5, -1.0, 2.0))
    diff = r.at(t) - r.origin
    for got, want in zip(diff, r.direction * t):
        assert got == pytest.approx(want)


def test_ray_is_immutable():
    r = Ray(Vec3(), Vec3(1.0, 0.0, 0.0))
    with pytest.raises(AttributeError):
        r.origin = Vec3(1.0, 1.0, 1.0)