"""Three-component vectors and the random helpers used for sampling."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Iterator, Optional, Union

Scalar = Union[int, float]


def _as_vec(value: object) -> Optional["Vec3"]:
    """Return *value* as a vector, broadcasting scalars, or None if unsupported."""
    if isinstance(value, Vec3):
        return value
    if isinstance(value, (int, float)):
        return Vec3(value, value, value)
    return None


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable 3D vector, also used for points and colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __add__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec(other)
        if o is None:
            return NotImplemented
        return Vec3(self.x + o.x, self.y + o.y, self.z + o.z)

    def __sub__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec(other)
        if o is None:
            return NotImplemented
        return Vec3(self.x - o.x, self.y - o.y, self.z - o.z)

    def __mul__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec(other)
        if o is None:
            return NotImplemented
        return Vec3(self.x * o.x, self.y * o.y, self.z * o.z)

    def __rmul__(self, other: Scalar) -> "Vec3":
        return self.__mul__(other)

    def __truediv__(self, other: Union["Vec3", Scalar]) -> "Vec3":
        o = _as_vec(other)
        if o is None:
            return NotImplemented
        return Vec3(self.x / o.x, self.y / o.y, self.z / o.z)

    def __neg__(self) -> "Vec3":
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def dot(self, other: "Vec3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - other.y * self.z,
            self.z * other.x - other.z * self.x,
            self.x * other.y - other.x * self.y,
        )

    def unit(self) -> "Vec3":
        """Return the vector scaled to length one."""
        return self / self.length()

    def sqrt(self) -> "Vec3":
        """Component-wise square root."""
        return Vec3(math.sqrt(self.x), math.sqrt(self.y), math.sqrt(self.z))

    def near_zero(self) -> bool:
        """True when every component is closer to zero than 1e-8."""
        s = 1e-8
        return all(abs(c) < s for c in self)

    def lerp(self, other: "Vec3", t: float) -> "Vec3":
        """Linear interpolation from this vector to *other*."""
        return self * (1.0 - t) + other * t

    def reflect(self, normal: "Vec3") -> "Vec3":
        """Mirror this vector about the surface with the given normal."""
        return self - normal * (2.0 * self.dot(normal))

    def refract(self, normal: "Vec3", etai_over_etat: float) -> "Vec3":
        """Refract this unit vector through a surface (Snell's law)."""
        cos_theta = min((-self).dot(normal), 1.0)
        r_out_perp = (self + normal * cos_theta) * etai_over_etat
        r_out_parallel = normal * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
        return r_out_perp + r_out_parallel


def randd01() -> float:
    """A random number in [0, 1)."""
    return random.random()


def randd(lo: float, hi: float) -> float:
    """A random number in [lo, hi)."""
    return lo + (hi - lo) * randd01()


def clamp(x: float, lo: float, hi: float) -> float:
    """Restrict *x* to the range [lo, hi]."""
    if x < lo:
        return lo
    if x > hi:
        return hi
    return x


def random_vec(lo: float = 0.0, hi: float = 1.0) -> Vec3:
    """A vector whose components are each random in [lo, hi)."""
    return Vec3(randd(lo, hi), randd(lo, hi), randd(lo, hi))


def random_in_unit_sphere() -> Vec3:
    """A random point strictly inside the unit sphere."""
    while True:
        p = random_vec(-1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_unit_vector() -> Vec3:
    """A random direction of length one."""
    return random_in_unit_sphere().unit()


def random_in_hemisphere(normal: Vec3) -> Vec3:
    """A random unit direction in the hemisphere around *normal*."""
    v = random_unit_vector()
    return v if v.dot(normal) > 0.0 else -v


def random_in_unit_disk() -> Vec3:
    """A random point inside the unit disk in the z = 0 plane."""
    while True:
        p = Vec3(randd(-1.0, 1.0), randd(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p