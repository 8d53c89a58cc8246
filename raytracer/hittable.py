"""Hit records and the interface of objects a ray can hit."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass
class HitRecord:
    """Where and how a ray met a surface."""

    p: Vec3
    t: float
    material_index: int = 0
    normal: Vec3 = field(default_factory=Vec3)
    front_face: bool = False

    def set_face_normal(self, ray: Ray, outward_normal: Vec3) -> None:
        """Store the normal so that it always points against the ray."""
        self.front_face = ray.direction.dot(outward_normal) < 0.0
        self.normal = outward_normal if self.front_face else -outward_normal


class Hittable(ABC):
    """An object that can be intersected by a ray.

    Implementations carry a ``material_index`` that they copy into the
    records they return.
    """

    @abstractmethod
    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the nearest hit with t in [t_min, t_max], or None."""