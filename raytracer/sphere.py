"""Spheres."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass(frozen=True)
class Sphere(Hittable):
    """A sphere with a centre, a radius and a material index."""

    center: Vec3
    radius: float
    material_index: int = 0

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        oc = ray.origin - self.center
        a = ray.direction.length_squared()
        half_b = oc.dot(ray.direction)
        c = oc.length_squared() - self.radius * self.radius

        discriminant = half_b * half_b - a * c
        if discriminant < 0:
            return None
        sqrtd = math.sqrt(discriminant)

        # Nearest root within the accepted range.
        root = (-half_b - sqrtd) / a
        if root < t_min or t_max < root:
            root = (-half_b + sqrtd) / a
            if root < t_min or t_max < root:
                return None

        p = ray.at(root)
        rec = HitRecord(p=p, t=root, material_index=self.material_index)
        rec.set_face_normal(ray, (p - self.center) / self.radius)
        return rec