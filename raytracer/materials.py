"""Concrete materials: diffuse, metallic and glass-like surfaces."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from raytracer.hittable import HitRecord
from raytracer.material import Material, Scatter
from raytracer.ray import Ray
from raytracer.vec3 import Vec3, randd01, random_in_unit_sphere, random_unit_vector


def reflectance(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the reflectance of a dielectric."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)


@dataclass(frozen=True)
class Lambertian(Material):
    """A matte surface that scatters light in random directions."""

    albedo: Vec3

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        direction = rec.normal + random_unit_vector()
        if direction.near_zero():
            direction = rec.normal
        return Scatter(self.albedo, Ray(rec.p, direction))


@dataclass(frozen=True)
class Metal(Material):
    """A reflective surface, blurred by *fuzz*."""

    albedo: Vec3
    fuzz: float = 0.0

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        reflected = ray_in.direction.unit().reflect(rec.normal)
        scattered = Ray(rec.p, reflected + random_in_unit_sphere() * self.fuzz)
        if scattered.direction.dot(rec.normal) > 0.0:
            return Scatter(self.albedo, scattered)
        return None


@dataclass(frozen=True)
class Dielectric(Material):
    """A transparent surface with the given index of refraction."""

    refraction: float

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        ratio = 1.0 / self.refraction if rec.front_face else self.refraction
        unit_dir = ray_in.direction.unit()
        cos_theta = min((-unit_dir).dot(rec.normal), 1.0)
        sin_theta = math.sqrt(1.0 - cos_theta * cos_theta)

        cannot_refract = ratio * sin_theta > 1.0
        if cannot_refract or reflectance(cos_theta, ratio) > randd01():
            direction = unit_dir.reflect(rec.normal)
        else:
            direction = unit_dir.refract(rec.normal, ratio)
        return Scatter(Vec3(1.0, 1.0, 1.0), Ray(rec.p, direction))