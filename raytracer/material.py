"""The interface shared by all surface materials."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from raytracer.hittable import HitRecord
from raytracer.ray import Ray
from raytracer.vec3 import Vec3


@dataclass(frozen=True, slots=True)
class Scatter:
    """The outcome of a ray bouncing off a surface."""

    attenuation: Vec3
    scattered: Ray


class Material(ABC):
    """Decides how an incoming ray leaves a surface."""

    @abstractmethod
    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """Return the scattered ray and its attenuation, or None if absorbed."""