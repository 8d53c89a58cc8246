"""A positionable camera with depth of field."""

from __future__ import annotations

import math

from raytracer.ray import Ray
from raytracer.vec3 import Vec3, random_in_unit_disk


class Camera:
    """A thin-lens camera looking from one point towards another."""

    def __init__(
        self,
        lookfrom: Vec3,
        lookat: Vec3,
        vup: Vec3,
        vfov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
    ) -> None:
        theta = math.radians(vfov)
        h = math.tan(theta / 2.0)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height

        self.w = (lookfrom - lookat).unit()
        self.u = vup.cross(self.w).unit()
        self.v = self.w.cross(self.u).unit()

        self.origin = lookfrom
        self.horizontal = self.u * (viewport_width * focus_dist)
        self.vertical = self.v * (viewport_height * focus_dist)
        self.lower_left_corner = (
            self.origin
            - self.horizontal * 0.5
            - self.vertical * 0.5
            - self.w * focus_dist
        )
        self.lens_radius = aperture / 2.0

    def get_ray(self, s: float, t: float) -> Ray:
        """A ray through the viewport at fractions (s, t), from a random lens point."""
        rd = random_in_unit_disk() * self.lens_radius
        offset = self.u * rd.x + self.v * rd.y
        target = self.lower_left_corner + self.horizontal * s + self.vertical * t
        origin = self.origin + offset
        return Ray(origin, target - origin)