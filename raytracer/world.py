"""The collection of objects that make up a scene."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from raytracer.hittable import HitRecord, Hittable
from raytracer.ray import Ray


class World:
    """An ordered list of hittable objects, hit as a whole."""

    def __init__(self, objects: Optional[Iterable[Hittable]] = None) -> None:
        self._objects: list[Hittable] = list(objects or ())

    def add(self, obj: Hittable) -> int:
        """Append *obj* and return its index."""
        self._objects.append(obj)
        return len(self._objects) - 1

    def __len__(self) -> int:
        return len(self._objects)

    def __getitem__(self, index: int) -> Hittable:
        if index < 0 or index >= len(self._objects):
            raise IndexError(f"object index {index} out of range")
        return self._objects[index]

    def __iter__(self) -> Iterator[Hittable]:
        return iter(self._objects)

    def hit(self, ray: Ray, t_min: float, t_max: float) -> Optional[HitRecord]:
        """Return the closest hit among all objects, or None."""
        closest: Optional[HitRecord] = None
        closest_so_far = t_max
        for obj in self._objects:
            rec = obj.hit(ray, t_min, closest_so_far)
            if rec is not None:
                closest = rec
                closest_so_far = rec.t
        return closest