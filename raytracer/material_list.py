"""The list of every material in a scene, addressed by index."""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from raytracer.hittable import HitRecord
from raytracer.material import Material, Scatter
from raytracer.ray import Ray


class MaterialList:
    """Materials stored in order; objects refer to them by index."""

    def __init__(self, materials: Optional[Iterable[Material]] = None) -> None:
        self._materials: list[Material] = list(materials or ())

    def add(self, material: Material) -> int:
        """Append *material* and return its index."""
        self._materials.append(material)
        return len(self._materials) - 1

    def __len__(self) -> int:
        return len(self._materials)

    def __getitem__(self, index: int) -> Material:
        if index < 0 or index >= len(self._materials):
            raise IndexError(f"material index {index} out of range")
        return self._materials[index]

    def __iter__(self) -> Iterator[Material]:
        return iter(self._materials)

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[Scatter]:
        """Scatter *ray_in* with the material the hit record refers to."""
        return self[rec.material_index].scatter(ray_in, rec)