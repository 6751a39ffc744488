"""Hit record returned by ray/primitive intersection queries."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from pathtracer.core.color import Color
from pathtracer.core.vector import Vector3
from pathtracer.materials.material import Material


@dataclass(slots=True)
class HitInfo:
    """Record of a ray/primitive intersection.

    A fresh record is created per query. During scene traversal the closest
    record found so far is kept and only replaced by a strictly closer one.

    Attributes:
        distance: Distance along the ray to the hit. Starts at +inf (or the
            caller's maximum distance) and is only meaningful if did_hit.
        normal: Unit surface normal, facing against the incoming ray.
        did_hit: Whether an accepted intersection was found.
        material: Material of the primitive that was hit, if any.
    """

    distance: float = math.inf
    normal: Vector3 = field(default_factory=Vector3.zero)
    did_hit: bool = False
    material: Material | None = None

    @property
    def albedo(self) -> Color:
        return self.material.albedo if self.material is not None else Color.black()

    @property
    def emissive(self) -> Color:
        return self.material.emissive if self.material is not None else Color.black()

    @property
    def specular(self) -> Color:
        return self.material.specular if self.material is not None else Color.black()

    @property
    def roughness(self) -> float:
        return self.material.roughness if self.material is not None else 0.0

    @property
    def specularness(self) -> float:
        return self.material.specularness if self.material is not None else 0.0
