"""Sphere primitive with ray-sphere intersection.

The intersection solves |O + tD - C|^2 = R^2 for a unit direction D using the
half-b form of the quadratic:

    b = dot(O - C, D)
    c = |O - C|^2 - R^2
    t = -b -/+ sqrt(b^2 - c)

Rays that start outside the sphere (c > 0) and point away from it (b > 0)
are rejected before the square root is taken. A ray starting inside the
sphere hits the far root and sees the inward-facing normal.

Example:
    >>> from pathtracer.core.color import Color
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vector import Vector3
    >>> from pathtracer.geometry.sphere import Sphere, hit_sphere
    >>> from pathtracer.materials.material import Material
    >>> sphere = Sphere(Vector3(0.0, 0.0, 0.0), 1.0, Material(Color.white()))
    >>> ray = Ray(Vector3(0.0, 0.0, -5.0), Vector3(0.0, 0.0, 1.0))
    >>> hit_sphere(ray, sphere, 0.01, 1000.0).distance
    4.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, dot
from pathtracer.geometry.hit import HitInfo
from pathtracer.materials.material import Material


@dataclass(frozen=True, slots=True)
class Sphere:
    """A sphere defined by center point and radius.

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (positive).
        material: The material used when the sphere is hit.
    """

    center: Vector3
    radius: float
    material: Material

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "sphere",
            "center": list(self.center.to_tuple()),
            "radius": self.radius,
            "material": self.material.to_dict(),
        }


def hit_sphere(
    ray: Ray,
    sphere: Sphere,
    min_distance: float,
    max_distance: float,
) -> HitInfo:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test. Its direction is unit length.
        sphere: The sphere to test against.
        min_distance: Hits at or before this distance are ignored
            (avoids self-intersection).
        max_distance: Hits at or beyond this distance are ignored. Scene
            traversal passes the current closest distance here.

    Returns:
        A HitInfo; check ``did_hit`` to determine if intersection occurred.
    """
    result = HitInfo(distance=max_distance)

    oc = ray.origin - sphere.center
    b = dot(oc, ray.direction)
    c = dot(oc, oc) - sphere.radius * sphere.radius

    # Outside the sphere and pointing away from it
    if c > 0.0 and b > 0.0:
        return result

    discriminant = b * b - c
    if discriminant < 0.0:
        return result

    sqrt_d = math.sqrt(discriminant)
    t = -b - sqrt_d
    inside = False
    if t < 0.0:
        # Origin is inside the sphere: use the far root
        t = -b + sqrt_d
        inside = True

    if not (min_distance < t < max_distance):
        return result

    hit_point = ray.at(t)
    normal = (hit_point - sphere.center).normalized()
    if inside:
        normal = -normal

    result.distance = t
    result.normal = normal
    result.did_hit = True
    result.material = sphere.material
    return result
