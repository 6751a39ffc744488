"""Quad primitive with ray-quad intersection.

A quad is given by four coplanar corners in counter-clockwise order:

    top_left ---- top_right
       |        /     |
       |      /       |
    bottom_left -- bottom_right

The quad is split along the bottom_left/top_right diagonal into two
triangles. The ray is first tested against the diagonal to pick a triangle,
then against that triangle's remaining edges using scalar triple products
(the segment/quad test from Ericson, "Real-Time Collision Detection").
The triple products double as unnormalized barycentric coordinates, which
recover the world-space hit point.

Quads are two-sided: when the ray approaches the back face, the normal is
flipped and the corners are swapped so the test always runs front-facing.

Example:
    >>> from pathtracer.core.color import Color
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vector import Vector3
    >>> from pathtracer.geometry.quad import Quad, hit_quad
    >>> from pathtracer.materials.material import Material
    >>> quad = Quad.unit(Material(Color.white()))
    >>> ray = Ray(Vector3(0.0, 0.0, 5.0), Vector3(0.0, 0.0, -1.0))
    >>> hit_quad(ray, quad, 0.01, 1000.0).distance
    5.0
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, cross, dot
from pathtracer.geometry.hit import HitInfo
from pathtracer.materials.material import Material

# Direction components at or below this magnitude are not used as divisors
# when recovering the hit distance.
DISTANCE_AXIS_THRESHOLD = 0.1


@dataclass(frozen=True, slots=True)
class Quad:
    """A planar quadrilateral defined by its four corners.

    Attributes:
        bottom_left: First corner.
        bottom_right: Second corner (counter-clockwise).
        top_right: Third corner, opposite bottom_left.
        top_left: Fourth corner.
        material: The material used when the quad is hit.
    """

    bottom_left: Vector3
    bottom_right: Vector3
    top_right: Vector3
    top_left: Vector3
    material: Material

    @classmethod
    def unit(cls, material: Material) -> Quad:
        """Create a 1x1 quad centered on the origin in the z=0 plane."""
        return cls(
            Vector3(-0.5, -0.5, 0.0),
            Vector3(0.5, -0.5, 0.0),
            Vector3(0.5, 0.5, 0.0),
            Vector3(-0.5, 0.5, 0.0),
            material,
        )

    def normal(self) -> Vector3:
        """The unit face normal, before any back-face flip."""
        return cross(
            self.top_right - self.bottom_left,
            self.top_right - self.bottom_right,
        ).normalized()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "quad",
            "bottom_left": list(self.bottom_left.to_tuple()),
            "bottom_right": list(self.bottom_right.to_tuple()),
            "top_right": list(self.top_right.to_tuple()),
            "top_left": list(self.top_left.to_tuple()),
            "material": self.material.to_dict(),
        }


def _scalar_triple_product(a: Vector3, b: Vector3, c: Vector3) -> float:
    return dot(cross(a, b), c)


def hit_quad(
    ray: Ray,
    quad: Quad,
    min_distance: float,
    max_distance: float,
) -> HitInfo:
    """Test for ray-quad intersection.

    Neither the quad nor the ray is modified; the back-face corner swap
    operates on local copies. Degenerate configurations (a ray parallel to
    the quad's plane, a zero-area quad) report a miss.

    Args:
        ray: The ray to test. Its direction is unit length.
        quad: The quad to test against.
        min_distance: Hits at or before this distance are ignored.
        max_distance: Hits at or beyond this distance are ignored.

    Returns:
        A HitInfo; check ``did_hit`` to determine if intersection occurred.
    """
    result = HitInfo(distance=max_distance)

    a = quad.bottom_left
    b = quad.bottom_right
    c = quad.top_right
    d = quad.top_left

    normal = quad.normal()
    if dot(normal, ray.direction) > 0.0:
        normal = -normal
        a, d = d, a
        b, c = c, b

    p = ray.origin
    pq = ray.direction
    pa = a - p
    pb = b - p
    pc = c - p

    # Which side of the a-c diagonal does the ray pass?
    m = cross(pc, pq)
    v = dot(pa, m)

    if v >= 0.0:
        # Triangle a, b, c
        u = -dot(pb, m)
        if u < 0.0:
            return result
        w = _scalar_triple_product(pq, pb, pa)
        if w < 0.0:
            return result
        total = u + v + w
        if total == 0.0:
            return result
        hit_point = (a * u + b * v + c * w) / total
    else:
        # Triangle a, d, c
        pd = d - p
        u = dot(pd, m)
        if u < 0.0:
            return result
        w = _scalar_triple_product(pq, pa, pd)
        if w < 0.0:
            return result
        v = -v
        total = u + v + w
        if total == 0.0:
            return result
        hit_point = (a * u + d * v + c * w) / total

    axis = ray.direction.largest_axis()
    component = ray.direction[axis]
    if abs(component) <= DISTANCE_AXIS_THRESHOLD:
        return result
    distance = (hit_point[axis] - ray.origin[axis]) / component

    if not (min_distance < distance < max_distance):
        return result

    result.distance = distance
    result.normal = normal
    result.did_hit = True
    result.material = quad.material
    return result
