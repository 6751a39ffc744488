"""Geometry module for shape primitives and intersection algorithms.

Components:
    hit: HitInfo record filled in by intersection queries
    sphere: Sphere primitive with ray-sphere intersection
    quad: Four-corner planar quad with ray-quad intersection
    primitive: The closed primitive union and its dispatcher

Every intersection routine is a pure function of (ray, primitive, bounds):

    hit = intersect(primitive, ray, min_distance, max_distance)

No acceleration structure is used; the scene tests every primitive.
"""

from .hit import HitInfo
from .primitive import (
    PRIMITIVE_TYPES,
    Primitive,
    intersect,
    is_primitive,
    primitive_from_dict,
)
from .quad import Quad, hit_quad
from .sphere import Sphere, hit_sphere

__all__ = [
    "HitInfo",
    "Primitive",
    "PRIMITIVE_TYPES",
    "intersect",
    "is_primitive",
    "primitive_from_dict",
    "Sphere",
    "hit_sphere",
    "Quad",
    "hit_quad",
]
