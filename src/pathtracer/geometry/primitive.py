"""Closed set of scene primitives and the intersection dispatcher.

Primitives form a closed union (``Sphere | Quad``). ``intersect`` dispatches on
the concrete type with structural pattern matching, so adding a new shape
means extending the union, ``intersect``, and ``primitive_from_dict`` together.
"""

from __future__ import annotations

from typing import Any, TypeAlias

from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.hit import HitInfo
from pathtracer.geometry.quad import Quad, hit_quad
from pathtracer.geometry.sphere import Sphere, hit_sphere
from pathtracer.materials.material import Material

Primitive: TypeAlias = Sphere | Quad

PRIMITIVE_TYPES = (Sphere, Quad)


def is_primitive(obj: object) -> bool:
    """Check whether an object belongs to the primitive union."""
    return isinstance(obj, PRIMITIVE_TYPES)


def intersect(
    primitive: Primitive,
    ray: Ray,
    min_distance: float,
    max_distance: float,
) -> HitInfo:
    """Intersect a ray with any primitive.

    Args:
        primitive: The sphere or quad to test.
        ray: The ray to test.
        min_distance: Exclusive lower bound on the hit distance.
        max_distance: Exclusive upper bound on the hit distance.

    Returns:
        The HitInfo produced by the primitive's intersection test.

    Raises:
        TypeError: If the object is not a known primitive.
    """
    match primitive:
        case Sphere():
            return hit_sphere(ray, primitive, min_distance, max_distance)
        case Quad():
            return hit_quad(ray, primitive, min_distance, max_distance)
        case _:
            raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")


def _vec(values: Any) -> Vector3:
    return Vector3(float(values[0]), float(values[1]), float(values[2]))


def primitive_from_dict(data: dict[str, Any]) -> Primitive:
    """Build a primitive from its dictionary form.

    Args:
        data: Dictionary with a ``type`` key ("sphere" or "quad"), the
            geometry keys of that type, and an optional ``material`` mapping.

    Returns:
        The constructed primitive.

    Raises:
        ValueError: If the type is unknown.
    """
    kind = str(data.get("type", "")).lower()
    material = Material.from_dict(data.get("material", {}))

    if kind == "sphere":
        return Sphere(
            center=_vec(data.get("center", [0.0, 0.0, 0.0])),
            radius=float(data.get("radius", 1.0)),
            material=material,
        )
    if kind == "quad":
        return Quad(
            bottom_left=_vec(data["bottom_left"]),
            bottom_right=_vec(data["bottom_right"]),
            top_right=_vec(data["top_right"]),
            top_left=_vec(data["top_left"]),
            material=material,
        )
    raise ValueError(f"Unknown primitive type: {kind!r}")
