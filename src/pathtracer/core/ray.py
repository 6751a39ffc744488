"""Ray type for CPU path tracing.

A ray is an origin plus a unit direction. Unlike the value types in
``pathtracer.core.vector`` a Ray is mutable: the integrator advances the same
ray from bounce to bounce instead of allocating a new one each time.

Example:
    >>> from pathtracer.core.ray import Ray
    >>> from pathtracer.core.vector import Vector3
    >>> ray = Ray(Vector3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 2.0))
    >>> ray.direction
    Vector3(x=0.0, y=0.0, z=1.0)
    >>> ray.at(5.0)
    Vector3(x=0.0, y=0.0, z=5.0)
"""

from __future__ import annotations

from pathtracer.core.vector import Vector3


class Ray:
    """A ray with an origin point and a normalized direction.

    Attributes:
        origin: The starting point of the ray.
        direction: The unit direction of the ray. Assigning any vector
            stores its normalized form.
    """

    __slots__ = ("origin", "_direction")

    def __init__(
        self,
        origin: Vector3 | None = None,
        direction: Vector3 | None = None,
    ) -> None:
        self.origin = origin if origin is not None else Vector3.zero()
        self.direction = direction if direction is not None else Vector3.forward()

    @property
    def direction(self) -> Vector3:
        return self._direction

    @direction.setter
    def direction(self, value: Vector3) -> None:
        self._direction = value.normalized()

    def at(self, t: float) -> Vector3:
        """Compute the point origin + t * direction."""
        return self.origin + self._direction * t

    def __repr__(self) -> str:
        return f"Ray(origin={self.origin!r}, direction={self._direction!r})"
