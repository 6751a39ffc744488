"""Three-dimensional vector algebra for the CPU path tracer.

This module provides the immutable Vector3 value type used for positions,
directions and normals throughout the renderer, together with the random
direction sampler used by the diffuse bounce.

Example:
    >>> from pathtracer.core.vector import Vector3, cross, dot
    >>> a = Vector3(1.0, 0.0, 0.0)
    >>> b = Vector3(0.0, 1.0, 0.0)
    >>> cross(a, b)
    Vector3(x=0.0, y=0.0, z=1.0)
    >>> dot(a, b)
    0.0
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np


@dataclass(frozen=True, slots=True)
class Vector3:
    """An immutable 3D vector.

    Attributes:
        x: The x component.
        y: The y component.
        z: The z component.
    """

    x: float
    y: float
    z: float

    @classmethod
    def zero(cls) -> Vector3:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vector3:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def forward(cls) -> Vector3:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def up(cls) -> Vector3:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def right(cls) -> Vector3:
        return cls(1.0, 0.0, 0.0)

    # =========================================================================
    # Arithmetic
    # =========================================================================

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    def __pos__(self) -> Vector3:
        return self

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Vector3 | float) -> Vector3:
        """Multiply component-wise by a vector, or scale by a number."""
        if isinstance(other, Vector3):
            return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: float) -> Vector3:
        return Vector3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other: float) -> Vector3:
        return Vector3(self.x / other, self.y / other, self.z / other)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    # =========================================================================
    # Geometry
    # =========================================================================

    @property
    def magnitude(self) -> float:
        """The Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Return a unit vector pointing in the same direction.

        The zero vector has no direction; normalizing it yields NaN
        components instead of raising, so callers must not pass one.

        Returns:
            The vector divided by its magnitude.
        """
        length = self.magnitude
        if length == 0.0:
            return Vector3(math.nan, math.nan, math.nan)
        return Vector3(self.x / length, self.y / length, self.z / length)

    def largest_axis(self) -> int:
        """Return the index (0, 1 or 2) of the component with the largest magnitude."""
        ax, ay, az = abs(self.x), abs(self.y), abs(self.z)
        if ax >= ay and ax >= az:
            return 0
        if ay >= az:
            return 1
        return 2

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


def dot(a: Vector3, b: Vector3) -> float:
    """Compute the dot product of two vectors."""
    return a.x * b.x + a.y * b.y + a.z * b.z


def cross(a: Vector3, b: Vector3) -> Vector3:
    """Compute the cross product a x b."""
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def normalize(v: Vector3) -> Vector3:
    """Normalize a vector to unit length. See Vector3.normalized."""
    return v.normalized()


def lerp(a: Vector3, b: Vector3, t: float) -> Vector3:
    """Linearly interpolate between a (t=0) and b (t=1)."""
    return Vector3(
        a.x + (b.x - a.x) * t,
        a.y + (b.y - a.y) * t,
        a.z + (b.z - a.z) * t,
    )


def reflect(incident: Vector3, normal: Vector3) -> Vector3:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The mirrored direction I - 2(I . N)N.
    """
    return incident - normal * (2.0 * dot(incident, normal))


# =============================================================================
# Random Sampling
# =============================================================================


def random_unit_vector(rng: np.random.Generator) -> Vector3:
    """Generate a random unit vector uniformly distributed on the sphere.

    Samples z ~ U(-1, 1) and an azimuth ~ U(0, 2pi). Added to a surface
    normal and normalized, the result approximates a cosine-weighted
    hemisphere direction.

    Args:
        rng: The generator owned by the calling worker.

    Returns:
        A random unit vector.
    """
    z = rng.random() * 2.0 - 1.0
    a = rng.random() * 2.0 * math.pi
    r = math.sqrt(1.0 - z * z)
    return Vector3(r * math.cos(a), r * math.sin(a), z)
