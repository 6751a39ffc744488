"""Core rendering module.

This module contains the fundamental building blocks of the path tracer:

Components:
    vector: Vector3 value type, vector algebra and random directions
    color: RGB Color with ACES tone mapping and gamma correction
    ray: Mutable ray with an always-normalized direction
    integrator: Pure path tracing, scanline sampling and post-processing
    renderer: Threaded scanline driver that produces the final image

The integrator implements fixed-length unidirectional path tracing with a
specular/diffuse choice per bounce and box-filtered anti-aliasing.
"""

from .color import Color, mix
from .ray import Ray
from .vector import (
    Vector3,
    cross,
    dot,
    lerp,
    normalize,
    random_unit_vector,
    reflect,
)

# Note: integrator and renderer are NOT imported here to avoid circular imports.
# Import directly from pathtracer.core.integrator or pathtracer.core.renderer.

__all__ = [
    "Vector3",
    "dot",
    "cross",
    "normalize",
    "lerp",
    "reflect",
    "random_unit_vector",
    "Color",
    "mix",
    "Ray",
]
