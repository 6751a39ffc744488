"""Materials module.

A single material model is used for every surface: a diffuse albedo, a
specular tint chosen with probability ``specularness``, a ``roughness``
blend between the two directions, and optional emission.
"""

from .material import Material

__all__ = ["Material"]
