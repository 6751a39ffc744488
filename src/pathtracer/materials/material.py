"""Surface material shared by every hit against its owning primitive.

A material combines a diffuse (albedo) response, a mirror-like (specular)
response and self-emission. At each bounce the integrator takes the specular
branch with probability ``specularness``; ``roughness`` blends the mirror
direction toward the diffuse one.

Example:
    >>> from pathtracer.core.color import Color
    >>> from pathtracer.materials.material import Material
    >>> light = Material(albedo=Color.black(), emissive=Color(1.0, 0.9, 0.7),
    ...                  emissive_strength=20.0)
    >>> light.emission
    Color(r=20.0, g=18.0, b=14.0)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pathtracer.core.color import Color


def _clamp01(value: float) -> float:
    return min(max(float(value), 0.0), 1.0)


@dataclass(frozen=True, slots=True)
class Material:
    """Immutable shading parameters.

    Scalar parameters are clamped on construction rather than rejected:
    ``roughness`` and ``specularness`` to [0, 1], ``emissive_strength``
    to [0, inf).

    Attributes:
        albedo: Diffuse reflectance color.
        emissive: Self-luminance color.
        specular: Tint applied to specular bounces.
        emissive_strength: Intensity multiplier for ``emissive``.
        roughness: Blend factor from mirror toward diffuse direction.
        specularness: Probability of taking a specular bounce.
    """

    albedo: Color
    emissive: Color = field(default_factory=Color.black)
    specular: Color = field(default_factory=Color.white)
    emissive_strength: float = 0.0
    roughness: float = 1.0
    specularness: float = 0.0

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store the clamped values
        object.__setattr__(self, "emissive_strength", max(float(self.emissive_strength), 0.0))
        object.__setattr__(self, "roughness", _clamp01(self.roughness))
        object.__setattr__(self, "specularness", _clamp01(self.specularness))

    @property
    def emission(self) -> Color:
        """Emitted radiance, ``emissive * emissive_strength``."""
        return self.emissive * self.emissive_strength

    def to_dict(self) -> dict[str, Any]:
        return {
            "albedo": list(self.albedo.to_tuple()),
            "emissive": list(self.emissive.to_tuple()),
            "specular": list(self.specular.to_tuple()),
            "emissive_strength": self.emissive_strength,
            "roughness": self.roughness,
            "specularness": self.specularness,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Material:
        """Build a material from its dictionary form.

        Missing keys fall back to the dataclass defaults; a missing albedo
        defaults to mid grey.
        """
        albedo = data.get("albedo", [0.5, 0.5, 0.5])
        emissive = data.get("emissive", [0.0, 0.0, 0.0])
        specular = data.get("specular", [1.0, 1.0, 1.0])
        return cls(
            albedo=Color(albedo[0], albedo[1], albedo[2]),
            emissive=Color(emissive[0], emissive[1], emissive[2]),
            specular=Color(specular[0], specular[1], specular[2]),
            emissive_strength=data.get("emissive_strength", 0.0),
            roughness=data.get("roughness", 1.0),
            specularness=data.get("specularness", 0.0),
        )
