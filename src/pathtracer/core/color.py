"""RGB color type with the display transforms used by post-processing.

Colors are linear RGB triples. Channels may exceed 1.0 before tone mapping
(emissive surfaces are typically much brighter than 1.0); after
``tone_map_aces`` and ``gamma_corrected`` they lie in [0, 1].

Example:
    >>> from pathtracer.core.color import Color
    >>> hdr = Color(4.0, 2.0, 0.5)
    >>> ldr = hdr.tone_map_aces().gamma_corrected(2.2)
"""

from __future__ import annotations

from dataclasses import dataclass

from pathtracer.core.vector import Vector3

# ACES filmic curve coefficients (Narkowicz fit)
ACES_A = 2.51
ACES_B = 0.03
ACES_C = 2.43
ACES_D = 0.59
ACES_E = 0.14

DEFAULT_GAMMA = 2.2


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def _aces(x: float) -> float:
    return _clamp01((x * (ACES_A * x + ACES_B)) / (x * (ACES_C * x + ACES_D) + ACES_E))


@dataclass(frozen=True, slots=True)
class Color:
    """A linear RGB color.

    Attributes:
        r: Red channel.
        g: Green channel.
        b: Blue channel.
    """

    r: float
    g: float
    b: float

    @classmethod
    def black(cls) -> Color:
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def white(cls) -> Color:
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def red(cls) -> Color:
        return cls(1.0, 0.0, 0.0)

    @classmethod
    def green(cls) -> Color:
        return cls(0.0, 1.0, 0.0)

    @classmethod
    def blue(cls) -> Color:
        return cls(0.0, 0.0, 1.0)

    @classmethod
    def purple(cls) -> Color:
        return cls(1.0, 0.0, 1.0)

    @classmethod
    def from_vector(cls, v: Vector3) -> Color:
        return cls(v.x, v.y, v.z)

    def to_vector(self) -> Vector3:
        return Vector3(self.r, self.g, self.b)

    def to_tuple(self) -> tuple[float, float, float]:
        return (self.r, self.g, self.b)

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __mul__(self, other: Color | float) -> Color:
        """Multiply channel-wise by a color, or scale by a number."""
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, other: float) -> Color:
        return Color(self.r * other, self.g * other, self.b * other)

    def clamped(self) -> Color:
        """Clamp every channel to [0, 1]."""
        return Color(_clamp01(self.r), _clamp01(self.g), _clamp01(self.b))

    def tone_map_aces(self) -> Color:
        """Apply the ACES filmic tone-mapping curve per channel.

        Computes (x(ax+b)) / (x(cx+d)+e) with a=2.51, b=0.03, c=2.43,
        d=0.59, e=0.14 and clamps the result to [0, 1].

        Returns:
            The tone-mapped color with channels in [0, 1].
        """
        return Color(_aces(self.r), _aces(self.g), _aces(self.b))

    def gamma_corrected(self, gamma: float = DEFAULT_GAMMA) -> Color:
        """Encode linear values for display: out = in^(1/gamma).

        Negative channels are clamped to zero first to avoid complex results.

        Args:
            gamma: Gamma value (default 2.2 for sRGB-like displays).

        Returns:
            The gamma-encoded color.
        """
        inv = 1.0 / gamma
        return Color(
            max(self.r, 0.0) ** inv,
            max(self.g, 0.0) ** inv,
            max(self.b, 0.0) ** inv,
        )


def mix(a: Color, b: Color, t: float) -> Color:
    """Linearly interpolate between colors a (t=0) and b (t=1)."""
    return Color(
        a.r + (b.r - a.r) * t,
        a.g + (b.g - a.g) * t,
        a.b + (b.b - a.b) * t,
    )
