"""Pytest configuration for path tracer tests.

Provides shared fixtures: a seeded random generator, common materials and a
factory for small render settings.
"""

import numpy as np
import pytest

from pathtracer.core.color import Color
from pathtracer.materials.material import Material
from pathtracer.settings import RenderSettings


@pytest.fixture
def rng():
    """A deterministic generator for tests that sample."""
    return np.random.default_rng(42)


@pytest.fixture
def diffuse_material():
    """A plain grey diffuse material."""
    return Material(albedo=Color(0.5, 0.5, 0.5))


@pytest.fixture
def light_material():
    """The warm emissive material used by the Cornell box light."""
    return Material(
        albedo=Color.black(),
        emissive=Color(1.0, 0.9, 0.7),
        emissive_strength=20.0,
    )


@pytest.fixture
def make_settings():
    """Factory for small render settings with overridable fields."""

    def _make(**overrides):
        values = {
            "min_ray_length": 0.01,
            "max_ray_length": 10000.0,
            "max_bounces": 4,
            "samples_per_pixel": 1,
            "exposure": 1.0,
            "field_of_view": 90.0,
            "image_width": 8,
            "image_height": 6,
            "save_directory": ".",
            "file_name": "test_output",
        }
        values.update(overrides)
        return RenderSettings(**values)

    return _make
