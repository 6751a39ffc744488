"""Tests for the Cornell box reference scene.

Tests cover:
- Primitive counts and layout
- Light and wall materials
- Custom parameters
- Rays from the camera staying inside the box
"""

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.scene.cornell_box import CornellBoxParams, create_cornell_box_scene
from pathtracer.scene.scene import trace_closest


class TestCornellBoxScene:
    """Tests for create_cornell_box_scene()."""

    def test_primitive_counts(self):
        """Test that the box has 6 quads and 3 spheres."""
        scene = create_cornell_box_scene()
        quads = [p for p in scene if isinstance(p, Quad)]
        spheres = [p for p in scene if isinstance(p, Sphere)]

        assert len(scene) == 9
        assert len(quads) == 6
        assert len(spheres) == 3

    def test_single_emitter(self):
        """Test that only the ceiling light emits."""
        scene = create_cornell_box_scene()
        emitters = [p for p in scene if p.material.emissive_strength > 0.0]

        assert len(emitters) == 1
        light = emitters[0]
        assert light.material.emissive == Color(1.0, 0.9, 0.7)
        assert light.material.emissive_strength == 20.0

    def test_spheres_rest_near_floor(self):
        scene = create_cornell_box_scene()
        spheres = [p for p in scene if isinstance(p, Sphere)]

        assert sorted(s.center.x for s in spheres) == [-9.0, 0.0, 9.0]
        for sphere in spheres:
            assert sphere.radius == 3.0
            assert sphere.center.y == -9.5
            assert sphere.center.z == 30.0

    def test_wall_colors(self):
        """Test that the left wall is red and the right wall green."""
        scene = create_cornell_box_scene()
        left = trace_closest(scene, Ray(Vector3(0.0, 0.0, 30.0), Vector3(-1.0, 0.0, 0.0)), 0.01, 10000.0)
        right = trace_closest(scene, Ray(Vector3(0.0, 0.0, 30.0), Vector3(1.0, 0.0, 0.0)), 0.01, 10000.0)

        assert left.albedo == Color(0.7, 0.1, 0.1)
        assert right.albedo == Color(0.1, 0.7, 0.1)

    def test_custom_params(self):
        params = CornellBoxParams(light_intensity=5.0, left_wall_color=(0.1, 0.1, 0.7))
        scene = create_cornell_box_scene(params)
        emitters = [p for p in scene if p.material.emissive_strength > 0.0]

        assert emitters[0].material.emissive_strength == 5.0
        left = trace_closest(scene, Ray(Vector3(0.0, 0.0, 30.0), Vector3(-1.0, 0.0, 0.0)), 0.01, 10000.0)
        assert left.albedo == Color(0.1, 0.1, 0.7)

    def test_rays_toward_back_are_enclosed(self):
        """Test that every direction from the box center into +Z hits something.

        The box is open toward the camera, so only the far hemisphere is closed.
        """
        scene = create_cornell_box_scene()
        rng = np.random.default_rng(5)
        origin = Vector3(0.0, 0.0, 30.0)

        for _ in range(100):
            d = Vector3(rng.random() * 2.0 - 1.0, rng.random() * 2.0 - 1.0, rng.random())
            if d.magnitude < 1e-3:
                continue
            assert trace_closest(scene, Ray(origin, d), 0.01, 10000.0).did_hit
