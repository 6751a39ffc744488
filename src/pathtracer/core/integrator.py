"""Path tracing integrator for Monte Carlo light transport.

This module holds the pure rendering functions. They take the scene, the
render settings and a random generator explicitly, so they can be tested
without starting the threaded renderer.

The path tracer is unidirectional with a fixed bounce budget:
    - Each bounce takes a specular branch with probability ``specularness``,
      otherwise a diffuse branch
    - Roughness^2 blends the mirror direction toward the diffuse direction
    - Emission is accumulated weighted by the path throughput
    - Paths are truncated after ``max_bounces`` even if they still carry
      energy (no Russian roulette), which biases low bounce counts dark

Example:
    >>> import numpy as np
    >>> from pathtracer.core.integrator import render_scanline
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>> from pathtracer.settings import RenderSettings
    >>> scene = create_cornell_box_scene()
    >>> row = render_scanline(scene, 0, np.random.default_rng(1), RenderSettings())
"""

from __future__ import annotations

import math

import numpy as np

from pathtracer.core.color import DEFAULT_GAMMA, Color, mix
from pathtracer.core.ray import Ray
from pathtracer.core.vector import Vector3, lerp, random_unit_vector, reflect
from pathtracer.scene.scene import Scene, trace_closest
from pathtracer.settings import RenderSettings

# =============================================================================
# Rendering Constants
# =============================================================================

# Offset along the normal for the next ray origin to avoid self-intersection
RAY_EPSILON = 0.01


# =============================================================================
# Path Tracing Core
# =============================================================================


def trace_pixel(
    scene: Scene,
    ray: Ray,
    rng: np.random.Generator,
    settings: RenderSettings,
) -> Color:
    """Trace a single path through the scene.

    The ray is advanced in place from bounce to bounce. A ray that escapes
    the scene ends the path; escaping contributes no light.

    Args:
        scene: The scene to trace against.
        ray: The camera ray. Modified in place.
        rng: Random generator owned by the calling worker.
        settings: Supplies the bounce budget and ray length bounds.

    Returns:
        The estimated radiance for this path sample.
    """
    color = Color.black()
    throughput = Color.white()

    for _ in range(settings.max_bounces):
        hit = trace_closest(scene, ray, settings.min_ray_length, settings.max_ray_length)
        if not hit.did_hit:
            break

        material = hit.material
        normal = hit.normal

        ray.origin = ray.at(hit.distance) + normal * RAY_EPSILON

        use_specular = rng.random() < material.specularness
        diffuse_dir = (normal + random_unit_vector(rng)).normalized()
        specular_dir = reflect(ray.direction, normal)
        specular_dir = lerp(specular_dir, diffuse_dir, material.roughness * material.roughness)
        ray.direction = specular_dir if use_specular else diffuse_dir

        color = color + material.emission * throughput
        throughput = throughput * (material.specular if use_specular else material.albedo)

    return color


# =============================================================================
# Camera
# =============================================================================


def camera_distance(field_of_view: float) -> float:
    """Distance from the camera to the image plane for a field of view in degrees."""
    return 1.0 / math.tan(math.radians(field_of_view) * 0.5)


def camera_ray(
    x: int,
    y: int,
    width: int,
    height: int,
    distance: float,
    rng: np.random.Generator,
) -> Ray:
    """Generate a jittered camera ray through pixel (x, y).

    The pixel center is jittered by U(-0.5, 0.5) on both axes (box filter),
    mapped to [-1, 1] with row 0 at the top of the image, and the vertical
    axis is divided by the aspect ratio. The ray starts at the origin and
    passes through (u, v, distance).

    Args:
        x: Pixel column (0 = left).
        y: Pixel row (0 = top).
        width: Image width in pixels.
        height: Image height in pixels.
        distance: Camera-to-image-plane distance, see camera_distance().
        rng: Random generator owned by the calling worker.

    Returns:
        A new camera ray.
    """
    u = (x + rng.random() - 0.5) / width
    v = (y + rng.random() - 0.5) / height

    v = 1.0 - v

    u = u * 2.0 - 1.0
    v = v * 2.0 - 1.0

    v /= width / height

    return Ray(Vector3.zero(), Vector3(u, v, distance))


def render_scanline(
    scene: Scene,
    y: int,
    rng: np.random.Generator,
    settings: RenderSettings,
) -> list[Color]:
    """Render one row of the image.

    Samples are combined with a running mean, mix(previous, sample, 1/(i+1)),
    which equals the arithmetic mean of all samples taken so far.

    Args:
        scene: The scene to render.
        y: Row index (0 = top).
        rng: Random generator owned by the calling worker.
        settings: Render settings (resolution, samples, field of view...).

    Returns:
        The linear (not post-processed) color of every pixel in the row.
    """
    width = settings.image_width
    height = settings.image_height
    distance = camera_distance(settings.field_of_view)

    row: list[Color] = []
    for x in range(width):
        output = Color.black()
        for i in range(settings.samples_per_pixel):
            ray = camera_ray(x, y, width, height, distance, rng)
            sample = trace_pixel(scene, ray, rng, settings)
            output = mix(output, sample, 1.0 / (i + 1))
        row.append(output)
    return row


# =============================================================================
# Post-processing
# =============================================================================


def apply_post_processing(
    color: Color,
    exposure: float,
    gamma: float = DEFAULT_GAMMA,
) -> Color:
    """Convert a linear HDR color to a display color.

    The order is fixed: exposure, then ACES tone mapping (clamped to
    [0, 1]), then gamma correction.

    Args:
        color: Linear radiance.
        exposure: Linear multiplier applied first.
        gamma: Display gamma.

    Returns:
        The display color with channels in [0, 1].
    """
    return (color * exposure).tone_map_aces().clamped().gamma_corrected(gamma)
