"""Cornell box reference scene.

Builds the demo scene rendered by the command-line tool: an open box seen
from the camera at the origin looking down +Z, lit by an emissive quad just
below the ceiling, with three diffuse spheres resting near the floor.

The box spans x and y in [-12.6, 12.6] and z in [25, 35]:
- Back wall, floor, ceiling: light grey diffuse
- Left wall: red diffuse
- Right wall: green diffuse
- Ceiling light: warm white emission, strength 20
- Spheres (radius 3): yellow (left), pink (center), teal (right)

Example:
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>> scene = create_cornell_box_scene()
    >>> len(scene)
    9
"""

from dataclasses import dataclass

from pathtracer.core.color import Color
from pathtracer.core.vector import Vector3
from pathtracer.geometry.quad import Quad
from pathtracer.geometry.sphere import Sphere
from pathtracer.materials.material import Material
from pathtracer.scene.scene import Scene


@dataclass
class CornellBoxParams:
    """Parameters for configuring the Cornell box scene.

    Attributes:
        light_intensity: Emissive strength of the ceiling light.
        light_color: Emissive color of the ceiling light.
        left_wall_color: Albedo of the left wall (red by default).
        right_wall_color: Albedo of the right wall (green by default).
        wall_color: Albedo of back wall, floor and ceiling.
    """

    light_intensity: float = 20.0
    light_color: tuple[float, float, float] = (1.0, 0.9, 0.7)
    left_wall_color: tuple[float, float, float] = (0.7, 0.1, 0.1)
    right_wall_color: tuple[float, float, float] = (0.1, 0.7, 0.1)
    wall_color: tuple[float, float, float] = (0.7, 0.7, 0.7)


# =============================================================================
# Cornell Box Constants
# =============================================================================

BOX_HALF_EXTENT = 12.6
BOX_NEAR_Z = 25.0
BOX_FAR_Z = 35.0

SPHERE_RADIUS = 3.0
SPHERE_Y = -9.5
SPHERE_Z = 30.0

YELLOW_SPHERE_ALBEDO = (0.9, 1.0, 0.3)
PINK_SPHERE_ALBEDO = (1.0, 0.2, 1.0)
TEAL_SPHERE_ALBEDO = (0.0, 0.8, 0.8)


def _diffuse(albedo: tuple[float, float, float]) -> Material:
    return Material(albedo=Color(*albedo))


def create_cornell_box_scene(params: CornellBoxParams | None = None) -> Scene:
    """Create the Cornell box scene.

    Args:
        params: Optional CornellBoxParams for customizing light and wall
            colors. If None, uses the defaults.

    Returns:
        A Scene with 6 quads (5 walls and the light) and 3 spheres.
    """
    if params is None:
        params = CornellBoxParams()

    e = BOX_HALF_EXTENT
    near = BOX_NEAR_Z
    far = BOX_FAR_Z

    wall_mat = _diffuse(params.wall_color)
    left_mat = _diffuse(params.left_wall_color)
    right_mat = _diffuse(params.right_wall_color)
    light_mat = Material(
        albedo=Color.black(),
        emissive=Color(*params.light_color),
        emissive_strength=params.light_intensity,
    )

    scene = Scene()

    # =========================================================================
    # Walls
    # =========================================================================

    # Back wall
    scene.add_primitive(
        Quad(
            Vector3(-e, -e, far),
            Vector3(e, -e, far),
            Vector3(e, e, far),
            Vector3(-e, e, far),
            wall_mat,
        )
    )

    # Floor, slightly above the back wall's lower edge
    scene.add_primitive(
        Quad(
            Vector3(-e, -12.45, far),
            Vector3(e, -12.45, far),
            Vector3(e, -12.45, near),
            Vector3(-e, -12.45, near),
            wall_mat,
        )
    )

    # Ceiling
    scene.add_primitive(
        Quad(
            Vector3(-e, 12.5, far),
            Vector3(e, 12.5, far),
            Vector3(e, 12.5, near),
            Vector3(-e, 12.5, near),
            wall_mat,
        )
    )

    # Left wall
    scene.add_primitive(
        Quad(
            Vector3(-12.5, -e, far),
            Vector3(-12.5, -e, near),
            Vector3(-12.5, e, near),
            Vector3(-12.5, e, far),
            left_mat,
        )
    )

    # Right wall
    scene.add_primitive(
        Quad(
            Vector3(12.5, -e, far),
            Vector3(12.5, -e, near),
            Vector3(12.5, e, near),
            Vector3(12.5, e, far),
            right_mat,
        )
    )

    # =========================================================================
    # Area Light (just below the ceiling)
    # =========================================================================

    scene.add_primitive(
        Quad(
            Vector3(-5.0, 12.4, 32.5),
            Vector3(5.0, 12.4, 32.5),
            Vector3(5.0, 12.4, 27.5),
            Vector3(-5.0, 12.4, 27.5),
            light_mat,
        )
    )

    # =========================================================================
    # Spheres
    # =========================================================================

    for x, albedo in (
        (-9.0, YELLOW_SPHERE_ALBEDO),
        (0.0, PINK_SPHERE_ALBEDO),
        (9.0, TEAL_SPHERE_ALBEDO),
    ):
        scene.add_primitive(
            Sphere(Vector3(x, SPHERE_Y, SPHERE_Z), SPHERE_RADIUS, _diffuse(albedo))
        )

    return scene
