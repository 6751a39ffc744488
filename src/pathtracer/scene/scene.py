"""Scene container and closest-hit traversal.

The scene is an insertion-ordered, append-only list of primitives. It is
built once before rendering and then shared read-only by every render
worker; once a renderer locks it, further additions raise.

Traversal is a linear scan: every ray is tested against every primitive,
so cost grows with primitive count.

Example:
    >>> from pathtracer.scene.scene import Scene, trace_closest
    >>> scene = Scene()
    >>> scene.add_primitive(sphere)
    >>> hit = trace_closest(scene, ray, 0.01, 10000.0)
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import Any

import yaml

from pathtracer.core.ray import Ray
from pathtracer.geometry.hit import HitInfo
from pathtracer.geometry.primitive import (
    Primitive,
    intersect,
    is_primitive,
    primitive_from_dict,
)

logger = logging.getLogger(__name__)


class Scene:
    """Ordered collection of primitives.

    Attributes:
        primitives: Tuple view of the primitives in insertion order.
        locked: True once rendering has started; the scene is then read-only.
    """

    def __init__(self, primitives: list[Primitive] | None = None) -> None:
        self._primitives: list[Primitive] = []
        self._locked = False
        for primitive in primitives or []:
            self.add_primitive(primitive)

    def add_primitive(self, primitive: Primitive) -> None:
        """Append a primitive to the scene.

        Args:
            primitive: A Sphere or Quad.

        Raises:
            TypeError: If the object is not a primitive.
            RuntimeError: If the scene has been locked for rendering.
        """
        if not is_primitive(primitive):
            raise TypeError(f"Unsupported primitive type: {type(primitive).__name__}")
        if self._locked:
            raise RuntimeError("Cannot add primitives to a scene that is being rendered")
        self._primitives.append(primitive)

    def lock(self) -> None:
        """Mark the scene read-only. Called by the renderer before workers start."""
        self._locked = True

    @property
    def locked(self) -> bool:
        return self._locked

    @property
    def primitives(self) -> tuple[Primitive, ...]:
        return tuple(self._primitives)

    def __len__(self) -> int:
        return len(self._primitives)

    def __iter__(self) -> Iterator[Primitive]:
        return iter(self._primitives)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_dict(self) -> dict[str, Any]:
        """Export the scene to a dictionary (for YAML/JSON serialization)."""
        return {"primitives": [p.to_dict() for p in self._primitives]}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Scene:
        """Build a scene from a dictionary with a ``primitives`` list.

        Raises:
            ValueError: If a primitive entry has an unknown type or is
                missing or mistyping a required field.
        """
        entries = data.get("primitives") or []
        try:
            primitives = [primitive_from_dict(entry) for entry in entries]
        except (KeyError, TypeError, AttributeError, IndexError) as e:
            raise ValueError(f"Invalid primitive entry: {e!r}") from e
        return cls(primitives)

    def __repr__(self) -> str:
        return f"Scene(primitives={len(self._primitives)}, locked={self._locked})"


def trace_closest(
    scene: Scene,
    ray: Ray,
    min_distance: float,
    max_distance: float,
) -> HitInfo:
    """Find the closest primitive hit along a ray.

    Each primitive test is bounded by the best distance found so far, so a
    hit only replaces the current one when it is strictly closer.

    Args:
        scene: The scene to trace against.
        ray: The ray to trace.
        min_distance: Exclusive lower bound on hit distance.
        max_distance: Exclusive upper bound on hit distance; beyond it the
            ray counts as a miss.

    Returns:
        The closest HitInfo, or a miss with ``distance == max_distance``.
    """
    closest = HitInfo(distance=max_distance)
    for primitive in scene:
        hit = intersect(primitive, ray, min_distance, closest.distance)
        if hit.did_hit:
            closest = hit
    return closest


def load_scene(path: str | Path) -> Scene:
    """Load a scene description from a YAML file.

    Args:
        path: Path to a YAML document with a top-level ``primitives`` list.

    Returns:
        The loaded scene.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is malformed.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as fh:
        try:
            data = yaml.safe_load(fh)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid scene file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Scene file {path} must contain a mapping")

    try:
        scene = Scene.from_dict(data)
    except ValueError as e:
        raise ValueError(f"Invalid scene file {path}: {e}") from e
    logger.info("Loaded %d primitives from %s", len(scene), path)
    return scene
