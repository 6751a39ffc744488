"""Scene module for scene representation and ray-scene queries.

Components:
    scene: Append-only Scene container, closest-hit traversal, YAML loading
    cornell_box: Reference Cornell box scene used by the CLI

The scene is built once before rendering and shared read-only between the
render workers, so traversal needs no locking.
"""

from .cornell_box import CornellBoxParams, create_cornell_box_scene
from .scene import Scene, load_scene, trace_closest

__all__ = [
    "Scene",
    "trace_closest",
    "load_scene",
    "CornellBoxParams",
    "create_cornell_box_scene",
]
