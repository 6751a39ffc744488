"""Preview module for the image buffer, file output and visualization.

Components:
    image: Thread-safe flat RGB image buffer filled by the renderer
    export: ASCII PPM (P3) and PNG writers
    display: Matplotlib-based static preview

Example:
    >>> from pathtracer.preview import save_ppm, show_preview
    >>> renderer.render()
    >>> save_ppm(renderer.image, "renders", "cornell_box")
    >>> show_preview(renderer.image)
"""

from pathtracer.preview.display import show_preview
from pathtracer.preview.export import (
    image_to_uint8,
    ppm_path,
    save_png,
    save_ppm,
)
from pathtracer.preview.image import Image

__all__ = [
    "Image",
    "show_preview",
    "save_ppm",
    "save_png",
    "ppm_path",
    "image_to_uint8",
]
