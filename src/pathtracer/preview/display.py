"""Matplotlib-based preview display for rendered images.

The renderer stores display-ready values, so the preview shows the image
as-is without further tone mapping.

Example:
    >>> from pathtracer.preview.display import show_preview
    >>> renderer.render()
    >>> show_preview(renderer.image, title="Cornell box")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from matplotlib.figure import Figure

    from pathtracer.preview.image import Image


def show_preview(
    image: Image,
    *,
    title: str | None = None,
    figsize: tuple[float, float] = (8, 8),
    block: bool = True,
) -> Figure:
    """Display an image in a Matplotlib figure.

    Args:
        image: The rendered image to display.
        title: Custom title (default shows the resolution).
        figsize: Figure size in inches (width, height).
        block: Whether to block execution until the figure is closed.

    Returns:
        The Matplotlib figure.
    """
    import matplotlib.pyplot as plt

    display_image = np.clip(image.to_numpy(), 0.0, 1.0)

    fig, ax = plt.subplots(1, 1, figsize=figsize)
    ax.imshow(display_image)
    ax.axis("off")
    ax.set_title(title if title is not None else f"Render Preview - {image.width}x{image.height}")

    plt.tight_layout()
    plt.show(block=block)

    return fig
