"""Image export utilities for rendered images.

Supported formats:
    - PPM (ASCII Netpbm "P3", the renderer's native output)
    - PNG (8-bit via Pillow)

The image buffer already holds post-processed display values in [0, 1];
export only quantizes them: each channel becomes floor(clamp(c) * 255).

Both writers report failure as a False return value instead of raising, so a
failed save never invalidates the in-memory image.

Example:
    >>> from pathtracer.preview.export import save_ppm
    >>> save_ppm(image, "renders", "cornell_box")
    True
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

from pathtracer.preview.image import Image

logger = logging.getLogger(__name__)

PPM_MAGIC = "P3"
PPM_MAX_VALUE = 255


def image_to_uint8(image: Image) -> npt.NDArray[np.uint8]:
    """Quantize an image to 8 bits per channel.

    Args:
        image: The image to convert.

    Returns:
        Array of shape (height, width, 3) with dtype uint8.
    """
    data = np.clip(image.to_numpy(), 0.0, 1.0)
    return np.floor(data * PPM_MAX_VALUE).astype(np.uint8)


def ppm_path(directory: str | Path, file_name: str) -> Path:
    """Resolve the output path, appending ``.ppm`` unless the name already ends in it.

    Dots elsewhere in the name are kept, so ``render.v2`` becomes
    ``render.v2.ppm``.

    Raises:
        ValueError: If the resolved path has an empty name.
    """
    path = Path(directory) / file_name
    if path.suffix.lower() != ".ppm":
        path = path.with_name(path.name + ".ppm")
    return path


def save_ppm(image: Image, directory: str | Path, file_name: str) -> bool:
    """Save an image as an ASCII PPM (P3) file.

    The file holds the magic line, "<width> <height>", the max value 255,
    and then one "<r> <g> <b>" line per pixel in row-major order starting at
    row 0. The directory is created if it does not exist.

    Args:
        image: The image to save.
        directory: Output directory.
        file_name: Output file name; ``.ppm`` is appended unless present.

    Returns:
        True when saved successfully, False on failure.
    """
    pixels = image_to_uint8(image).reshape(-1, 3)

    lines = [PPM_MAGIC, f"{image.width} {image.height}", str(PPM_MAX_VALUE)]
    lines.extend(f"{r} {g} {b}" for r, g, b in pixels.tolist())

    try:
        path = ppm_path(directory, file_name)
    except ValueError as e:
        logger.error("Invalid PPM output location %r / %r: %s", str(directory), file_name, e)
        return False

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="ascii")
    except OSError as e:
        logger.error("Failed to write PPM file %s: %s", path, e)
        return False

    logger.info("Saved %dx%d image to %s", image.width, image.height, path)
    return True


def save_png(image: Image, filepath: str | Path) -> bool:
    """Save an image as an 8-bit PNG file.

    Args:
        image: The image to save.
        filepath: Output file path (should end in .png).

    Returns:
        True when saved successfully, False on failure.
    """
    path = Path(filepath)

    try:
        pil_image = PILImage.fromarray(image_to_uint8(image))
        path.parent.mkdir(parents=True, exist_ok=True)
        pil_image.save(path)
    except (OSError, ValueError) as e:
        logger.error("Failed to write PNG file %s: %s", path, e)
        return False

    logger.info("Saved %dx%d image to %s", image.width, image.height, path)
    return True
