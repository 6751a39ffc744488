"""Fixed-size image buffer written by the render workers.

Pixels are stored row-major in a flat NumPy buffer of shape
(width * height, 3), row 0 at the top of the picture. The buffer is the only
mutable state shared between render workers, so every write goes through a
single lock. Out-of-range accesses are logged and ignored.

Example:
    >>> from pathtracer.core.color import Color
    >>> from pathtracer.preview.image import Image
    >>> image = Image(4, 2)
    >>> image.set_pixel(5, Color.red())
    True
    >>> image.get_pixel(5)
    Color(r=1.0, g=0.0, b=0.0)
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from pathtracer.core.color import Color

logger = logging.getLogger(__name__)


class Image:
    """RGB float image.

    Attributes:
        width: Horizontal resolution in pixels.
        height: Vertical resolution in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Create an all-black image.

        Args:
            width: Horizontal resolution (negative values are treated as 0).
            height: Vertical resolution (negative values are treated as 0).
        """
        self.width = max(int(width), 0)
        self.height = max(int(height), 0)
        self._data = np.zeros((self.width * self.height, 3), dtype=np.float64)
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return self.width * self.height

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self)

    def get_pixel(self, index: int) -> Color | None:
        """Read the pixel at a flat row-major index.

        Returns:
            The pixel color, or None (after logging an error) if the index
            is out of range.
        """
        if not self._in_range(index):
            logger.error("Pixel index %d out of range for %dx%d image", index, self.width, self.height)
            return None
        r, g, b = self._data[index]
        return Color(float(r), float(g), float(b))

    def set_pixel(self, index: int, color: Color) -> bool:
        """Write the pixel at a flat row-major index.

        Returns:
            True if written, False (after logging an error) if the index is
            out of range.
        """
        if not self._in_range(index):
            logger.error("Pixel index %d out of range for %dx%d image", index, self.width, self.height)
            return False
        with self._lock:
            self._data[index] = (color.r, color.g, color.b)
        return True

    def set_row(self, y: int, colors: Sequence[Color]) -> bool:
        """Write a full row of pixels in one locked operation.

        Args:
            y: Row index (0 = top).
            colors: Exactly ``width`` colors, left to right.

        Returns:
            True if written, False (after logging an error) if the row index
            or the number of colors is wrong.
        """
        if not 0 <= y < self.height:
            logger.error("Row %d out of range for %dx%d image", y, self.width, self.height)
            return False
        if len(colors) != self.width:
            logger.error("Row %d has %d pixels, expected %d", y, len(colors), self.width)
            return False
        if self.width == 0:
            return True
        start = y * self.width
        values = [(c.r, c.g, c.b) for c in colors]
        with self._lock:
            self._data[start : start + self.width] = values
        return True

    def fill(self, color: Color) -> None:
        """Set every pixel to one color."""
        with self._lock:
            self._data[:] = (color.r, color.g, color.b)

    @property
    def pixels(self) -> list[Color]:
        """All pixels as Colors, row-major from row 0."""
        with self._lock:
            data = self._data.tolist()
        return [Color(r, g, b) for r, g, b in data]

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Copy of the image as an array of shape (height, width, 3)."""
        with self._lock:
            return self._data.reshape(self.height, self.width, 3).copy()

    def __repr__(self) -> str:
        return f"Image(width={self.width}, height={self.height})"
