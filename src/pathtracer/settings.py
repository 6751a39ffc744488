"""Render configuration.

Settings are read from a flat key/value source (a YAML mapping on disk).
Lookups never raise: a missing or malformed key is logged and replaced by a
zero value, so a bad configuration produces a degenerate render rather than
a crash.

Recognized keys:

    MIN_RAY_LENGTH     float  minimum hit distance (anti self-intersection)
    MAX_RAY_LENGTH     float  hits beyond this are misses
    MAX_BOUNCES        int    path length cap
    SAMPLES_PER_PIXEL  int    Monte Carlo samples per pixel
    EXPOSURE           float  linear multiplier before tone mapping
    FIELD_OF_VIEW      float  horizontal field of view in degrees
    IMAGE_WIDTH        int    output width in pixels
    IMAGE_HEIGHT       int    output height in pixels
    SAVE_DIRECTORY     str    output directory (created if absent)
    FILE_NAME          str    output file name

Example:
    >>> from pathtracer.settings import RenderSettings, load_settings
    >>> settings = RenderSettings.from_settings(load_settings("render.yaml"))
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


class Settings:
    """Key/value configuration source with forgiving typed lookups."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def __contains__(self, key: str) -> bool:
        return key in self._values

    def get_string(self, key: str) -> str | None:
        """Look up a value as a string.

        Returns:
            The value, or None (after logging an error) if the key is missing.
        """
        value = self._values.get(key)
        if value is None:
            logger.error("Configuration does not contain a value for key %r", key)
            return None
        return str(value)

    def get_int(self, key: str) -> int:
        """Look up a value as an integer, defaulting to 0 on failure."""
        value = self.get_string(key)
        if value is None:
            return 0
        try:
            return int(value.strip())
        except ValueError:
            logger.error("Failed parsing %r value %r as an integer", key, value)
            return 0

    def get_float(self, key: str) -> float:
        """Look up a value as a float, defaulting to 0.0 on failure."""
        value = self.get_string(key)
        if value is None:
            return 0.0
        try:
            return float(value.strip())
        except ValueError:
            logger.error("Failed parsing %r value %r as a float", key, value)
            if "," in value:
                logger.error("A common mistake is using commas instead of decimal points")
            return 0.0


def load_settings(path: str | Path) -> Settings:
    """Load a settings file.

    The file must hold a single YAML mapping. An unreadable file, invalid
    YAML, or a document that is not a mapping is logged and yields empty
    settings.

    Args:
        path: Path to the YAML settings file.

    Returns:
        The loaded Settings.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as e:
        logger.error("Could not read settings file %s: %s", path, e)
        return Settings()
    except yaml.YAMLError as e:
        logger.error("Invalid YAML in settings file %s: %s", path, e)
        return Settings()

    if data is None:
        data = {}
    if not isinstance(data, dict):
        logger.error("Settings file %s must contain a mapping, got %s", path, type(data).__name__)
        return Settings()

    return Settings(data)


@dataclass(frozen=True)
class RenderSettings:
    """Typed render configuration.

    Attributes:
        min_ray_length: Minimum hit distance.
        max_ray_length: Maximum hit distance; further hits are misses.
        max_bounces: Fixed number of bounces per path.
        samples_per_pixel: Samples averaged per pixel.
        exposure: Linear multiplier applied before tone mapping.
        field_of_view: Field of view in degrees.
        image_width: Output width in pixels.
        image_height: Output height in pixels.
        save_directory: Output directory.
        file_name: Output file name.
        gamma: Display gamma used by post-processing.
    """

    min_ray_length: float = 0.01
    max_ray_length: float = 10000.0
    max_bounces: int = 4
    samples_per_pixel: int = 8
    exposure: float = 1.0
    field_of_view: float = 90.0
    image_width: int = 320
    image_height: int = 180
    save_directory: str = "."
    file_name: str = "output"
    gamma: float = 2.2

    @classmethod
    def from_settings(cls, settings: Settings) -> RenderSettings:
        """Read every render key from a Settings source.

        Missing keys resolve to zero (or an empty string for paths), as
        logged by the Settings lookups.
        """
        return cls(
            min_ray_length=settings.get_float("MIN_RAY_LENGTH"),
            max_ray_length=settings.get_float("MAX_RAY_LENGTH"),
            max_bounces=settings.get_int("MAX_BOUNCES"),
            samples_per_pixel=settings.get_int("SAMPLES_PER_PIXEL"),
            exposure=settings.get_float("EXPOSURE"),
            field_of_view=settings.get_float("FIELD_OF_VIEW"),
            image_width=settings.get_int("IMAGE_WIDTH"),
            image_height=settings.get_int("IMAGE_HEIGHT"),
            save_directory=settings.get_string("SAVE_DIRECTORY") or "",
            file_name=settings.get_string("FILE_NAME") or "",
        )
