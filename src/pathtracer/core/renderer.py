"""Parallel scanline renderer.

The Renderer owns the scene and the output image and drives a full frame:

1. Every row index 0..height-1 is pushed into a thread-safe queue.
2. A fixed pool of worker threads (one per logical CPU by default) is
   started once. Each worker owns a NumPy random generator spawned from a
   single SeedSequence, so no generator is ever shared between threads.
3. Workers repeatedly take a row (``get_nowait`` either returns a row or
   raises ``queue.Empty``), render it, post-process it and write it into
   the image under the image lock.
4. The pool is joined once; rows finish in no particular order.

The scene is locked before workers start and is then only read, so
traversal needs no synchronization. A scanline that fails is logged and left
black; it never aborts the frame.

Example:
    >>> from pathtracer.core.renderer import Renderer
    >>> from pathtracer.scene.cornell_box import create_cornell_box_scene
    >>> from pathtracer.settings import RenderSettings
    >>>
    >>> renderer = Renderer(RenderSettings(image_width=64, image_height=36),
    ...                     create_cornell_box_scene(), seed=7)
    >>> image = renderer.render()
    >>> renderer.write_output()
    True
"""

from __future__ import annotations

import logging
import os
import queue
import threading
import time
from collections.abc import Callable

import numpy as np

from pathtracer.core.color import Color
from pathtracer.core.integrator import (
    apply_post_processing,
    render_scanline,
    trace_pixel,
)
from pathtracer.core.ray import Ray
from pathtracer.geometry.primitive import Primitive
from pathtracer.preview.export import save_ppm
from pathtracer.preview.image import Image
from pathtracer.scene.scene import Scene
from pathtracer.settings import RenderSettings

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
ProgressCallback = Callable[[int, int], None]

# Progress is logged each time completion crosses a multiple of this percentage
PROGRESS_LOG_STEP = 5


class Renderer:
    """Multi-threaded path tracing renderer.

    Attributes:
        settings: The render settings.
        scene: The scene being rendered.
        image: The output image (replaced by a fresh one on every render).
        num_workers: Number of worker threads used by render().
    """

    def __init__(
        self,
        settings: RenderSettings,
        scene: Scene | None = None,
        *,
        num_workers: int | None = None,
        seed: int | None = None,
        progress_callback: ProgressCallback | None = None,
    ) -> None:
        """Initialize the renderer.

        Args:
            settings: Render settings (resolution, sampling, camera, output).
            scene: Scene to render. An empty scene is created if omitted.
            num_workers: Worker thread count. Defaults to the number of
                logical processors.
            seed: Seed for the per-worker generators. None draws fresh
                entropy, so runs are not reproducible.
            progress_callback: Called after every completed row with
                (rows_completed, total_rows). Exceptions it raises are
                logged and do not stop the render.

        Raises:
            ValueError: If num_workers is less than 1.
        """
        if num_workers is not None and num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")

        self.settings = settings
        self.scene = scene if scene is not None else Scene()
        self.image = Image(settings.image_width, settings.image_height)
        self.num_workers = num_workers or os.cpu_count() or 1
        self._seed = seed
        self._progress_callback = progress_callback

        self._progress_lock = threading.Lock()
        self._rows_done = 0
        self._last_logged_percentage = 0
        self._start_time = 0.0

    def add_primitive(self, primitive: Primitive) -> None:
        """Append a primitive to the scene. Only allowed before render()."""
        self.scene.add_primitive(primitive)

    # =========================================================================
    # Integrator entry points bound to this renderer's scene and settings
    # =========================================================================

    def trace_pixel(self, ray: Ray, rng: np.random.Generator) -> Color:
        """Trace one path. See pathtracer.core.integrator.trace_pixel."""
        return trace_pixel(self.scene, ray, rng, self.settings)

    def render_scanline(self, y: int, rng: np.random.Generator) -> list[Color]:
        """Render one row of linear colors. See integrator.render_scanline."""
        return render_scanline(self.scene, y, rng, self.settings)

    def apply_post_processing(self, color: Color) -> Color:
        """Apply exposure, ACES tone mapping and gamma with this renderer's settings."""
        return apply_post_processing(color, self.settings.exposure, self.settings.gamma)

    # =========================================================================
    # Frame rendering
    # =========================================================================

    def render(self) -> Image:
        """Render the full frame and block until every worker has finished.

        Returns:
            The rendered image (also available as ``self.image``).
        """
        width = self.settings.image_width
        height = self.settings.image_height

        self.scene.lock()
        self.image = Image(width, height)
        self._rows_done = 0
        self._last_logged_percentage = 0

        rows: queue.Queue[int] = queue.Queue()
        for y in range(height):
            rows.put(y)

        seeds = np.random.SeedSequence(self._seed).spawn(self.num_workers)
        workers = [
            threading.Thread(
                target=self._worker,
                args=(rows, np.random.default_rng(seed)),
                name=f"render-worker-{i}",
                daemon=True,
            )
            for i, seed in enumerate(seeds)
        ]

        logger.info(
            "Rendering %dx%d, %d spp, %d bounces, %d primitives on %d workers",
            width,
            height,
            self.settings.samples_per_pixel,
            self.settings.max_bounces,
            len(self.scene),
            len(workers),
        )

        self._start_time = time.perf_counter()
        for worker in workers:
            worker.start()
        for worker in workers:
            worker.join()

        logger.info("Render finished in %.2fs", time.perf_counter() - self._start_time)
        return self.image

    def _worker(self, rows: queue.Queue[int], rng: np.random.Generator) -> None:
        while True:
            try:
                y = rows.get_nowait()
            except queue.Empty:
                return

            try:
                line = render_scanline(self.scene, y, rng, self.settings)
                self.image.set_row(y, [self.apply_post_processing(c) for c in line])
            except Exception:
                logger.exception("Failed to render scanline %d", y)
            finally:
                self._row_finished()

    def _row_finished(self) -> None:
        total = self.settings.image_height
        with self._progress_lock:
            self._rows_done += 1
            done = self._rows_done

            # Ceiling of the completed percentage, in integer arithmetic
            percentage = -(-done * 100 // total)
            if percentage % PROGRESS_LOG_STEP == 0 and percentage > self._last_logged_percentage:
                self._last_logged_percentage = percentage
                logger.info(
                    "Progress: %d%% - took %.1f seconds",
                    percentage,
                    time.perf_counter() - self._start_time,
                )

            if self._progress_callback is not None:
                try:
                    self._progress_callback(done, total)
                except Exception:
                    logger.exception("Progress callback failed after row %d of %d", done, total)

    # =========================================================================
    # Output
    # =========================================================================

    def write_output(self) -> bool:
        """Save the image as a PPM file in the configured location.

        Returns:
            True when saved successfully, False on failure.
        """
        return save_ppm(self.image, self.settings.save_directory, self.settings.file_name)

    def __repr__(self) -> str:
        return (
            f"Renderer(width={self.settings.image_width}, height={self.settings.image_height}, "
            f"primitives={len(self.scene)}, workers={self.num_workers})"
        )
