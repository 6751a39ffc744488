"""Command-line entry point: configure, build a scene, render, save.

Usage:
    pathtracer --config render.yaml [options]

Options:
    --config PATH     YAML settings file (see pathtracer.settings)
    --scene PATH      YAML scene file (default: built-in Cornell box)
    --workers N       Worker thread count (default: logical CPU count)
    --seed SEED       Seed for reproducible sampling
    --png PATH        Also save a PNG copy
    --preview         Show the result in a Matplotlib window
    --verbose         Log debug output

Example:
    pathtracer --config examples/render.yaml --workers 4 --seed 1
"""

from __future__ import annotations

import argparse
import logging
import sys

from pathtracer.core.renderer import Renderer
from pathtracer.scene.cornell_box import create_cornell_box_scene
from pathtracer.scene.scene import load_scene
from pathtracer.settings import RenderSettings, load_settings

logger = logging.getLogger("pathtracer")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="pathtracer",
        description="Render a scene with the CPU path tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        required=True,
        help="YAML settings file",
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="YAML scene file (default: built-in Cornell box)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker thread count (default: logical CPU count)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible sampling",
    )
    parser.add_argument(
        "--png",
        type=str,
        default=None,
        help="Also save a PNG copy to this path",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        0 on success, 1 if the scene could not be loaded or the output could
        not be written.
    """
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    settings = RenderSettings.from_settings(load_settings(args.config))

    if args.scene is not None:
        try:
            scene = load_scene(args.scene)
        except (OSError, ValueError) as e:
            logger.error("Could not load scene: %s", e)
            return 1
    else:
        scene = create_cornell_box_scene()

    renderer = Renderer(settings, scene, num_workers=args.workers, seed=args.seed)
    renderer.render()

    ok = renderer.write_output()
    if not ok:
        logger.error("Failed to write ppm file to disk")

    if args.png is not None:
        from pathtracer.preview.export import save_png

        ok = save_png(renderer.image, args.png) and ok

    if args.preview:
        from pathtracer.preview.display import show_preview

        show_preview(renderer.image)

    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
