"""Command that renders the demo scene into a window."""

from __future__ import annotations

import argparse
import math
import sys
import time
from typing import Iterator, Sequence

from raytracer.camera import Camera
from raytracer.renderer import RenderWindow
from raytracer.scene_builder import build_demo_scene

_PRESETS = {
    "default": (100, 100),
    "debug": (200, 113),
    "release": (800, 450),
}


def progress_rows(screen_height: int, step: int = 5) -> Iterator[tuple[int, int, int]]:
    """Yield (start_row, end_row, percent_complete) for each band of rows."""
    if step <= 0:
        raise ValueError("step must be positive")
    start = 0
    while True:
        end = start + step
        done = end >= screen_height
        if done:
            end = screen_height
        percent = math.floor(end / screen_height * 100.0 + 0.5)
        yield start, end, percent
        if done:
            return
        start = end


def run(screen_width: int = 100, screen_height: int = 100) -> None:
    """Render the demo scene band by band until the window is closed."""
    with RenderWindow(screen_width, screen_height) as window:
        camera = Camera(screen_width, screen_height)
        scene = build_demo_scene()
        bands = progress_rows(screen_height)
        rendering = True
        while not window.quit_requested():
            if not rendering:
                time.sleep(0.01)
                continue
            start, end, percent = next(bands)
            sys.stdout.write(f"\r{percent}%")
            sys.stdout.flush()
            camera.render_section(window.set_pixel, scene, 0, start, screen_width, end)
            window.update()
            if end >= screen_height:
                rendering = False
                sys.stdout.write("\rRender complete\n")
                sys.stdout.flush()
    sys.stdout.write("\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render the demo scene.")
    parser.add_argument("--preset", choices=sorted(_PRESETS), default="default")
    parser.add_argument("--width", type=int)
    parser.add_argument("--height", type=int)
    args = parser.parse_args(argv)
    width, height = _PRESETS[args.preset]
    if args.width is not None:
        width = args.width
    if args.height is not None:
        height = args.height
    if width <= 0 or height <= 0:
        parser.error("width and height must be positive")
    run(width, height)
    return 0


if __name__ == "__main__":
    sys.exit(main())