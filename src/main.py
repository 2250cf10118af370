from __future__ import annotations

import argparse
import logging
import sys

from flythrough import config
from flythrough.player import MoveIntent
from flythrough.world import World
from wireframe.app import App
from wireframe.time import FrameLoop


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Free-flying camera over a wireframe scene.")
    parser.add_argument("--seed", type=int, default=config.SEED, help="seed for the scattered boxes")
    parser.add_argument("--boxes", type=int, default=config.STATIC_BOX_COUNT, help="number of scattered boxes")
    parser.add_argument("--width", type=int, default=config.WIDTH)
    parser.add_argument("--height", type=int, default=config.HEIGHT)
    parser.add_argument("--debug", action="store_true", help="log at DEBUG level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    app = App(args.width, args.height, config.TITLE, background=config.BACKGROUND_COLOR)
    world = World(
        app.surface,
        lambda: MoveIntent.from_input(app.input),
        seed=args.seed,
        static_boxes=args.boxes,
    )
    # Mouse look lands between ticks; the next tick reads the latest view.
    app.input.on_look = world.look

    loop = FrameLoop(world.tick)
    last_fps_frame = 0
    elapsed = 0.0

    def present() -> None:
        nonlocal last_fps_frame, elapsed
        app.swap()
        elapsed += loop.clock.delta
        if elapsed >= 1.0:
            app.show_fps((loop.frames - last_fps_frame) / elapsed)
            last_fps_frame = loop.frames
            elapsed = 0.0

    try:
        loop.run(app.poll, present)
    finally:
        if loop.failed_frames:
            logging.getLogger(__name__).warning(
                "%d of %d frames failed", loop.failed_frames, loop.frames
            )
        app.shutdown()


if __name__ == "__main__":
    main()
