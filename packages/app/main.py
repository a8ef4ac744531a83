"""TapQuest desktop entry point.

Runs the lib_tapquest scene sequence in a pygame window:
welcome -> countdown -> game -> leaderboard -> welcome.
"""

import argparse
import logging
import os
import sys
from pathlib import Path

import pygame
from lib_tapquest import GameConfig, build_manager, load_config

logger = logging.getLogger("tapquest")


def build_argument_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", type=Path, default=None, help="YAML config file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for option shuffling")
    parser.add_argument("--mute", action="store_true", help="Disable all sound")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def resolve_config(args: argparse.Namespace) -> GameConfig:
    if args.config is not None:
        if not args.config.exists():
            print(f"Config not found: {args.config}", file=sys.stderr)
            raise SystemExit(1)
        config = load_config(args.config)
    else:
        config = GameConfig()

    if args.seed is not None:
        config.seed = args.seed
    if args.mute:
        config.audio.enabled = False
    return config


def init_audio(enabled: bool) -> None:
    if not enabled:
        return
    try:
        pygame.mixer.init()
    except pygame.error as e:
        logger.warning("Audio unavailable, continuing without sound: %s", e)


def main(argv=None) -> int:
    args = build_argument_parser().parse_args(argv)
    configure_logging(args.verbose)
    config = resolve_config(args)

    os.environ.setdefault("SDL_VIDEO_CENTERED", "1")

    pygame.init()
    init_audio(config.audio.enabled)
    screen = pygame.display.set_mode((config.display.width, config.display.height))
    pygame.display.set_caption(config.display.title)
    clock = pygame.time.Clock()

    manager = build_manager(config)
    logger.info("TapQuest started (%dx%d)", config.display.width, config.display.height)

    running = True
    try:
        while running and manager.running:
            dt = clock.tick(config.display.fps) / 1000.0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                manager.handle_event(event)

            manager.update(dt)
            manager.render(screen)
            pygame.display.flip()
    finally:
        manager.shutdown()
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
