#!/usr/bin/env python3
"""Astronum - Standalone entry point.

Prints "success" on stdout once the captcha is solved, so a parent process
can embed the game and wait for that line.
"""

import argparse
import sys

import pygame

from games.Astronum import config, game_info
from minigame.input.sources.pygame_source import PygameInputSource


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=game_info.DESCRIPTION)
    for arg in game_info.ARGUMENTS:
        options = {k: v for k, v in arg.items() if k != "name"}
        parser.add_argument(arg["name"], **options)
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    width = args.width or config.SCREEN_WIDTH
    height = args.height or config.SCREEN_HEIGHT

    pygame.init()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(game_info.NAME)

    source = PygameInputSource((width, height))
    game = game_info.get_game_mode(source, **vars(args))
    clock = pygame.time.Clock()

    running = True
    while running:
        dt = clock.tick(config.FPS) / 1000.0
        source.update(dt)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

        game.update(dt)
        game.render(screen)
        pygame.display.flip()

    game.close()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
