"""Command-line entry point: the menu loop."""

from __future__ import annotations

import argparse
import logging

import pygame

from shadowgen.main_menu import MainMenu, MenuOption
from shadowgen.resources import load_resources
from shadowgen.start_screen import run_start_screen

log = logging.getLogger(__name__)

WINDOW_TITLE = "Who's That Pokemon"


def _parse_size(value: str) -> tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}") from None
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"invalid size: {value!r}")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="shadowgen", description="Who's That Pokemon menu.")
    parser.add_argument("--assets", default="Assets", help="directory holding the images")
    parser.add_argument(
        "--size", type=_parse_size, default=None,
        help="window size as WIDTHxHEIGHT (default: fullscreen)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the main menu until the user exits."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO)

    pygame.init()
    try:
        if args.size is None:
            screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
        else:
            screen = pygame.display.set_mode(args.size)
        pygame.display.set_caption(WINDOW_TITLE)
        resources = load_resources(args.assets, screen.get_size())
        menu = MainMenu()
        clock = pygame.time.Clock()

        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                if event.key == pygame.K_ESCAPE:
                    return 0
                if event.key == pygame.K_DOWN:
                    menu.select_next()
                elif event.key == pygame.K_UP:
                    menu.select_previous()
                elif event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                    if menu.selected is MenuOption.START:
                        log.info("Start selected")
                        resources.capture_menu_snapshot(menu, pygame.time.get_ticks() / 1000.0)
                        if run_start_screen(screen, resources, clock):
                            return 0
                    elif menu.selected is MenuOption.CREDITS:
                        log.info("Credits selected")
                    else:
                        return 0

            menu.draw(screen, resources, pygame.time.get_ticks() / 1000.0)
            pygame.display.flip()
            clock.tick(60)
    finally:
        pygame.quit()