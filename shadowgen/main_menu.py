"""Main menu: options, layout rules and drawing."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from shadowgen.resources import Resources

Color = tuple[int, int, int] | tuple[int, int, int, int]

RED = (230, 41, 55)
YELLOW = (253, 249, 0)
GRAY = (130, 130, 130)
LIGHTGRAY = (200, 200, 200)
GREEN = (0, 228, 48)
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

MENU_ITEMS = ("Start", "Credits", "Exit")
VERSION_TEXT = "ShadowGenv2.0"
CONTROL_NOTES_TEXT = "[ Press ENTER to select ]"


class MenuOption(enum.IntEnum):
    """Entries of the main menu, in display order."""

    START = 0
    CREDITS = 1
    EXIT = 2

    @property
    def label(self) -> str:
        return MENU_ITEMS[self]


@dataclass(frozen=True)
class MenuItemStyle:
    """How a menu entry is drawn."""

    color: Color
    outline_color: Color
    font_size: int
    outline: int


def menu_item_style(selected: bool) -> MenuItemStyle:
    """Return the style of a menu entry depending on whether it is selected."""
    if selected:
        return MenuItemStyle(YELLOW, BLACK, 100, 5)
    return MenuItemStyle(GRAY, GREEN, 70, 2)


def menu_item_position(index: int, text_width: int, screen_width: int) -> tuple[int, int]:
    """Top-left corner of the menu entry at ``index``."""
    x = int(screen_width / 4) - int(text_width / 2) + 50
    y = index * 120 + 350
    return x, y


def control_notes_font_size(time: float) -> int:
    """Font size of the pulsing control hint at ``time`` seconds."""
    scale = 1.0 + 0.1 * math.sin(time * 4.0)
    return int(25 * scale)


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _draw_outlined(
    surface: pygame.Surface,
    text: str,
    pos: tuple[int, int],
    size: int,
    color: Color,
    outline_color: Color,
    outline: int,
) -> None:
    font = _font(size)
    x, y = pos
    shadow = font.render(text, False, outline_color)
    for dx, dy in ((-outline, 0), (outline, 0), (0, -outline), (0, outline)):
        surface.blit(shadow, (x + dx, y + dy))
    surface.blit(font.render(text, False, color), (x, y))


@dataclass
class MainMenu:
    """Menu selection state and its rendering."""

    selected: MenuOption = MenuOption.START

    def select_next(self) -> MenuOption:
        self.selected = MenuOption((self.selected + 1) % len(MenuOption))
        return self.selected

    def select_previous(self) -> MenuOption:
        self.selected = MenuOption((self.selected - 1) % len(MenuOption))
        return self.selected

    def draw(self, surface: pygame.Surface, resources: Resources, time: float) -> None:
        """Draw the whole menu onto ``surface``."""
        width, height = surface.get_size()
        surface.fill(RED)

        explosion = resources.blue_explosion
        surface.blit(
            explosion,
            (width - explosion.get_width() - 1100, height // 2 - explosion.get_height() // 2),
        )
        title = resources.whos_that_pokemon
        surface.blit(
            title,
            (width - title.get_width() - 100, height // 2 - title.get_height() // 2),
        )

        for option in MenuOption:
            style = menu_item_style(option is self.selected)
            text_width = _font(style.font_size).size(option.label)[0]
            pos = menu_item_position(option, text_width, width)
            _draw_outlined(
                surface, option.label, pos, style.font_size,
                style.color, style.outline_color, style.outline,
            )

        self._draw_control_notes(surface, time)
        self._draw_version(surface)

    @staticmethod
    def _draw_control_notes(surface: pygame.Surface, time: float) -> None:
        width, height = surface.get_size()
        size = control_notes_font_size(time)
        y = height // 3 + 500 - size
        x = int(width / 1.3 - size * 2 - 20 - 150)
        _draw_outlined(surface, CONTROL_NOTES_TEXT, (x, y), size, YELLOW, BLACK, 3)

    @staticmethod
    def _draw_version(surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        size = 20
        surface.blit(
            _font(size).render(VERSION_TEXT, False, BLACK),
            (width - size - 20 - 150, height - size - 20),
        )