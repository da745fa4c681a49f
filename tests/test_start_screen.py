import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from unittest import mock

import pygame
import pytest

from shadowgen.main_menu import GRAY, LIGHTGRAY, WHITE
from shadowgen.start_screen import (
    BOX_HEIGHT,
    BOX_WIDTH,
    BTN_HEIGHT,
    BTN_WIDTH,
    GENERATE_STR,
    SAVE_IMG_STR,
    ClickFlash,
    StartScreen,
    button_color,
    compute_layout,
    run_start_screen,
)


@pytest.fixture
def display():
    pygame.display.init()
    screen = pygame.display.set_mode((800, 600))
    yield screen
    pygame.display.quit()


def _white_pixels(surface):
    return pygame.mask.from_threshold(surface, WHITE, (1, 1, 1, 255)).count()


def test_layout_sizes():
    layout = compute_layout(1920, 1080)
    assert layout.left_box.size == (BOX_WIDTH, BOX_HEIGHT)
    assert layout.right_box.size == (BOX_WIDTH, BOX_HEIGHT)
    assert layout.generate_button.size == (BTN_WIDTH, BTN_HEIGHT)
    assert layout.save_button.size == (BTN_WIDTH, BTN_HEIGHT)


def test_layout_boxes_at_quarter_points():
    layout = compute_layout(1920, 1080)
    assert layout.left_box.centerx * 3 == layout.right_box.centerx
    assert layout.left_box.centery == layout.right_box.centery == 1080 // 2


def test_layout_buttons_centered_and_stacked():
    layout = compute_layout(1920, 1080)
    assert layout.generate_button.centerx == layout.save_button.centerx == 1920 // 2
    assert layout.save_button.top > layout.generate_button.bottom


def test_click_flash_lasts_for_delay():
    flash = ClickFlash()
    flash.press(10.0)
    assert flash.update(10.1) is True
    assert flash.update(10.25) is False


def test_click_flash_idle():
    assert ClickFlash().update(3.0) is False


def test_save_button_disabled_on_first_load():
    assert button_color(SAVE_IMG_STR, True, False, True) == GRAY


@pytest.mark.parametrize(
    "hovered, clicked, expected",
    [(False, True, GRAY), (True, True, GRAY), (True, False, LIGHTGRAY), (False, False, WHITE)],
)
def test_generate_button_colors(hovered, clicked, expected):
    assert button_color(GENERATE_STR, hovered, clicked, True) == expected


def test_save_button_hover_after_first_load():
    assert button_color(SAVE_IMG_STR, True, False, False) == LIGHTGRAY


def test_update_flashes_generate_on_click():
    screen = StartScreen((1920, 1080))
    center = screen.layout.generate_button.center
    screen.update(center, True, 5.0)
    assert screen.hover_generate is True
    assert screen.flash.clicked is True
    screen.update(center, False, 5.3)
    assert screen.flash.clicked is False


def test_click_outside_generate_does_not_flash():
    screen = StartScreen((1920, 1080))
    screen.update(screen.layout.left_box.center, True, 1.0)
    assert screen.hover_left is True
    assert screen.flash.clicked is False


def test_tooltip_only_when_hovering_left_box():
    screen = StartScreen((1920, 1080))
    surface = pygame.Surface((1920, 1080))
    area = pygame.Rect(0, 1080 - 60, 170, 25)

    screen.update((0, 0), False, 0.0)
    screen.draw(surface)
    assert _white_pixels(surface.subsurface(area)) == 0

    screen.update(screen.layout.left_box.center, False, 0.0)
    screen.draw(surface)
    assert _white_pixels(surface.subsurface(area)) > 0


def test_run_start_screen_backspace_returns_to_menu(display):
    events = [
        [pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0))],
        [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_BACKSPACE)],
    ]
    with mock.patch("pygame.event.get", side_effect=events) as get:
        result = run_start_screen(display, None, pygame.time.Clock())
    assert result is False
    assert get.call_count == 2


def test_run_start_screen_quit_requests_close(display):
    events = [[pygame.event.Event(pygame.QUIT)]]
    with mock.patch("pygame.event.get", side_effect=events):
        assert run_start_screen(display, None, pygame.time.Clock()) is True