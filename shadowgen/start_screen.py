"""Start screen: image boxes, generate and save buttons."""

from __future__ import annotations

from dataclasses import dataclass, field

import pygame

from shadowgen.main_menu import BLACK, GRAY, LIGHTGRAY, WHITE, YELLOW, Color
from shadowgen.resources import Resources

BOX_WIDTH = 600
BOX_HEIGHT = 600
BOX_BORDER = 4
FONT_SIZE_LABEL = 25
BTN_WIDTH = 200
BTN_HEIGHT = 50

COLOR_START_BACKGND = (255, 255, 255, 100)
COLOR_BOX_DEFAULT = (150, 150, 150, 150)
COLOR_BOX_HOVER = (200, 200, 255, 180)
COLOR_BORDER = WHITE
COLOR_LABEL = LIGHTGRAY
COLOR_BTN_TEXT = BLACK
COLOR_BTN_DEFAULT = WHITE
COLOR_BTN_CLICK = GRAY

START_STR = "Start"
GENERATE_STR = "Generate"
SAVE_IMG_STR = "Save Image"
TOOLTIP_STR = "Click to upload image"

GENERATE_CLICK_DELAY = 0.2


@dataclass(frozen=True)
class StartScreenLayout:
    """Placement of the start screen widgets."""

    left_box: pygame.Rect
    right_box: pygame.Rect
    generate_button: pygame.Rect
    save_button: pygame.Rect


def compute_layout(screen_width: int, screen_height: int) -> StartScreenLayout:
    """Lay out the two image boxes and the buttons for a screen size."""
    box_y = int(screen_height / 2.0 - BOX_HEIGHT // 2)
    left = pygame.Rect(int(screen_width / 4.0 - BOX_WIDTH // 2), box_y, BOX_WIDTH, BOX_HEIGHT)
    right = pygame.Rect(
        int(3 * screen_width / 4.0 - BOX_WIDTH // 2), box_y, BOX_WIDTH, BOX_HEIGHT
    )
    button_x = screen_width // 2 - BTN_WIDTH // 2
    generate = pygame.Rect(
        button_x, int(screen_height // 2 + right.height / 3 - BTN_HEIGHT), BTN_WIDTH, BTN_HEIGHT
    )
    save = pygame.Rect(
        button_x, int(screen_height // 2 + right.height / 2 - BTN_HEIGHT), BTN_WIDTH, BTN_HEIGHT
    )
    return StartScreenLayout(left, right, generate, save)


@dataclass
class ClickFlash:
    """Keeps a button looking pressed for a short while after a click."""

    delay: float = GENERATE_CLICK_DELAY
    clicked: bool = False
    click_time: float = 0.0

    def press(self, now: float) -> None:
        self.click_time = now
        self.clicked = True

    def update(self, now: float) -> bool:
        if self.clicked and now - self.click_time >= self.delay:
            self.clicked = False
        return self.clicked


def button_color(text: str, hovered: bool, clicked: bool, first_load: bool) -> Color:
    """Fill color of a button in its current state."""
    if text == SAVE_IMG_STR and first_load:
        return GRAY
    if clicked:
        return GRAY
    if hovered:
        return LIGHTGRAY
    return COLOR_BTN_DEFAULT


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, size)


def _fill_translucent(surface: pygame.Surface, rect: pygame.Rect, color: Color) -> None:
    layer = pygame.Surface(rect.size, pygame.SRCALPHA)
    layer.fill(color)
    surface.blit(layer, rect.topleft)


class StartScreen:
    """State and rendering of the start screen."""

    def __init__(self, screen_size: tuple[int, int], resources: Resources | None = None):
        self.screen_size = screen_size
        self.resources = resources
        self.layout = compute_layout(*screen_size)
        self.flash = ClickFlash()
        self.first_load = True
        self.hover_left = False
        self.hover_right = False
        self.hover_generate = False
        self.hover_save = False

    def update(self, mouse_pos: tuple[int, int], mouse_pressed: bool, now: float) -> None:
        """Refresh hover states and the generate button flash."""
        layout = self.layout
        self.hover_left = layout.left_box.collidepoint(mouse_pos)
        self.hover_right = layout.right_box.collidepoint(mouse_pos)
        self.hover_generate = layout.generate_button.collidepoint(mouse_pos)
        self.hover_save = layout.save_button.collidepoint(mouse_pos)
        if mouse_pressed and self.hover_generate:
            self.flash.press(now)
        self.flash.update(now)

    def draw(self, surface: pygame.Surface) -> None:
        width, height = surface.get_size()
        surface.fill(BLACK)

        if self.resources is not None and self.resources.menu_snapshot_valid:
            snapshot = self.resources.menu_snapshot.copy()
            snapshot.set_alpha(COLOR_START_BACKGND[3])
            surface.blit(snapshot, (0, 0))

        title_font = _font(60)
        title_x = width // 2 - title_font.size(START_STR)[0] // 2
        surface.blit(title_font.render(START_STR, False, YELLOW), (title_x, 80))

        self._draw_labeled_box(surface, self.layout.left_box, "Your Image", self.hover_left)
        self._draw_labeled_box(
            surface, self.layout.right_box, "Generated Shadow", self.hover_right
        )
        self._draw_button(
            surface, self.layout.generate_button, GENERATE_STR,
            self.hover_generate, self.flash.clicked,
        )
        self._draw_button(surface, self.layout.save_button, SAVE_IMG_STR, self.hover_save, False)

        if self.hover_left:
            surface.blit(_font(20).render(TOOLTIP_STR, False, WHITE), (20, height - 60))

    @staticmethod
    def _draw_labeled_box(
        surface: pygame.Surface, box: pygame.Rect, label: str, hovered: bool
    ) -> None:
        _fill_translucent(surface, box, COLOR_BOX_HOVER if hovered else COLOR_BOX_DEFAULT)
        pygame.draw.rect(surface, COLOR_BORDER, box, BOX_BORDER)
        text = _font(FONT_SIZE_LABEL).render(label, False, COLOR_LABEL)
        surface.blit(text, (box.x + 20, box.bottom + 10))

    def _draw_button(
        self, surface: pygame.Surface, button: pygame.Rect, text: str,
        hovered: bool, clicked: bool,
    ) -> None:
        pygame.draw.rect(surface, button_color(text, hovered, clicked, self.first_load), button)
        pygame.draw.rect(surface, BLACK, button, 2)
        font = _font(FONT_SIZE_LABEL)
        text_x = button.x + button.width // 2 - font.size(text)[0] // 2
        surface.blit(font.render(text, False, COLOR_BTN_TEXT), (text_x, button.y + 12))


def run_start_screen(
    screen: pygame.Surface, resources: Resources, clock: pygame.time.Clock
) -> bool:
    """Run the start screen until Backspace or a close request.

    Returns True when the window was asked to close, False when the user
    went back to the menu.
    """
    start = StartScreen(screen.get_size(), resources)
    while True:
        mouse_pressed = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return True
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return True
                if event.key == pygame.K_BACKSPACE:
                    return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                mouse_pressed = True

        start.update(pygame.mouse.get_pos(), mouse_pressed, pygame.time.get_ticks() / 1000.0)
        start.draw(screen)
        pygame.display.flip()
        clock.tick(60)