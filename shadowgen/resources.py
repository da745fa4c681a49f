"""Images and the menu snapshot shared by the screens."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from shadowgen.main_menu import MainMenu

PICTURES_DIR = "Pictures"
WHOS_THAT_POKEMON_IMG = "whos-that-pokemon.png"
BLUE_EXPLOSION_IMG = "blue-explosion-background-for-menu.png"


@dataclass
class Resources:
    """Loaded textures and an off-screen copy of the menu."""

    blue_explosion: pygame.Surface
    whos_that_pokemon: pygame.Surface
    menu_snapshot: pygame.Surface
    menu_snapshot_valid: bool = False

    def capture_menu_snapshot(self, menu: MainMenu, time: float) -> None:
        """Render the menu into the snapshot surface."""
        menu.draw(self.menu_snapshot, self, time)
        self.menu_snapshot_valid = True


def _load_image(path: Path) -> pygame.Surface:
    image = pygame.image.load(str(path))
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        image = image.convert_alpha()
    return image


def load_resources(assets_dir: str | Path, screen_size: tuple[int, int]) -> Resources:
    """Load the menu images from ``assets_dir`` and allocate the snapshot."""
    pictures = Path(assets_dir) / PICTURES_DIR
    for name in (BLUE_EXPLOSION_IMG, WHOS_THAT_POKEMON_IMG):
        if not (pictures / name).is_file():
            raise FileNotFoundError(f"missing image: {pictures / name}")
    return Resources(
        blue_explosion=_load_image(pictures / BLUE_EXPLOSION_IMG),
        whos_that_pokemon=_load_image(pictures / WHOS_THAT_POKEMON_IMG),
        menu_snapshot=pygame.Surface(screen_size),
    )