# shadowgen

A "Who's That Pokemon?" style main menu with a shadow generator start screen,
drawn with pygame.

## Installing

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Running

```
shadowgen
```

By default this opens a fullscreen window. Options:

- `--assets DIR` sets the directory the images are loaded from (default
  `Assets`, relative to the current directory).
- `--size WIDTHxHEIGHT` opens a window of that size instead of going
  fullscreen, for example `--size 1920x1080`.

The images are read from `DIR/Pictures/`, which must hold:

- `whos-that-pokemon.png`
- `blue-explosion-background-for-menu.png`

If either is missing, `FileNotFoundError` is raised before the menu appears.

### Main menu

- **Up / Down** move the selection between *Start*, *Credits* and *Exit*,
  wrapping around at either end.
- **Enter** (or keypad Enter) activates the selected item.
- *Start* opens the start screen. The menu is drawn into a snapshot first, and
  the snapshot is shown faded behind the start screen.
- *Credits* only writes a log line.
- *Exit* closes the window.
- **Escape** or closing the window quits.

### Start screen

- Two boxes are shown: *Your Image* on the left and *Generated Shadow* on the
  right. Each box is highlighted while the mouse is over it.
- While the mouse is over the left box, a hint "Click to upload image" appears.
- The *Generate* button looks pressed for 0.2 seconds after a left click.
- The *Save Image* button stays greyed out.
- **Backspace** returns to the main menu; **Escape** or closing the window
  quits.

## What it does not do

The start screen is only the interface. Clicking the left box does not upload
an image, *Generate* does not produce a shadow, and *Save Image* saves
nothing. *Credits* has no screen of its own.

## Using it as a library

The layout and state pieces can be used without opening a window:

```python
from shadowgen.main_menu import MainMenu, MenuOption, menu_item_style
from shadowgen.start_screen import ClickFlash, button_color, compute_layout

menu = MainMenu()
menu.select_next()
assert menu.selected is MenuOption.CREDITS
menu.select_previous()
menu.select_previous()
assert menu.selected is MenuOption.EXIT

print(menu_item_style(True).font_size)  # 100

layout = compute_layout(1920, 1080)
print(layout.left_box, layout.right_box, layout.generate_button, layout.save_button)

flash = ClickFlash()
flash.press(now=10.0)
assert flash.update(now=10.1) is True
assert flash.update(now=10.3) is False  # the flash lasts 0.2 seconds

print(button_color("Save Image", hovered=True, clicked=False, first_load=True))
```

`shadowgen.resources.load_resources(assets_dir, screen_size)` loads the two
images and allocates the snapshot surface; `Resources.capture_menu_snapshot`
draws a `MainMenu` into it. `shadowgen.start_screen.run_start_screen(screen,
resources, clock)` runs the start screen loop and returns `True` when the
window was asked to close, `False` when the user went back with Backspace.
`StartScreen.update` and `StartScreen.draw` give the same behaviour one frame
at a time.