# pixelui

A small widget toolkit built on pygame. It provides filled circles, rounded
rectangles, text boxes, clickable buttons and single-line text inputs, all
drawn onto a pygame surface.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Demo

```
pixelui-demo
```

This opens a resizable 1920x1080 window. It shows an FPS counter that
updates about once a second, a "Generation" label, and a red button marked
"TEST" that adds one to the generation count each time you click it. It also
has a text input of up to 7 characters. When you press Enter, the text you
typed is copied into a label on the screen. Esc or closing the window quits.

The demo loads its fonts from `OpenSans.ttf` and `OpenSans-ExtraBold.ttf`,
found relative to the current directory. You can give other paths:

```
pixelui-demo --regular-font path/to/Regular.ttf --bold-font path/to/Bold.ttf
```

If the window or a font cannot be opened, the command prints an error and
exits with status 1.

## Building an interface

The widgets live in `pixelui.ui`:

- `UICircle(surface, id, x, y, r, default_color, z)` is a filled circle
  centred on `(x, y)`.
- `UIRect(surface, id, x, y, w, h, r, default_color, z)` is a rectangle whose
  corners are rounded to radius `r`.
- `TextBox(surface, id, font, font_path, x, y, text, text_color, font_size, z)`
  is a line of text. If `font_size` is not `-1`, the box opens its own font
  from `font_path` at that size. Otherwise it uses `font`. A font path of
  `None` selects pygame's default font. `set_text` replaces the text.
- `Button(func, surface, id, text, font, font_path, x, y, w, h, font_size,
  default_color, hover_color, press_color, text_color, r, align_center, z)`
  is a rounded rectangle with a label. The label is centred, or placed 7
  pixels from the left edge when `align_center` is false. The background uses
  the press colour while the button is pressed, the hover colour while the
  cursor is over it, and the default colour otherwise. A colour with alpha 0
  draws no background. `click_test(Vec2(x, y))` is true when the point lies
  strictly inside a clickable button.
- `TextInput(submit_func, surface, id, default_text, font, font_path, x, y,
  w, h, font_size, default_color, selected_color, text_color, r, maxchar,
  align_center, z)` is a text field drawn as a button. `maxchar` of `0` means
  the length is not limited.

Colours are RGBA tuples. Put the widgets in a `UIElements` container, which
has the lists `buttons`, `text`, `rects`, `circles` and `inputs`. Each frame,
pass the pending pygame events to `pixelui.events.handle_events` and draw
with `render_ui`:

```python
import pygame
from pixelui.ui import UIElements, render_ui
from pixelui.events import handle_events

pygame.init()
screen = pygame.display.set_mode((800, 600))
ui = UIElements()
# ui.buttons.append(Button(...)); ui.text.append(TextBox(...)); ...
running = True
while running:
    running = handle_events(ui, pygame.event.get())
    screen.fill((0, 0, 0))
    render_ui(ui)
    pygame.display.flip()
```

`render_ui` draws the layers from z = -10 up to z = 10. Elements with a z
outside that range are not drawn. Within one z level it draws circles first,
then rects, buttons, text and inputs.

`get_object_by_id(ui.text, "some_id")` returns the first element with that
id, or `None` when no element has it.

## Event handling

`handle_events` returns `False` when the batch holds a window-close event or
an Esc key press, and `True` otherwise. It processes every event in the batch
either way.

- A left click on a visible, clickable button sets `pressed` and calls its
  callback. Releasing the left mouse button clears `pressed` on all buttons.
- Moving the mouse sets `hover` on visible, clickable buttons under the
  cursor and clears it on the others.
- A left click on a visible, editable text input selects it and shows what
  has been typed so far. A click anywhere else deselects it. If it is empty,
  it shows its default text again.
- Text typed while an input is selected is appended to its `typed` text,
  up to `maxchar` characters. Backspace removes the last character.
- Enter deselects the selected input and calls its submit callback. If the
  input is empty, it shows its default text again.

`Vec2` and `Vec3` in `pixelui.vec` are small coordinate containers whose
components default to zero.

## Limits

The toolkit has no layout management and no keyboard focus traversal. Only
the Enter, Backspace and Esc keys have special meaning. Text inputs hold a
single line, and there is no cursor movement inside them.