"""Demo screen: a generation counter, an FPS readout and an echoing text field."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Optional, Sequence

import pygame

from pixelui.events import handle_events
from pixelui.ui import (
    Button,
    TextBox,
    TextInput,
    UIElements,
    get_object_by_id,
    render_ui,
)

WINDOW_TITLE = "help"
WINDOW_SIZE = (1920, 1080)
FONT_SIZE = 24
DEFAULT_BOLD_FONT = "OpenSans-ExtraBold.ttf"
DEFAULT_REGULAR_FONT = "OpenSans.ttf"
WHITE = (255, 255, 255, 255)


def advance_generation(counter: int, text_box: TextBox) -> int:
    """Increment the generation counter and show it in the text box."""
    counter += 1
    text_box.set_text(f"Generation {counter}")
    return counter


def _load_font(path: Optional[str]) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, FONT_SIZE)


def build_ui(
    surface: pygame.Surface,
    regular_font_path: Optional[str],
    bold_font_path: Optional[str],
) -> UIElements:
    """Create the demo widgets drawing onto the given surface."""
    bold = _load_font(bold_font_path)
    regular = _load_font(regular_font_path)
    ui = UIElements()
    generation = 0

    def on_generation() -> None:
        nonlocal generation
        gen_text = get_object_by_id(ui.text, "Gen_Text")
        if gen_text is not None:
            generation = advance_generation(generation, gen_text)

    def on_submit() -> None:
        out = get_object_by_id(ui.text, "outtext")
        field = get_object_by_id(ui.inputs, "inputtest")
        if out is not None and field is not None:
            out.set_text(field.typed)

    ui.text.append(
        TextBox(surface, "FPS_Counter", bold, bold_font_path, 25, 25, "FPS: 0", WHITE, 20)
    )
    ui.text.append(
        TextBox(surface, "Gen_Text", bold, bold_font_path, 25, 995, "Generation 0", WHITE, 50)
    )
    ui.buttons.append(
        Button(
            on_generation,
            surface,
            "Generation_Button",
            "TEST",
            bold,
            bold_font_path,
            1700,
            970,
            150.0,
            75.0,
            45,
            (255, 66, 66, 255),
            (255, 88, 88, 255),
            (255, 125, 125, 255),
            WHITE,
            12,
        )
    )
    ui.text.append(TextBox(surface, "outtext", bold, bold_font_path, 250, 250, " ", WHITE))
    ui.inputs.append(
        TextInput(
            on_submit,
            surface,
            "inputtest",
            "test",
            regular,
            regular_font_path,
            100,
            100,
            200,
            40,
            20,
            (100, 100, 100, 100),
            (60, 60, 60, 100),
            WHITE,
            10.0,
            7,
            False,
        )
    )
    return ui


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the widget demo window.")
    parser.add_argument("--regular-font", default=DEFAULT_REGULAR_FONT)
    parser.add_argument("--bold-font", default=DEFAULT_BOLD_FONT)
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the demo window and run until it is closed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        try:
            screen = pygame.display.set_mode(WINDOW_SIZE, pygame.RESIZABLE)
        except pygame.error as exc:
            print(f"Display error: {exc}")
            return 1
        pygame.display.set_caption(WINDOW_TITLE)

        try:
            ui = build_ui(screen, args.regular_font, args.bold_font)
        except (OSError, pygame.error) as exc:
            print(f"Font error: {exc}")
            return 1

        fps_text = get_object_by_id(ui.text, "FPS_Counter")
        clock = pygame.time.Clock()
        now = time.perf_counter()
        running = True
        while running:
            last, now = now, time.perf_counter()
            delta_ms = (now - last) * 1000.0

            running = handle_events(ui, pygame.event.get())

            screen.fill((0, 0, 0, 255))
            if fps_text is not None and int(now) > int(last) and delta_ms > 0:
                fps_text.set_text(f"FPS: {int(1000.0 / delta_ms)}")

            render_ui(ui)
            pygame.display.flip()
            clock.tick(60)
        return 0
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())