"""Dispatch pygame input events to the widgets of a screen."""

from __future__ import annotations

from typing import Iterable

import pygame

from pixelui.ui import TextInput, UIElements
from pixelui.vec import Vec2


def _mouse_point(event: pygame.event.Event) -> Vec2:
    x, y = event.pos
    return Vec2(float(x), float(y))


def _submit(inputs: Iterable[TextInput]) -> None:
    for inp in inputs:
        if inp.selected:
            inp.selected = False
            inp.button.pressed = False
            inp.submit_func()
            if not inp.typed:
                inp.button.set_text(inp.default_text)


def _backspace(inputs: Iterable[TextInput]) -> None:
    for inp in inputs:
        if inp.selected and inp.typed:
            inp.typed = inp.typed[:-1]
            inp.button.set_text(inp.typed)


def _type_text(inputs: Iterable[TextInput], text: str) -> None:
    for inp in inputs:
        if inp.selected and (inp.maxchar == 0 or len(inp.typed) < inp.maxchar):
            inp.typed += text
            inp.button.set_text(inp.typed)


def _left_press(ui: UIElements, point: Vec2) -> None:
    for but in ui.buttons:
        if not but.visible or not but.clickable:
            continue
        if but.click_test(point):
            but.pressed = True
            but.func()

    for inp in ui.inputs:
        if not inp.editable or not inp.visible:
            continue
        if inp.button.click_test(point):
            inp.selected = True
            inp.button.pressed = True
            inp.button.set_text(inp.typed)
        else:
            inp.selected = False
            inp.button.pressed = False
            if not inp.typed:
                inp.button.set_text(inp.default_text)


def _left_release(ui: UIElements) -> None:
    for but in ui.buttons:
        but.pressed = False


def _hover(ui: UIElements, point: Vec2) -> None:
    for but in ui.buttons:
        if not but.visible or not but.clickable:
            continue
        but.hover = but.click_test(point)


def handle_events(ui: UIElements, events: Iterable[pygame.event.Event]) -> bool:
    """Apply a batch of events to the widgets.

    Returns False once a quit request (window close or Escape) has been seen,
    True otherwise. All events in the batch are processed either way.
    """
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                running = False
            elif event.key == pygame.K_RETURN:
                _submit(ui.inputs)
            elif event.key == pygame.K_BACKSPACE:
                _backspace(ui.inputs)
        elif event.type == pygame.TEXTINPUT:
            _type_text(ui.inputs, event.text)
        elif event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT:
                _left_press(ui, _mouse_point(event))
        elif event.type == pygame.MOUSEBUTTONUP:
            if event.button == pygame.BUTTON_LEFT:
                _left_release(ui)
        elif event.type == pygame.MOUSEMOTION:
            _hover(ui, _mouse_point(event))
    return running