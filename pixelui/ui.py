"""Retained-mode UI widgets drawn onto a pygame surface."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Protocol, TypeVar

import pygame

from pixelui.vec import Vec2

Color = tuple[int, int, int, int]

Z_MIN = -10
Z_MAX = 10


class _Identified(Protocol):
    id: str


T = TypeVar("T", bound=_Identified)


def _open_font(font_path: Optional[str], size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(font_path, size)


@dataclass
class UICircle:
    """A filled circle centred on (x, y) with radius r."""

    surface: pygame.Surface
    id: str
    x: float
    y: float
    r: float
    default_color: Color = (65, 65, 65, 255)
    z: int = 0
    visible: bool = True

    def render(self) -> None:
        """Plot every pixel of the circle onto the surface."""
        if not self.visible or self.r == 0:
            return
        r = self.r
        span = range(math.ceil(r * 2))
        for w in span:
            dx = r - w
            for h in span:
                dy = r - h
                if dx * dx + dy * dy <= r * r:
                    self.surface.set_at(
                        (int(self.x + dx), int(self.y + dy)), self.default_color
                    )


@dataclass
class UIRect:
    """A rectangle with corners rounded to radius r."""

    surface: pygame.Surface
    id: str
    x: float
    y: float
    w: float
    h: float
    r: float
    default_color: Color = (65, 65, 65, 255)
    z: int = 0
    visible: bool = True

    def _rects(self) -> list[pygame.Rect]:
        x, y, w, h, r = self.x, self.y, self.w, self.h, self.r
        return [
            pygame.Rect(int(x), int(y + r), int(w), int(h - 2 * r)),
            pygame.Rect(int(x + r), int(y), int(w - 2 * r), int(h)),
        ]

    def _corners(self) -> list[UICircle]:
        x, y, w, h, r = self.x, self.y, self.w, self.h, self.r
        return [
            UICircle(
                self.surface,
                self.id,
                x + r + (c // 2) * (w - 2 * r),
                y + r + (c % 2) * (h - 2 * r),
                r,
                self.default_color,
                self.z,
            )
            for c in range(4)
        ]

    def render(self) -> None:
        """Draw the two body rectangles and the four corner circles."""
        if not self.visible:
            return
        for rect in self._rects():
            if rect.width > 0 and rect.height > 0:
                self.surface.fill(self.default_color, rect)
        for corner in self._corners():
            corner.render()


class TextBox:
    """A line of text rendered at (x, y)."""

    def __init__(
        self,
        surface: pygame.Surface,
        id: str,
        font: Optional[pygame.font.Font],
        font_path: Optional[str],
        x: float,
        y: float,
        text: str,
        text_color: Color = (0, 0, 0, 255),
        font_size: int = -1,
        z: int = 0,
    ) -> None:
        self.surface = surface
        self.id = id
        self.font_path = font_path
        self.x = x
        self.y = y
        self.text = text
        self.text_color = text_color
        self.font_size = font_size
        self.z = z
        self.visible = True
        self.font = _open_font(font_path, font_size) if font_size != -1 else font
        self.texture: Optional[pygame.Surface] = None
        self.rect = pygame.Rect(int(x), int(y), 0, 0)
        self._update_texture()

    def _update_texture(self) -> None:
        self.texture = None
        if not self.text:
            return
        if self.font is None:
            raise ValueError(f"text box {self.id!r} has no font")
        self.texture = self.font.render(self.text, True, self.text_color)
        self.rect = pygame.Rect(
            int(self.x), int(self.y), self.texture.get_width(), self.texture.get_height()
        )

    def set_text(self, new_text: str) -> None:
        """Replace the text and re-render it."""
        self.text = new_text
        self._update_texture()

    def render(self) -> None:
        """Blit the rendered text onto the surface."""
        if self.texture is None or not self.visible:
            return
        self.surface.blit(self.texture, self.rect)


class Button:
    """A clickable rounded rectangle with a text label."""

    def __init__(
        self,
        func: Callable[[], None],
        surface: pygame.Surface,
        id: str,
        text: str,
        font: Optional[pygame.font.Font],
        font_path: Optional[str],
        x: float,
        y: float,
        w: float = 100.0,
        h: float = 25.0,
        font_size: int = -1,
        default_color: Color = (255, 255, 255, 255),
        hover_color: Color = (200, 200, 200, 255),
        press_color: Color = (100, 100, 100, 255),
        text_color: Color = (0, 0, 0, 255),
        r: float = 0,
        align_center: bool = True,
        z: int = 0,
    ) -> None:
        self.func = func
        self.surface = surface
        self.id = id
        self.font = font
        self.x = x
        self.y = y
        self.w = w
        self.h = h
        self.r = r
        self.default_color = default_color
        self.hover_color = hover_color
        self.press_color = press_color
        self.align_center = align_center
        self.z = z
        self.hover = False
        self.visible = True
        self.clickable = True
        self.pressed = False
        self.textbox = TextBox(
            surface, id, font, font_path, x, y, text, text_color, font_size, z
        )
        self._update_text()

    def _update_text(self) -> None:
        tb = self.textbox
        if self.align_center:
            tb.x = self.x + (self.w - tb.rect.w) / 2
        else:
            tb.x = self.x + 7
        tb.rect.x = int(tb.x)
        tb.y = self.y + (self.h - tb.rect.h) / 2
        tb.rect.y = int(tb.y)

    def set_text(self, new_text: str) -> None:
        """Change the label and realign it inside the button."""
        self.textbox.set_text(new_text)
        self._update_text()

    def click_test(self, mouse: Vec2) -> bool:
        """Return True if the point lies strictly inside the button."""
        if not self.clickable:
            return False
        return (
            self.x < mouse.x < self.x + self.w and self.y < mouse.y < self.y + self.h
        )

    def render(self) -> None:
        """Draw the background in its current state colour, then the label."""
        if not self.visible:
            return
        if self.pressed:
            color = self.press_color
        elif self.hover:
            color = self.hover_color
        else:
            color = self.default_color
        if color[3] > 0:
            UIRect(
                self.surface,
                self.id + "_rect",
                self.x,
                self.y,
                self.w,
                self.h,
                self.r,
                color,
                self.z,
            ).render()
        self.textbox.render()


class TextInput:
    """A single-line text field built on a button."""

    def __init__(
        self,
        submit_func: Callable[[], None],
        surface: pygame.Surface,
        id: str,
        default_text: str,
        font: Optional[pygame.font.Font],
        font_path: Optional[str],
        x: float,
        y: float,
        w: float = 100.0,
        h: float = 25.0,
        font_size: int = -1,
        default_color: Color = (255, 255, 255, 255),
        selected_color: Color = (100, 100, 100, 255),
        text_color: Color = (0, 0, 0, 255),
        r: float = 0,
        maxchar: int = 0,
        align_center: bool = True,
        z: int = 0,
    ) -> None:
        self.submit_func = submit_func
        self.id = id
        self.default_text = default_text
        self.typed = ""
        self.maxchar = maxchar
        self.z = z
        self.selected = False
        self.editable = True
        self.visible = True
        self.button = Button(
            lambda: None,
            surface,
            id,
            default_text,
            font,
            font_path,
            x,
            y,
            w,
            h,
            font_size,
            default_color,
            default_color,
            selected_color,
            text_color,
            r,
            align_center,
            z,
        )

    def render(self) -> None:
        """Draw the field."""
        if not self.visible:
            return
        self.button.render()


@dataclass
class UIElements:
    """All widgets of one screen, grouped by kind."""

    buttons: list[Button] = field(default_factory=list)
    text: list[TextBox] = field(default_factory=list)
    rects: list[UIRect] = field(default_factory=list)
    circles: list[UICircle] = field(default_factory=list)
    inputs: list[TextInput] = field(default_factory=list)


def get_object_by_id(objects: Iterable[T], id: str) -> Optional[T]:
    """Return the first object whose id matches, or None."""
    return next((obj for obj in objects if obj.id == id), None)


def render_ui(ui: UIElements) -> None:
    """Render every widget, layer by layer from the lowest z to the highest."""
    for z in range(Z_MIN, Z_MAX + 1):
        for group in (ui.circles, ui.rects, ui.buttons, ui.text, ui.inputs):
            for element in group:
                if element.z == z:
                    element.render()