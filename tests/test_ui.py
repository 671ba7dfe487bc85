import pygame
import pytest

from pixelui.ui import (
    Button,
    TextBox,
    TextInput,
    UICircle,
    UIElements,
    UIRect,
    get_object_by_id,
    render_ui,
)
from pixelui.vec import Vec2

RED = (255, 0, 0, 255)
GREEN = (0, 255, 0, 255)
BLUE = (0, 0, 255, 255)
WHITE = (255, 255, 255, 255)
EMPTY = (0, 0, 0, 0)


@pytest.fixture
def surface():
    return pygame.Surface((300, 200), pygame.SRCALPHA)


@pytest.fixture
def font():
    pygame.font.init()
    return pygame.font.Font(None, 20)


def drawn_area(surface):
    return surface.get_bounding_rect()


def test_circle_fills_centre_not_far_pixels(surface):
    UICircle(surface, "c", 50, 50, 10, RED).render()
    assert surface.get_at((50, 50)) == RED
    assert surface.get_at((70, 70)) == EMPTY
    area = drawn_area(surface)
    assert area.width <= 21 and area.height <= 21


def test_circle_invisible_or_zero_radius_draws_nothing(surface):
    hidden = UICircle(surface, "c", 50, 50, 10, RED)
    hidden.visible = False
    hidden.render()
    UICircle(surface, "d", 50, 50, 0, RED).render()
    assert drawn_area(surface).width == 0


def test_rect_without_radius_fills_corner(surface):
    UIRect(surface, "r", 10, 10, 40, 30, 0, GREEN).render()
    assert surface.get_at((10, 10)) == GREEN
    assert surface.get_at((30, 25)) == GREEN
    assert drawn_area(surface) == pygame.Rect(10, 10, 40, 30)


def test_rounded_rect_leaves_corner_empty(surface):
    UIRect(surface, "r", 10, 10, 60, 60, 10, GREEN).render()
    assert surface.get_at((10, 10)) == EMPTY
    assert surface.get_at((40, 40)) == GREEN
    assert drawn_area(surface).contains(pygame.Rect(20, 20, 40, 40))


def test_rect_invisible_draws_nothing(surface):
    rect = UIRect(surface, "r", 10, 10, 60, 60, 0, GREEN)
    rect.visible = False
    rect.render()
    assert drawn_area(surface).width == 0


def test_textbox_renders_inside_its_rect(surface, font):
    tb = TextBox(surface, "t", font, None, 20, 30, "Hello", WHITE)
    assert tb.rect.topleft == (20, 30)
    assert tb.rect.width > 0
    tb.render()
    area = drawn_area(surface)
    assert area.width > 0
    assert tb.rect.contains(area)


def test_textbox_set_text_changes_width(surface, font):
    tb = TextBox(surface, "t", font, None, 0, 0, "a", WHITE)
    narrow = tb.rect.width
    tb.set_text("a much longer line")
    assert tb.text == "a much longer line"
    assert tb.rect.width > narrow


def test_textbox_empty_text_renders_nothing(surface, font):
    tb = TextBox(surface, "t", font, None, 0, 0, "x", WHITE)
    tb.set_text("")
    assert tb.texture is None
    tb.render()
    assert drawn_area(surface).width == 0


def test_textbox_opens_own_font_for_size(surface, font):
    small = TextBox(surface, "s", font, None, 0, 0, "Size", WHITE)
    big = TextBox(surface, "b", font, None, 0, 0, "Size", WHITE, 50)
    assert big.font is not font
    assert big.rect.height > small.rect.height


def test_button_click_test_strict_bounds(surface, font):
    b = Button(lambda: None, surface, "b", "Go", font, None, 10, 10, 100, 50)
    assert b.click_test(Vec2(50, 30)) is True
    assert b.click_test(Vec2(10, 30)) is False
    assert b.click_test(Vec2(110, 30)) is False
    assert b.click_test(Vec2(50, 60)) is False
    b.clickable = False
    assert b.click_test(Vec2(50, 30)) is False


def test_button_centres_label(surface, font):
    b = Button(lambda: None, surface, "b", "Label", font, None, 10, 20, 200, 60)
    tb = b.textbox
    left = tb.x - b.x
    right = (b.x + b.w) - (tb.x + tb.rect.w)
    top = tb.y - b.y
    bottom = (b.y + b.h) - (tb.y + tb.rect.h)
    assert left == pytest.approx(right)
    assert top == pytest.approx(bottom)


def test_button_left_aligned_label(surface, font):
    b = Button(
        lambda: None, surface, "b", "Label", font, None, 10, 20, 200, 60,
        align_center=False,
    )
    assert b.textbox.x == 17
    assert b.textbox.rect.x == 17


def test_button_set_text_recentres(surface, font):
    b = Button(lambda: None, surface, "b", "x", font, None, 0, 0, 200, 40)
    b.set_text("wider label")
    tb = b.textbox
    assert tb.text == "wider label"
    assert tb.x - b.x == pytest.approx((b.x + b.w) - (tb.x + tb.rect.w))


@pytest.mark.parametrize(
    "pressed, hover, expected",
    [(False, False, RED), (False, True, GREEN), (True, False, BLUE), (True, True, BLUE)],
)
def test_button_state_colours(surface, font, pressed, hover, expected):
    b = Button(lambda: None, surface, "b", "Go", font, None, 0, 0, 100, 50,
               default_color=RED, hover_color=GREEN, press_color=BLUE)
    b.pressed = pressed
    b.hover = hover
    b.render()
    assert surface.get_at((2, 2)) == expected


def test_button_transparent_background_skipped(surface, font):
    b = Button(lambda: None, surface, "b", "", font, None, 0, 0, 100, 50,
               default_color=(10, 10, 10, 0))
    b.render()
    assert drawn_area(surface).width == 0


def test_text_input_uses_default_text_and_colours(surface, font):
    inp = TextInput(lambda: None, surface, "in", "type here", font, None, 0, 0, 150, 30,
                    default_color=RED, selected_color=BLUE, maxchar=5)
    assert inp.button.textbox.text == "type here"
    assert inp.button.hover_color == RED
    assert inp.button.press_color == BLUE
    assert inp.typed == ""
    assert inp.maxchar == 5
    inp.render()
    assert surface.get_at((1, 1)) == RED


def test_text_input_invisible_draws_nothing(surface, font):
    inp = TextInput(lambda: None, surface, "in", "x", font, None, 0, 0)
    inp.visible = False
    inp.render()
    assert drawn_area(surface).width == 0


def test_get_object_by_id(surface, font):
    a = TextBox(surface, "a", font, None, 0, 0, "A")
    b = TextBox(surface, "b", font, None, 0, 0, "B")
    assert get_object_by_id([a, b], "b") is b
    assert get_object_by_id([a, b], "missing") is None


def test_render_ui_orders_by_z(surface):
    ui = UIElements()
    ui.rects.append(UIRect(surface, "top", 0, 0, 50, 50, 0, RED, z=5))
    ui.rects.append(UIRect(surface, "bottom", 0, 0, 50, 50, 0, GREEN, z=-5))
    render_ui(ui)
    assert surface.get_at((10, 10)) == RED


def test_render_ui_circle_under_rect_at_same_z(surface):
    ui = UIElements()
    ui.rects.append(UIRect(surface, "r", 0, 0, 50, 50, 0, RED))
    ui.circles.append(UICircle(surface, "c", 25, 25, 10, GREEN))
    render_ui(ui)
    assert surface.get_at((25, 25)) == RED


def test_render_ui_skips_out_of_range_z(surface):
    ui = UIElements()
    ui.rects.append(UIRect(surface, "r", 0, 0, 50, 50, 0, RED, z=11))
    ui.circles.append(UICircle(surface, "c", 25, 25, 10, GREEN, z=-11))
    render_ui(ui)
    assert drawn_area(surface).width == 0