import pytest

from infoorbs.screen import HIGH, LOW, Display, DrawCall, ScreenManager
from infoorbs.utils import Color, Datum

CS = (11, 12, 13, 14, 15)


class PinRecorder:
    def __init__(self):
        self.levels = {}

    def __call__(self, pin, level):
        self.levels[pin] = level


@pytest.fixture
def pins():
    return PinRecorder()


@pytest.fixture
def manager(pins):
    return ScreenManager(Display(), pins, CS)


def low_pins(pins):
    return [pin for pin in CS if pins.levels[pin] is LOW]


def test_construction_deselects_all(manager, pins):
    assert all(pins.levels[pin] is HIGH for pin in CS)
    assert manager.display.initialized is True
    assert DrawCall("fill_screen", (Color.WHITE,)) in manager.display.calls
    assert manager.display.text_datum == Datum.MC
    assert manager.display.rotation == 0


def test_inverted_rotation(pins):
    inverted = ScreenManager(Display(), pins, CS, inverted=True)
    assert inverted.display.rotation == 2


def test_select_screen(manager, pins):
    manager.select_screen(2)
    manager.display.fill_screen(Color.RED)
    assert low_pins(pins) == [CS[2]]
    assert manager.display.calls[-1] == DrawCall("fill_screen", (Color.RED,))


def test_select_screen_inverted(pins):
    inverted = ScreenManager(Display(), pins, CS, inverted=True)
    inverted.select_screen(0)
    assert low_pins(pins) == [CS[4]]


def test_select_all_and_reset(manager, pins):
    manager.select_all_screens()
    manager.display.fill_screen(Color.BLUE)
    assert low_pins(pins) == list(CS)
    assert manager.display.calls[-1] == DrawCall("fill_screen", (Color.BLUE,))
    manager.reset()
    assert low_pins(pins) == []


def test_fill_all_screens(manager, pins):
    manager.fill_all_screens(Color.RED)
    assert manager.display.calls[-1] == DrawCall("fill_screen", (Color.RED,))
    assert low_pins(pins) == []


def test_clear_all_screens(manager):
    manager.clear_all_screens()
    assert manager.display.calls[-1] == DrawCall("fill_screen", (Color.BLACK,))


def test_clear_screen(manager, pins):
    manager.clear_screen(1)
    assert low_pins(pins) == [CS[1]]
    assert manager.display.calls[-1] == DrawCall("fill_screen", (Color.BLACK,))


def test_wrong_chip_select_count(pins):
    with pytest.raises(ValueError):
        ScreenManager(Display(), pins, CS[:3])


def test_text_width_scales_with_length_and_size():
    display = Display()
    single = display.text_width("ab")
    assert display.text_width("abcd") == 2 * single
    display.set_text_size(3)
    assert display.text_width("ab") == 3 * single


def test_font_height_scales_with_size():
    display = Display()
    base = display.font_height(2)
    display.set_text_size(2)
    assert display.font_height(2) == 2 * base


def test_draw_string_returns_width_and_records():
    display = Display()
    width = display.draw_string("hi", 10, 20, 2)
    assert width == display._width_of("hi", 2)
    assert display.calls[-1] == DrawCall("draw_string", ("hi", 10, 20, 2))


def test_set_text_color_without_background_is_transparent():
    display = Display()
    display.set_text_color(Color.GREEN)
    assert display.text_background == Color.GREEN
    display.set_text_color(Color.GREEN, Color.BLACK)
    assert display.text_background == Color.BLACK


def test_dimensions():
    display = Display(320, 200)
    assert (display.width(), display.height()) == (320, 200)