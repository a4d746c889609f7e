"""Display surface and chip-select handling for the row of round screens."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from infoorbs.utils import Color, Datum

log = logging.getLogger(__name__)

NUM_SCREENS = 5
LOW = False
HIGH = True

# Approximate glyph metrics for the built-in fonts, at text size 1.
_FONT_HEIGHTS = {1: 8, 2: 16, 4: 26, 6: 48, 7: 48, 8: 75}
_CHAR_WIDTHS = {1: 6, 2: 8, 4: 14, 6: 27, 7: 32, 8: 55}


@dataclass(frozen=True)
class DrawCall:
    """One recorded drawing operation."""

    name: str
    args: tuple[Any, ...]


class Display:
    """In-memory panel that records every drawing call made on it."""

    def __init__(self, width: int = 240, height: int = 240) -> None:
        self._width = width
        self._height = height
        self.calls: list[DrawCall] = []
        self.initialized = False
        self.rotation = 0
        self.text_datum = Datum.TL
        self.text_size = 1
        self.text_color = int(Color.WHITE)
        self.text_background = int(Color.BLACK)
        self.text_fill = False
        self.text_font = 1

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append(DrawCall(name, args))

    def init(self) -> None:
        self.initialized = True
        self._record("init")

    def set_rotation(self, rotation: int) -> None:
        self.rotation = rotation
        self._record("set_rotation", rotation)

    def fill_screen(self, color: int) -> None:
        self._record("fill_screen", color)

    def set_text_datum(self, datum: int) -> None:
        self.text_datum = datum
        self._record("set_text_datum", datum)

    def set_text_size(self, size: int) -> None:
        self.text_size = max(1, size)
        self._record("set_text_size", size)

    def set_text_color(self, color: int, background: int | None = None, fill: bool = False) -> None:
        """Set the text colour; without a background the text is drawn transparently."""
        self.text_color = color
        self.text_background = color if background is None else background
        self.text_fill = fill
        self._record("set_text_color", color, self.text_background, fill)

    def set_text_font(self, font: int) -> None:
        self.text_font = font
        self._record("set_text_font", font)

    def draw_string(self, text: str, x: int, y: int, font: int | None = None) -> int:
        font = self.text_font if font is None else font
        self._record("draw_string", text, x, y, font)
        return self._width_of(text, font)

    def draw_centre_string(self, text: str, x: int, y: int, font: int | None = None) -> int:
        font = self.text_font if font is None else font
        self._record("draw_centre_string", text, x, y, font)
        return self._width_of(text, font)

    def draw_char(self, char: str, x: int, y: int, font: int | None = None) -> int:
        font = self.text_font if font is None else font
        self._record("draw_char", char, x, y, font)
        return self._width_of(char, font)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._record("fill_rect", x, y, w, h, color)

    def draw_rect(self, x: int, y: int, w: int, h: int, color: int) -> None:
        self._record("draw_rect", x, y, w, h, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: int) -> None:
        self._record("draw_line", x1, y1, x2, y2, color)

    def fill_circle(self, x: int, y: int, radius: int, color: int) -> None:
        self._record("fill_circle", x, y, radius, color)

    def draw_circle(self, x: int, y: int, radius: int, color: int) -> None:
        self._record("draw_circle", x, y, radius, color)

    def fill_triangle(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: int) -> None:
        self._record("fill_triangle", x1, y1, x2, y2, x3, y3, color)

    def draw_triangle(self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: int) -> None:
        self._record("draw_triangle", x1, y1, x2, y2, x3, y3, color)

    def draw_arc(
        self,
        x: int,
        y: int,
        radius: int,
        inner_radius: int,
        start_angle: int,
        end_angle: int,
        fg_color: int,
        bg_color: int,
        smooth: bool = True,
    ) -> None:
        self._record("draw_arc", x, y, radius, inner_radius, start_angle, end_angle, fg_color, bg_color, smooth)

    def draw_smooth_arc(
        self,
        x: int,
        y: int,
        radius: int,
        inner_radius: int,
        start_angle: int,
        end_angle: int,
        fg_color: int,
        bg_color: int,
    ) -> None:
        self._record("draw_smooth_arc", x, y, radius, inner_radius, start_angle, end_angle, fg_color, bg_color)

    def draw_jpg(self, x: int, y: int, data: bytes, scale: int = 1) -> None:
        self._record("draw_jpg", x, y, bytes(data), scale)

    def width(self) -> int:
        return self._width

    def height(self) -> int:
        return self._height

    def font_height(self, font: int | None = None) -> int:
        font = self.text_font if font is None else font
        return _FONT_HEIGHTS.get(font, _FONT_HEIGHTS[1]) * self.text_size

    def text_width(self, text: str) -> int:
        return self._width_of(text, self.text_font)

    def _width_of(self, text: str, font: int) -> int:
        return len(text) * _CHAR_WIDTHS.get(font, _CHAR_WIDTHS[1]) * self.text_size


PinWriter = Callable[[int, bool], None]


class ScreenManager:
    """Routes drawing on a shared display to one or all screens via chip selects."""

    def __init__(
        self,
        display: Display,
        pin_writer: PinWriter,
        chip_selects: Sequence[int],
        inverted: bool = False,
    ) -> None:
        if len(chip_selects) != NUM_SCREENS:
            raise ValueError(f"expected {NUM_SCREENS} chip-select pins, got {len(chip_selects)}")
        self.display = display
        self._write = pin_writer
        self._chip_selects = tuple(chip_selects)
        self.inverted = inverted

        for pin in self._chip_selects:
            self._write(pin, LOW)

        display.init()
        display.set_rotation(2 if inverted else 0)
        display.fill_screen(Color.WHITE)
        display.set_text_datum(Datum.MC)
        self.reset()
        log.info("ScreenManager initialized with chip selects %s", self._chip_selects)

    @property
    def chip_selects(self) -> tuple[int, ...]:
        return self._chip_selects

    def select_screen(self, screen: int) -> None:
        """Enable exactly one screen."""
        for i in range(NUM_SCREENS):
            current = NUM_SCREENS - i - 1 if self.inverted else i
            self._write(self._chip_selects[current], LOW if i == screen else HIGH)

    def select_all_screens(self) -> None:
        for pin in self._chip_selects:
            self._write(pin, LOW)

    def reset(self) -> None:
        """Deselect every screen."""
        for pin in self._chip_selects:
            self._write(pin, HIGH)

    def fill_all_screens(self, color: int) -> None:
        self.select_all_screens()
        self.display.fill_screen(color)
        self.reset()

    def clear_all_screens(self) -> None:
        self.fill_all_screens(Color.BLACK)

    def clear_screen(self, screen: int) -> None:
        self.select_screen(screen)
        self.display.fill_screen(Color.BLACK)