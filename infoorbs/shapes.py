"""Arc, circle, line and rectangle elements of a web data screen."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from infoorbs.element import WebDataElement
from infoorbs.screen import Display

_UINT32_MASK = 0xFFFFFFFF


@dataclass
class ArcElement(WebDataElement):
    """A ring segment between two angles."""

    x: int = 0
    y: int = 0
    radius: int = 0
    inner_radius: int = 0
    angle_start: int = 0
    angle_end: int = 0
    color: int = -1
    background: int = -1

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key, attr in (("x", "x"), ("y", "y"), ("radius", "radius"), ("innerRadius", "inner_radius")):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, attr, value)
        for key, attr in (("angleStart", "angle_start"), ("angleEnd", "angle_end")):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, attr, value & _UINT32_MASK)
        self.color = self._color_field(doc, "color", default_color)
        self.background = self._color_field(doc, "background", default_background)

    def draw(self, display: Display) -> None:
        display.draw_arc(
            self.x,
            self.y,
            self.radius,
            self.inner_radius,
            self.angle_start,
            self.angle_end,
            self.color,
            self.background,
            True,
        )


@dataclass
class CircleElement(WebDataElement):
    """A circle, outlined or filled."""

    x: int = 0
    y: int = 0
    radius: int = 0
    filled: bool = False
    color: int = -1

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key in ("x", "y", "radius"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        # "filled" is only honoured when given as an integer.
        filled = self._int_field(doc, "filled")
        if filled is not None:
            self.filled = bool(filled)
        self.color = self._color_field(doc, "color", default_color)

    def draw(self, display: Display) -> None:
        if self.filled:
            display.fill_circle(self.x, self.y, self.radius, self.color)
        else:
            display.draw_circle(self.x, self.y, self.radius, self.color)


@dataclass
class LineElement(WebDataElement):
    """A straight line between two points."""

    x: int = 0
    y: int = 0
    x2: int = 0
    y2: int = 0
    color: int = -1

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key in ("x", "y", "x2", "y2"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        self.color = self._color_field(doc, "color", default_color)

    def draw(self, display: Display) -> None:
        display.draw_line(self.x, self.y, self.x2, self.y2, self.color)


@dataclass
class RectangleElement(WebDataElement):
    """A rectangle, outlined or filled.

    The corner comes from x1/y1 or x/y; the size from width/height, or from
    the opposite corner x2/y2.
    """

    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    filled: bool = False
    color: int = -1

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        x = self._int_field(doc, "x1")
        if x is None:
            x = self._int_field(doc, "x")
        if x is not None:
            self.x = x
        y = self._int_field(doc, "y1")
        if y is None:
            y = self._int_field(doc, "y")
        if y is not None:
            self.y = y

        x2 = self._int_field(doc, "x2")
        if x2 is not None:
            self.width = x2 - self.x
        y2 = self._int_field(doc, "y2")
        if y2 is not None:
            self.width = y2 - self.x
        y2_value = self._as_int(doc, "y2")
        if y2_value:
            self.height = y2_value - self.y

        height = self._int_field(doc, "height")
        if height is not None:
            self.height = height
        width = self._int_field(doc, "width")
        if width is not None:
            self.width = width
        filled = self._bool_field(doc, "filled")
        if filled is not None:
            self.filled = filled
        self.color = self._color_field(doc, "color", default_color)

    def draw(self, display: Display) -> None:
        if self.filled:
            display.fill_rect(self.x, self.y, self.width, self.height, self.color)
        else:
            display.draw_rect(self.x, self.y, self.width, self.height, self.color)