"""Triangle and image elements of a web data screen."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from infoorbs.element import WebDataElement
from infoorbs.screen import Display

ImageLoader = Callable[[str], Optional[bytes]]


@dataclass
class TriangleElement(WebDataElement):
    """A triangle, outlined or filled; the first corner comes from x1/y1 or x/y."""

    x: int = 0
    y: int = 0
    x2: int = 0
    y2: int = 0
    x3: int = 0
    y3: int = 0
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
        for key in ("x2", "y2", "x3", "y3"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        filled = self._bool_field(doc, "filled")
        if filled is not None:
            self.filled = filled
        self.color = self._color_field(doc, "color", default_color)

    def draw(self, display: Display) -> None:
        draw = display.fill_triangle if self.filled else display.draw_triangle
        draw(self.x, self.y, self.x2, self.y2, self.x3, self.y3, self.color)


@dataclass
class ImageElement(WebDataElement):
    """An image referenced by name.

    The image is drawn only when a loader is given that turns the name into
    JPEG bytes; without one, or when the loader finds nothing, nothing is drawn.
    """

    x: int = 0
    y: int = 0
    image: str = ""
    loader: Optional[ImageLoader] = field(default=None, compare=False, repr=False)

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key in ("x", "y"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        image = self._str_field(doc, "image")
        if image is not None:
            self.image = image

    def draw(self, display: Display) -> None:
        if self.loader is None or not self.image:
            return
        data = self.loader(self.image)
        if data:
            display.draw_jpg(self.x, self.y, data, 1)