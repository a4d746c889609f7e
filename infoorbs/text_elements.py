"""Text and single-character elements of a web data screen."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from infoorbs.element import WebDataElement
from infoorbs.screen import Display
from infoorbs.utils import Datum, string_to_alignment


def _apply_common_text_fields(element: Any, doc: Mapping[str, Any]) -> None:
    """Copy position, font, size and alignment from doc where present."""
    for key in ("x", "y", "font", "size"):
        value = element._int_field(doc, key)
        if value is not None:
            setattr(element, key, value)


@dataclass
class TextElement(WebDataElement):
    """A string drawn at a position with a font, size and alignment."""

    x: int = 0
    y: int = 0
    text: str = ""
    font: int = 2
    size: int = 2
    alignment: int = int(Datum.MC)
    color: int = -1
    background: int = -1

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key in ("x", "y"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        text = self._str_field(doc, "text")
        if text is not None:
            self.text = text
        for key in ("font", "size"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        alignment = self._str_field(doc, "alignment")
        if alignment is not None:
            self.alignment = int(string_to_alignment(alignment))
        self.color = self._color_field(doc, "color", default_color)
        self.background = self._color_field(doc, "background", default_background)

    def draw(self, display: Display) -> None:
        display.set_text_font(self.font)
        display.set_text_datum(self.alignment)
        display.set_text_size(self.size)
        display.set_text_color(self.color, self.background)
        display.draw_string(self.text, self.x, self.y, self.font)


@dataclass
class CharacterElement(WebDataElement):
    """A single character drawn at a position with a font, size and alignment."""

    x: int = 0
    y: int = 0
    character: str = ""
    font: int = 2
    size: int = 2
    alignment: int = int(Datum.MC)
    color: int = -1
    background: int = -1

    def _set_character(self, value: str) -> None:
        # Only the first character is kept; any differing input counts as a change.
        if self.character != value:
            self.character = value[:1]
            self.changed = True

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        for key in ("x", "y"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        character = self._str_field(doc, "character")
        if character is not None:
            self._set_character(character)
        for key in ("font", "size"):
            value = self._int_field(doc, key)
            if value is not None:
                setattr(self, key, value)
        alignment = self._str_field(doc, "alignment")
        if alignment is not None:
            self.alignment = int(string_to_alignment(alignment))
        self.color = self._color_field(doc, "color", default_color)
        self.background = self._color_field(doc, "background", default_background)

    def draw(self, display: Display) -> None:
        display.set_text_datum(self.alignment)
        display.set_text_size(self.size)
        display.set_text_color(self.color, self.background)
        display.draw_char((self.character or "\0")[0], self.x, self.y, self.font)