"""Typed wrapper that builds the right element for a JSON description."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from infoorbs.element import WebDataElement
from infoorbs.figures import ImageElement, TriangleElement
from infoorbs.screen import Display
from infoorbs.shapes import ArcElement, CircleElement, LineElement, RectangleElement
from infoorbs.text_elements import CharacterElement, TextElement


class ElementType(Enum):
    """Kinds of element a web data screen can contain."""

    TEXT = "text"
    CHARACTER = "character"
    LINE = "line"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    CIRCLE = "circle"
    ARC = "arc"
    IMAGE = "image"
    OTHER = "other"

    @classmethod
    def from_name(cls, name: str) -> ElementType:
        """The type with this exact name; anything else is OTHER."""
        try:
            return cls(name)
        except ValueError:
            return cls.OTHER


_FACTORIES: dict[ElementType, type[WebDataElement]] = {
    ElementType.TEXT: TextElement,
    ElementType.CHARACTER: CharacterElement,
    ElementType.LINE: LineElement,
    ElementType.RECTANGLE: RectangleElement,
    ElementType.TRIANGLE: TriangleElement,
    ElementType.CIRCLE: CircleElement,
    ElementType.ARC: ArcElement,
    ElementType.IMAGE: ImageElement,
}


@dataclass
class WebDataElementModel:
    """Holds one element and the type it was created for."""

    type: ElementType = ElementType.OTHER
    element: Optional[WebDataElement] = None
    changed: bool = False

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        """Replace the element with a fresh one built from doc's "type"."""
        self.element = None
        type_name = doc.get("type") if isinstance(doc, Mapping) else None
        if isinstance(type_name, str):
            self.type = ElementType.from_name(type_name)
            factory = _FACTORIES.get(self.type)
            if factory is not None:
                self.element = factory()
        if self.element is not None:
            self.element.parse_data(doc, default_color, default_background)

    def draw(self, display: Display) -> None:
        if self.element is not None and self.type is not ElementType.OTHER:
            self.element.draw(display)