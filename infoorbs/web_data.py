"""Content of one screen of the web data widget: a label plus text or elements."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any, Union

from infoorbs.element_model import WebDataElementModel
from infoorbs.screen import Display
from infoorbs.utils import Datum, get_wrapped_lines, string_to_color

ColorValue = Union[int, str]

_CENTRE = 120
_LABEL_Y = 70
_DATA_Y = 110
_WRAP_LIMIT = 10


def _to_color(value: ColorValue) -> int:
    return int(string_to_color(value)) if isinstance(value, str) else int(value)


class WebDataModel:
    """One screen's worth of web data.

    Assigning a different label or colour marks the model as changed.
    """

    def __init__(self) -> None:
        self.initialized = False
        self.full_draw = False
        self.changed = False
        self._label = ""
        self._data = ""
        self._elements: list[WebDataElementModel] = []
        self._label_color = -1
        self._data_color = -1
        self._background = -1

    def _set(self, attr: str, value: Any) -> None:
        if getattr(self, attr) != value:
            setattr(self, attr, value)
            self.changed = True

    @property
    def label(self) -> str:
        return self._label

    @label.setter
    def label(self, value: str) -> None:
        self._set("_label", value)

    @property
    def data(self) -> str:
        """Plain text shown when there are no elements."""
        return self._data

    @property
    def elements(self) -> tuple[WebDataElementModel, ...]:
        return tuple(self._elements)

    @property
    def label_color(self) -> int:
        return self._label_color

    @label_color.setter
    def label_color(self, value: ColorValue) -> None:
        self._set("_label_color", _to_color(value))

    @property
    def data_color(self) -> int:
        return self._data_color

    @data_color.setter
    def data_color(self, value: ColorValue) -> None:
        self._set("_data_color", _to_color(value))

    @property
    def background_color(self) -> int:
        return self._background

    @background_color.setter
    def background_color(self, value: ColorValue) -> None:
        self._set("_background", _to_color(value))

    def set_data(self, data: Any, default_color: int, default_background: int) -> None:
        """Set plain text data, or a list of element descriptions."""
        if isinstance(data, Sequence) and not isinstance(data, str):
            if len(data) != len(self._elements):
                self._elements = [WebDataElementModel() for _ in data]
            for model, item in zip(self._elements, data):
                model.parse_data(item, default_color, default_background)
            self.changed = True
            return
        text = str(data)
        if text != self._data:
            self._data = text
            self._elements = []
            self.changed = True

    def parse_data(self, doc: Mapping[str, Any], default_color: int, default_background: int) -> None:
        """Take label, data, colours and draw mode from a JSON object."""
        if not isinstance(doc, Mapping):
            doc = {}
        label = doc.get("label")
        if isinstance(label, str):
            self.label = label

        data = doc.get("data")
        if isinstance(data, list):
            self.set_data(data, default_color, default_background)
        elif isinstance(data, str):
            self.set_data(data, default_color, default_background)
        else:
            # Anything else is shown in its JSON form ("null" when absent).
            self.set_data(json.dumps(data, separators=(",", ":")), default_color, default_background)

        color = doc.get("color")
        self.data_color = color if isinstance(color, str) else default_color
        label_color = doc.get("labelColor")
        self.label_color = label_color if isinstance(label_color, str) else default_color
        background = doc.get("background")
        self.background_color = background if isinstance(background, str) else default_background
        full_draw = doc.get("fullDraw")
        self.full_draw = full_draw if isinstance(full_draw, bool) else False

    def draw(self, display: Display) -> None:
        if not self.initialized or self.full_draw:
            display.fill_screen(self._background)
            self.initialized = True

        display.set_text_color(self._label_color)
        display.set_text_size(2)
        display.set_text_datum(Datum.MC)
        display.draw_string(self._label, _CENTRE, _LABEL_Y, 2)
        display.set_text_datum(Datum.MC)

        if self._elements:
            for element in self._elements:
                element.draw(display)
            return

        display.set_text_color(self._data_color, self._background)
        height = display.font_height() + 10
        for i, line in enumerate(get_wrapped_lines(self._data, _WRAP_LIMIT)):
            display.draw_string(line, _CENTRE, _DATA_Y + height * i, 2)