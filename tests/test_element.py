from dataclasses import dataclass

import pytest

from infoorbs.element import INT32_MAX, WebDataElement
from infoorbs.screen import Display
from infoorbs.shapes import CircleElement
from infoorbs.utils import Color


@dataclass
class Dot(WebDataElement):
    x: int = 0
    color: int = -1

    def parse_data(self, doc, default_color, default_background):
        x = self._int_field(doc, "x")
        if x is not None:
            self.x = x
        self.color = self._color_field(doc, "color", default_color)

    def draw(self, display):
        display.fill_circle(self.x, 0, 1, self.color)


def test_base_class_is_abstract():
    with pytest.raises(TypeError):
        WebDataElement()


def test_new_element_is_unchanged():
    element = CircleElement()
    assert element.changed is False


def test_assigning_new_value_marks_changed():
    element = CircleElement()
    element.x = 5
    assert element.changed is True
    assert element.x == 5


def test_assigning_same_value_keeps_unchanged():
    element = CircleElement()
    element.x = 0
    assert element.changed is False


def test_changed_can_be_reset():
    element = CircleElement()
    element.x = 1
    element.changed = False
    assert element.changed is False


@pytest.mark.parametrize("value", [True, 1.5, "7", None, INT32_MAX + 1])
def test_int_field_rejects_non_int32(value):
    element = CircleElement()
    element.parse_data({"x": value}, Color.WHITE, Color.BLACK)
    assert element.x == 0


def test_int_field_accepts_integer():
    element = CircleElement()
    element.parse_data({"x": INT32_MAX}, Color.WHITE, Color.BLACK)
    assert element.x == INT32_MAX


def test_color_by_name_or_default():
    element = CircleElement()
    element.parse_data({"color": "Red"}, Color.WHITE, Color.BLACK)
    assert element.color == Color.RED
    element.parse_data({}, Color.WHITE, Color.BLACK)
    assert element.color == Color.WHITE


def test_non_mapping_document_is_treated_as_empty():
    element = CircleElement()
    element.parse_data(None, Color.BLUE, Color.BLACK)
    assert element.x == 0
    assert element.color == Color.BLUE


def test_subclass_draws_on_display():
    display = Display()
    dot = Dot(x=4, color=int(Color.GREEN))
    dot.draw(display)
    assert display.calls[-1].args == (4, 0, 1, Color.GREEN)