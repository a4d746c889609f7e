from infoorbs.figures import ImageElement, TriangleElement
from infoorbs.screen import Display, DrawCall
from infoorbs.utils import Color


def test_triangle_parse_prefers_x1_y1():
    element = TriangleElement()
    element.parse_data(
        {"x1": 3, "x": 9, "y1": 4, "y": 8, "x2": 10, "y2": 11, "x3": 12, "y3": 13},
        Color.WHITE,
        Color.BLACK,
    )
    assert (element.x, element.y) == (3, 4)
    assert (element.x2, element.y2, element.x3, element.y3) == (10, 11, 12, 13)


def test_triangle_falls_back_to_x_y():
    element = TriangleElement()
    element.parse_data({"x": 9, "y": 8}, Color.WHITE, Color.BLACK)
    assert (element.x, element.y) == (9, 8)


def test_triangle_filled_only_from_bool():
    element = TriangleElement()
    element.parse_data({"filled": 1}, Color.WHITE, Color.BLACK)
    assert element.filled is False
    element.parse_data({"filled": True}, Color.WHITE, Color.BLACK)
    assert element.filled is True


def test_triangle_color():
    element = TriangleElement()
    element.parse_data({"color": "Dark Green"}, Color.WHITE, Color.BLACK)
    assert element.color == Color.DARKGREEN
    element.parse_data({}, Color.PINK, Color.BLACK)
    assert element.color == Color.PINK


def test_triangle_draw_filled_and_outlined():
    element = TriangleElement(x=1, y=2, x2=3, y2=4, x3=5, y3=6, filled=True, color=Color.RED)
    display = Display()
    element.draw(display)
    element.filled = False
    element.draw(display)
    assert display.calls == [
        DrawCall("fill_triangle", (1, 2, 3, 4, 5, 6, Color.RED)),
        DrawCall("draw_triangle", (1, 2, 3, 4, 5, 6, Color.RED)),
    ]


def test_triangle_changed_tracking():
    element = TriangleElement()
    element.parse_data({"x": 5, "color": "red"}, Color.WHITE, Color.BLACK)
    assert element.changed is True
    element.changed = False
    element.parse_data({"x": 5, "color": "red"}, Color.WHITE, Color.BLACK)
    assert element.changed is False


def test_image_parse():
    element = ImageElement()
    element.parse_data({"x": 7, "y": 8, "image": "logo.jpg"}, Color.WHITE, Color.BLACK)
    assert (element.x, element.y, element.image) == (7, 8, "logo.jpg")
    assert element.changed is True


def test_image_draw_without_loader_draws_nothing():
    element = ImageElement(x=1, y=1, image="logo.jpg")
    display = Display()
    element.draw(display)
    assert display.calls == []


def test_image_draw_with_loader():
    data = b"\xff\xd8jpeg"
    requested = []

    def loader(name):
        requested.append(name)
        return data

    element = ImageElement(x=4, y=5, image="logo.jpg", loader=loader)
    display = Display()
    element.draw(display)
    assert requested == ["logo.jpg"]
    assert display.calls == [DrawCall("draw_jpg", (4, 5, data, 1))]


def test_image_draw_missing_data_draws_nothing():
    element = ImageElement(image="missing.jpg", loader=lambda name: None)
    display = Display()
    element.draw(display)
    assert display.calls == []