import pytest

from infoorbs.screen import Display, ScreenManager
from infoorbs.utils import Color
from infoorbs.widget import MAX_WIDGETS, ScreenWidget, Widget, WidgetSet


class Recorder(Widget):
    def __init__(self, manager, name, log, busy_writer=None):
        super().__init__(manager, busy_writer)
        self.name = name
        self.log = log

    def setup(self):
        self.log.append((self.name, "setup"))

    def update(self, force=False):
        self.log.append((self.name, "update", force))

    def draw(self, force=False):
        self.log.append((self.name, "draw", force))

    def change_mode(self):
        self.log.append((self.name, "mode"))


class Single(ScreenWidget):
    def setup(self):
        self.ready = True

    def draw(self):
        self.manager.clear_screen(self.screen_index)

    def update(self):
        pass


@pytest.fixture
def manager():
    return ScreenManager(Display(), lambda pin, level: None, [1, 2, 3, 4, 5])


def black_fills(manager):
    return sum(1 for c in manager.display.calls if c.name == "fill_screen" and c.args == (Color.BLACK,))


def make_set(manager, names):
    log = []
    ws = WidgetSet(manager)
    widgets = [Recorder(manager, n, log) for n in names]
    for w in widgets:
        ws.add(w)
    return ws, widgets, log


def test_add_sets_up_widget_and_limits_count(manager):
    ws, widgets, log = make_set(manager, ["a", "b"])
    assert log == [("a", "setup"), ("b", "setup")]
    for i in range(MAX_WIDGETS - 2):
        assert ws.add(Recorder(manager, f"x{i}", log)) is True
    assert ws.add(Recorder(manager, "extra", log)) is False
    assert len(ws) == MAX_WIDGETS


def test_next_and_prev_wrap_around(manager):
    ws, widgets, log = make_set(manager, ["a", "b", "c"])
    assert ws.current() is widgets[0]
    ws.prev()
    assert ws.current() is widgets[2]
    ws.next()
    assert ws.current() is widgets[0]
    ws.next()
    assert ws.current() is widgets[1]


def test_switch_clears_sets_up_and_forces_draw(manager):
    ws, widgets, log = make_set(manager, ["a", "b"])
    log.clear()
    before = black_fills(manager)
    ws.next()
    assert log == [("b", "setup"), ("b", "draw", True)]
    assert black_fills(manager) == before + 1


def test_draw_current_clears_only_once_until_requested(manager):
    ws, widgets, log = make_set(manager, ["a"])
    ws.draw_current()
    ws.draw_current()
    assert black_fills(manager) == 1
    ws.set_clear_screens_on_draw_current()
    ws.draw_current()
    assert black_fills(manager) == 2
    assert log.count(("a", "draw", False)) == 3


def test_update_current_and_change_mode(manager):
    ws, widgets, log = make_set(manager, ["a", "b"])
    log.clear()
    ws.update_current()
    ws.change_mode()
    assert log == [("a", "update", False), ("a", "mode")]


def test_initialize_shows_loading_and_updates_all(manager):
    ws, widgets, log = make_set(manager, ["a", "b"])
    log.clear()
    assert ws.initial_update_done() is False
    ws.initialize_all_widgets_data()
    assert ws.initial_update_done() is True
    assert log == [("a", "update", False), ("b", "update", False)]
    strings = [c.args for c in manager.display.calls if c.name == "draw_string"]
    assert strings[-1] == ("Loading Data", 120, 120, 1)


def test_empty_set_has_no_current(manager):
    with pytest.raises(LookupError):
        WidgetSet(manager).current()


def test_set_busy_writes_level(manager):
    levels = []
    widget = Recorder(manager, "a", [], busy_writer=levels.append)
    widget.set_busy(True)
    widget.set_busy(False)
    assert widget.manager is manager
    assert levels == [True, False]


def test_screen_widget_keeps_its_screen(manager):
    widget = Single(manager, 3)
    widget.draw()
    assert widget.screen_index == 3
    assert manager.display.calls[-1].args == (Color.BLACK,)