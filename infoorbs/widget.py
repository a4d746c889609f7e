"""Widget base classes and the set of widgets cycled through on the screens."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Optional

from infoorbs.screen import ScreenManager
from infoorbs.utils import Color

log = logging.getLogger(__name__)

MAX_WIDGETS = 5

BusyWriter = Callable[[bool], None]


class Widget(ABC):
    """Something that fetches data and draws it over the screens."""

    def __init__(self, manager: ScreenManager, busy_writer: Optional[BusyWriter] = None) -> None:
        self.manager = manager
        self._busy_writer = busy_writer

    @abstractmethod
    def setup(self) -> None:
        """Prepare the widget before it is shown."""

    @abstractmethod
    def update(self, force: bool = False) -> None:
        """Refresh the widget's data."""

    @abstractmethod
    def draw(self, force: bool = False) -> None:
        """Draw what changed, or everything when forced."""

    @abstractmethod
    def change_mode(self) -> None:
        """React to the mode button."""

    def set_busy(self, busy: bool) -> None:
        """Drive the busy indicator, if one is attached."""
        if self._busy_writer is not None:
            self._busy_writer(busy)


class ScreenWidget(ABC):
    """A widget that occupies a single screen."""

    def __init__(self, manager: ScreenManager, screen_index: int) -> None:
        self.manager = manager
        self.screen_index = screen_index

    @abstractmethod
    def setup(self) -> None:
        """Prepare the widget."""

    @abstractmethod
    def draw(self) -> None:
        """Draw the widget on its screen."""

    @abstractmethod
    def update(self) -> None:
        """Refresh the widget's data."""


class WidgetSet:
    """Up to MAX_WIDGETS widgets, one of which is shown at a time."""

    def __init__(self, manager: ScreenManager) -> None:
        self.manager = manager
        self._widgets: list[Widget] = []
        self._current = 0
        self._clear_on_draw = True
        self._initialized = False

    def __len__(self) -> int:
        return len(self._widgets)

    def add(self, widget: Widget) -> bool:
        """Set up and append a widget; returns False when the set is full."""
        if len(self._widgets) >= MAX_WIDGETS:
            log.error("Maximum of %d widgets reached, unable to add", MAX_WIDGETS)
            return False
        self._widgets.append(widget)
        widget.setup()
        return True

    def current(self) -> Widget:
        if not self._widgets:
            raise LookupError("the widget set is empty")
        return self._widgets[self._current]

    def draw_current(self) -> None:
        if self._clear_on_draw:
            self.manager.clear_all_screens()
            self._clear_on_draw = False
        self.current().draw()

    def update_current(self) -> None:
        self.current().update()

    def change_mode(self) -> None:
        self.current().change_mode()

    def set_clear_screens_on_draw_current(self) -> None:
        self._clear_on_draw = True

    def next(self) -> None:
        self._current += 1
        if self._current >= len(self._widgets):
            self._current = 0
        self._switch_widget()

    def prev(self) -> None:
        self._current -= 1
        if self._current < 0:
            self._current = len(self._widgets) - 1
        self._switch_widget()

    def _switch_widget(self) -> None:
        self.manager.clear_all_screens()
        widget = self.current()
        widget.setup()
        widget.draw(True)

    def show_loading(self) -> None:
        self.manager.fill_all_screens(Color.BLACK)
        self.manager.select_screen(2)
        display = self.manager.display
        display.fill_screen(Color.BLACK)
        display.set_text_color(Color.WHITE)
        display.set_text_size(3)
        centre = display.width() // 2
        display.draw_string("Loading Data", centre, centre, 1)

    def update_all(self) -> None:
        for index, widget in enumerate(self._widgets):
            log.info("updating widget #%d", index)
            widget.update()

    def initial_update_done(self) -> bool:
        return self._initialized

    def initialize_all_widgets_data(self) -> None:
        self.show_loading()
        self.update_all()
        self._initialized = True