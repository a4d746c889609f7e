"""Widget that shows JSON fetched from a URL across the five screens."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import Any, Optional

import requests

from infoorbs.screen import NUM_SCREENS, ScreenManager
from infoorbs.utils import Color
from infoorbs.web_data import WebDataModel
from infoorbs.widget import Widget

log = logging.getLogger(__name__)


def _millis() -> int:
    return int(time.monotonic() * 1000)


class WebDataWidget(Widget):
    """Polls a URL for screen descriptions and draws them."""

    def __init__(
        self,
        manager: ScreenManager,
        url: str,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], int]] = None,
    ) -> None:
        super().__init__(manager)
        self.url = url
        self._session = session or requests.Session()
        self._clock = clock or _millis
        self.last_update = 0
        self.update_delay = 1000
        self.models = tuple(WebDataModel() for _ in range(NUM_SCREENS))
        self.default_color = int(Color.WHITE)
        self.default_background = int(Color.BLACK)

    def setup(self) -> None:
        pass

    def change_mode(self) -> None:
        pass

    def draw(self, force: bool = False) -> None:
        for index, model in enumerate(self.models):
            if force:
                model.initialized = False
            if model.changed or force:
                self.manager.select_screen(index)
                model.draw(self.manager.display)
                model.changed = False

    def update(self, force: bool = False) -> None:
        if not (force or self.last_update == 0 or self._clock() - self.last_update >= self.update_delay):
            return
        try:
            response = self._session.get(self.url, timeout=10)
        except requests.RequestException as exc:
            log.error("HTTP request failed, error: %s", exc)
            return
        try:
            doc = response.json()
        except ValueError:
            log.error("Could not parse the web data response")
            return
        self.apply_response(doc)
        self.last_update = self._clock()

    def apply_response(self, doc: Any) -> None:
        """Take the refresh interval and the per-screen data from a response."""
        if isinstance(doc, dict):
            interval = doc.get("interval")
            if isinstance(interval, int) and not isinstance(interval, bool):
                self.update_delay = interval
            displays = doc.get("displays")
            entries = displays if isinstance(displays, list) else []
        elif isinstance(doc, list):
            # Older responses are a bare list of screens.
            entries = doc
        else:
            entries = []
        for model, entry in zip(self.models, entries):
            model.parse_data(entry if isinstance(entry, dict) else {}, self.default_color, self.default_background)