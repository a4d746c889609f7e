"""Widget that shows the progress of the network connection."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import IntEnum
from typing import Optional

from infoorbs.screen import ScreenManager
from infoorbs.utils import Color
from infoorbs.widget import Widget

log = logging.getLogger(__name__)

_STEP_MS = 500
_TIMEOUT_MS = 10000
_MAX_DOTS = 3


class WifiStatus(IntEnum):
    """Connection states reported by the network interface."""

    IDLE = 0
    NO_SSID_AVAIL = 1
    SCAN_COMPLETED = 2
    CONNECTED = 3
    CONNECT_FAILED = 4
    CONNECTION_LOST = 5
    DISCONNECTED = 6
    NO_SHIELD = 255


_DESCRIPTIONS = {
    WifiStatus.CONNECTED: "Connected",
    WifiStatus.NO_SSID_AVAIL: "No SSID available",
    WifiStatus.CONNECT_FAILED: "Connection failed",
    WifiStatus.IDLE: "Idle status",
    WifiStatus.DISCONNECTED: "Disconnected",
}


def describe_status(status: int) -> str:
    """A short text for a connection state."""
    return _DESCRIPTIONS.get(status, "Unknown")


class WifiWidget(Widget):
    """Animated "Connecting" screen, then success or the reason for failure."""

    def __init__(
        self,
        manager: ScreenManager,
        ssid: str = "",
        status_source: Optional[Callable[[], int]] = None,
    ) -> None:
        super().__init__(manager)
        self.ssid = ssid
        self._status_source = status_source or (lambda: WifiStatus.CONNECTED)
        self.connected = False
        self.connection_failed = False
        self._displayed_error = False
        self._displayed_success = False
        self.connection_string = ""
        self.dots = ""
        self.connection_timer = 0

    def is_connected(self) -> bool:
        return self.connected

    def setup(self) -> None:
        display = self.manager.display
        self.manager.select_all_screens()
        display.fill_screen(Color.BLACK)
        display.set_text_size(2)
        display.set_text_color(Color.WHITE)

        self.manager.select_screen(0)
        display.draw_centre_string("Connecting" + self.connection_string, 120, 80, 1)

        self.manager.select_screen(1)
        display.draw_centre_string("Connecting to", 120, 80, 1)
        display.draw_centre_string("WiFi..", 120, 100, 1)
        display.draw_centre_string(self.ssid, 120, 130, 1)
        log.info("Connecting to WiFi..")

    def update(self, force: bool = False) -> None:
        if self._status_source() == WifiStatus.CONNECTED:
            self.connected = True
            self.connection_string = "Connected"
            return
        self.connection_timer += _STEP_MS
        self.dots += "."
        if len(self.dots) > _MAX_DOTS:
            self.dots = ""
        if self.connection_timer > _TIMEOUT_MS:
            self.connection_failed = True
            self.connection_string = describe_status(self._status_source())

    def draw(self, force: bool = False) -> None:
        display = self.manager.display
        if not self.connected and not self.connection_failed:
            self.manager.select_screen(0)
            display.fill_rect(0, 100, 240, 100, Color.BLACK)
            display.draw_centre_string(self.dots, 120, 100, 1)
        elif self.connected and not self._displayed_success:
            self._displayed_success = True
            self.manager.select_screen(0)
            display.fill_screen(Color.BLACK)
            display.draw_centre_string("Connected", 120, 100, 1)
            log.info("Connected to WiFi")
        elif self.connection_failed and not self._displayed_error:
            self._displayed_error = True
            self.manager.select_screen(0)
            display.draw_centre_string("Connection", 120, 80, 1)
            display.fill_rect(0, 100, 240, 100, Color.BLACK)
            display.draw_centre_string(self.connection_string, 120, 100, 1)

    def change_mode(self) -> None:
        pass