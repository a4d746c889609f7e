"""Debounced push button."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Optional

LOW = False
HIGH = True


def _millis() -> int:
    return int(time.monotonic() * 1000)


class Button:
    """A button read from a pin level, ignoring changes for a debounce period."""

    PRESSED = LOW
    RELEASED = HIGH

    def __init__(
        self,
        read_pin: Callable[[], bool],
        clock: Optional[Callable[[], int]] = None,
        pull_down: bool = False,
        debounce_ms: int = 100,
    ) -> None:
        self._read_pin = read_pin
        self._clock = clock or _millis
        self._pull_down = pull_down
        self._delay = debounce_ms
        self._ignore_until = 0
        self._has_changed = False
        self._state = LOW if pull_down else HIGH

    def begin(self) -> None:
        """Reset the remembered state to the idle level."""
        self._state = LOW if self._pull_down else HIGH

    def read(self) -> bool:
        """The debounced level."""
        now = self._clock()
        if self._ignore_until > now:
            return self._state
        if bool(self._read_pin()) != self._state:
            self._ignore_until = now + self._delay
            self._state = not self._state
            self._has_changed = True
        return self._state

    def has_changed(self) -> bool:
        """Whether the level changed since the last call."""
        if self._has_changed:
            self._has_changed = False
            return True
        return False

    def toggled(self) -> bool:
        self.read()
        return self.has_changed()

    def pressed(self) -> bool:
        return self.read() == self.PRESSED and self.has_changed()

    def released(self) -> bool:
        return self.read() == self.RELEASED and self.has_changed()