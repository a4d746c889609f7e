"""Widget that shows the time as large digits across the five screens."""

from __future__ import annotations

from collections.abc import Callable
from time import monotonic
from typing import Optional

from infoorbs.global_time import GlobalTime
from infoorbs.screen import ScreenManager
from infoorbs.utils import Color
from infoorbs.widget import Widget

# Screens that hold the hour and minute digits; screen 2 shows the colon.
_DIGIT_SCREENS = (0, 1, 3, 4)
_COLON_SCREEN = 2
_DIGIT_FONT = 7
_DIGIT_SIZE = 5


def _millis() -> int:
    return int(monotonic() * 1000)


class ClockWidget(Widget):
    """Hours on the first two screens, a blinking colon, minutes on the last two."""

    def __init__(
        self,
        manager: ScreenManager,
        time: Optional[GlobalTime] = None,
        clock: Optional[Callable[[], int]] = None,
        shadowing: bool = False,
        show_second_ticks: bool = True,
        show_am_pm: bool = False,
        foreground_color: int = Color.WHITE,
        background_color: int = Color.DARKGREY,
        screen_size: int = 240,
    ) -> None:
        super().__init__(manager)
        self.time = time if time is not None else GlobalTime()
        self._clock = clock or _millis
        self.shadowing = shadowing
        self.show_second_ticks = show_second_ticks
        self.show_am_pm = show_am_pm
        self.foreground_color = int(foreground_color)
        self.background_color = int(background_color)
        self.screen_size = screen_size

        self._second_timer = 2000
        self._second_timer_prev = 0

        self._hour = 0
        self._minute = 0
        self._second = 0
        self._last_hour = -1
        self._last_minute = -1
        self._last_second = -1

        self._digits = ["", "", "", ""]
        self._last_digits = ["-1", "-1", "-1", "-1"]

    @property
    def digits(self) -> tuple[str, ...]:
        """The four digits currently to be shown: hour tens, hour units, minute tens, minute units."""
        return tuple(self._digits)

    def setup(self) -> None:
        self._last_digits = ["-1", "-1", "-1", "-1"]

    def update(self, force: bool = False) -> None:
        if self._clock() - self._second_timer_prev < self._second_timer and not force:
            return

        self._hour = self.time.hour
        self._minute = self.time.minute
        self._second = self.time.second

        if self._last_hour != self._hour or force:
            if self._hour < 10:
                self._digits[0] = "0" if self.time.format_24_hour else " "
            else:
                self._digits[0] = str(self._hour // 10)
            self._digits[1] = str(self._hour % 10)
            self._last_hour = self._hour

        if self._last_minute != self._minute or force:
            padded = f"{self._minute:02d}"
            self._digits[2] = padded[0:1]
            self._digits[3] = padded[1:2]
            self._last_minute = self._minute

    def draw(self, force: bool = False) -> None:
        for slot, (screen, digit) in enumerate(zip(_DIGIT_SCREENS, self._digits)):
            if self._last_digits[slot] != digit or force:
                self._display_digit(screen, digit, self.foreground_color, self.shadowing)
                self._last_digits[slot] = digit
                if screen == 0 and not self.shadowing and digit == " ":
                    self.manager.clear_screen(0)

        if self._second != self._last_second or force:
            colon_color = self.foreground_color if self._second % 2 == 0 else self.background_color
            self._display_digit(_COLON_SCREEN, ":", colon_color, False)
            if self.show_second_ticks:
                self._display_seconds(_COLON_SCREEN, self._last_second, Color.BLACK)
                self._display_seconds(_COLON_SCREEN, self._second, self.foreground_color)
            self._last_second = self._second
            if not self.time.format_24_hour and self.show_am_pm:
                self._display_am_pm(self.foreground_color)

    def change_mode(self) -> None:
        """Switch between 12 and 24 hour display."""
        self.time.format_24_hour = not self.time.format_24_hour
        self.draw(True)

    def _display_digit(self, screen: int, digit: str, color: int, shadowing: bool) -> None:
        self.manager.select_screen(screen)
        display = self.manager.display
        centre = self.screen_size // 2
        display.set_text_size(_DIGIT_SIZE)
        if shadowing and _DIGIT_FONT == 7:
            display.set_text_color(self.background_color, Color.BLACK)
            display.draw_string("8", centre, centre, _DIGIT_FONT)
            display.set_text_color(color)
        else:
            display.set_text_color(color, Color.BLACK)
        display.draw_string(digit, centre, centre, _DIGIT_FONT)

    def _display_seconds(self, screen: int, seconds: int, color: int) -> None:
        self.manager.reset()
        self.manager.select_screen(screen)
        display = self.manager.display
        centre = self.screen_size // 2
        start = 6 * seconds + 180 if seconds < 30 else 6 * seconds - 180
        display.draw_smooth_arc(centre, centre, 120, 110, start, start + 6, color, Color.BLACK)

    def _display_am_pm(self, color: int) -> None:
        self.manager.select_screen(_COLON_SCREEN)
        display = self.manager.display
        display.set_text_size(4)
        display.set_text_color(color, Color.BLACK, True)
        marker = "PM" if self.time.is_pm() else "AM"
        display.draw_string(marker, self.screen_size - 50, self.screen_size // 2, 1)