"""Widget that shows a clock, current weather and a three day forecast."""

from __future__ import annotations

import json
import logging
import math
from collections.abc import Callable
from datetime import datetime, timezone
from time import monotonic
from typing import Any, Optional

import requests

from infoorbs.global_time import WEEKDAY_NAMES, GlobalTime
from infoorbs.screen import ScreenManager
from infoorbs.utils import Color, Datum
from infoorbs.weather import FORECAST_DAYS, WeatherData
from infoorbs.widget import Widget

log = logging.getLogger(__name__)

MODE_HIGHS = 0
MODE_LOWS = 1

_BASE_URL = "https://weather.visualcrossing.com/VisualCrossingWebServices/rest/services/timeline/"
_CENTRE = 120
_LINE_WIDTH = 18
_DESCRIPTION_LINES = 4
_SECONDS_PER_DAY = 86400

_ICONS = {
    "partly-cloudy-night": "moonCloud",
    "partly-cloudy-day": "sunClouds",
    "clear-day": "sun",
    "clear-night": "moon",
    "snow": "snow",
    "rain": "rain",
    "fog": "clouds",
    "wind": "clouds",
    "cloudy": "clouds",
}

IconLoader = Callable[[str], Optional[bytes]]


def _millis() -> int:
    return int(monotonic() * 1000)


def build_weather_url(location: str, api_key: str, metric: bool = True) -> str:
    """The forecast request address for a location."""
    units = "metric" if metric else "us"
    return (
        f"{_BASE_URL}{location}/next3days?key={api_key}&unitGroup={units}"
        "&include=days,current&iconSet=icons1"
    )


def wrap_description(text: str) -> list[str]:
    """Split a description into four lines of at most 18 characters, breaking at spaces.

    Each line keeps the space it was broken at. A word too long for a line is cut.
    """
    message = text + " "
    lines = []
    start = 0
    for _ in range(_DESCRIPTION_LINES):
        space = message.rfind(" ", max(start - 1, 0), start + _LINE_WIDTH)
        if space < 0 or (start == 0 and space < 0):
            end = min(start + _LINE_WIDTH, len(message))
        else:
            end = max(space + 1, start)
        lines.append(message[start:end])
        start = end
    return lines


def icon_name(condition: str) -> Optional[str]:
    """The icon that shows a weather condition, or None when there is none."""
    return _ICONS.get(condition)


def _lookup(doc: Any, *path: Any) -> Any:
    for key in path:
        if isinstance(key, int):
            doc = doc[key] if isinstance(doc, list) and 0 <= key < len(doc) else None
        else:
            doc = doc.get(key) if isinstance(doc, dict) else None
    return doc


def _as_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _as_float(value: Any) -> float:
    if isinstance(value, (int, float)):
        return float(value)
    return 0.0


class WeatherWidget(Widget):
    """Clock, description, current icon, temperatures and forecast over five screens."""

    def __init__(
        self,
        manager: ScreenManager,
        time: Optional[GlobalTime] = None,
        location: str = "",
        api_key: str = "",
        metric: bool = True,
        session: Optional[requests.Session] = None,
        clock: Optional[Callable[[], int]] = None,
        icon_loader: Optional[IconLoader] = None,
        max_retries: int = 3,
    ) -> None:
        super().__init__(manager)
        self.time = time if time is not None else GlobalTime()
        self.metric = metric
        self.url = build_weather_url(location, api_key, metric)
        self._session = session or requests.Session()
        self._clock = clock or _millis
        self._icon_loader = icon_loader
        self.max_retries = max_retries
        self.mode = MODE_HIGHS
        self.update_delay = 300000
        self.last_update = 0
        self._clock_stamp = 0
        self.model = WeatherData()

    def change_mode(self) -> None:
        """Switch the forecast between highs and lows."""
        self.mode += 1
        if self.mode > MODE_LOWS:
            self.mode = MODE_HIGHS
        self.draw(True)

    def setup(self) -> None:
        # Schedule the first refresh one second from now.
        self.last_update = self._clock() - self.update_delay + 1000

    def draw(self, force: bool = False) -> None:
        self.time.update_time()
        stamp = self.time.hour * 60 + self.time.minute
        if stamp != self._clock_stamp or force:
            self._display_clock(0, Color.WHITE, Color.BLACK)
            self._clock_stamp = stamp

        if force or self.model.changed:
            self._weather_text(1, Color.WHITE, Color.BLACK)
            self._draw_weather_icon(self.model.current_icon, 2, 0, 0, 1)
            self._single_weather_deg(3, Color.WHITE, Color.BLACK)
            self._three_day_weather(4)
            self.model.changed = False

    def update(self, force: bool = False) -> None:
        now = self._clock()
        if not (force or self.last_update == 0 or now - self.last_update >= self.update_delay):
            return
        self.set_busy(True)
        if force:
            for _ in range(self.max_retries + 1):
                if self.fetch_weather():
                    break
        else:
            self.fetch_weather()
        self.set_busy(False)
        self.last_update = self._clock()

    def fetch_weather(self) -> bool:
        """Request the forecast and apply it; False when the request or parsing fails."""
        try:
            response = self._session.get(self.url, timeout=10)
        except requests.RequestException as exc:
            log.error("HTTP request failed, error: %s", exc)
            return False
        try:
            doc = response.json()
        except ValueError:
            log.error("Deserialization failed")
            return False
        self.apply_weather(doc)
        return True

    def apply_weather(self, doc: Any) -> None:
        """Copy the values of a forecast response into the model."""
        model = self.model
        model.city_name = _as_str(_lookup(doc, "resolvedAddress"))
        model.current_temperature = _as_float(_lookup(doc, "currentConditions", "temp"))
        model.current_text = _as_str(_lookup(doc, "days", 0, "description"))
        model.current_icon = _as_str(_lookup(doc, "currentConditions", "icon"))
        model.today_high = _as_float(_lookup(doc, "days", 0, "tempmax"))
        model.today_low = _as_float(_lookup(doc, "days", 0, "tempmin"))
        for day in range(FORECAST_DAYS):
            model.set_day_icon(day, _as_str(_lookup(doc, "days", day + 1, "icon")))
            model.set_day_high(day, _as_float(_lookup(doc, "days", day + 1, "tempmax")))
            model.set_day_low(day, _as_float(_lookup(doc, "days", day + 1, "tempmin")))

    def _display_clock(self, screen: int, background: int, color: int) -> None:
        self.manager.select_screen(screen)
        display = self.manager.display
        clock_y = 95
        display.set_text_color(color)
        display.set_text_size(1)
        display.set_text_datum(Datum.MC)

        display.fill_screen(background)
        display.set_text_color(color)
        display.set_text_size(2)
        display.set_text_datum(Datum.MC)
        if self.metric:
            date_text = f"{self.time.day} {self.time.month_name}"
        else:
            date_text = f"{self.time.month_name} {self.time.day}"
        display.draw_string(date_text, _CENTRE, 151, 2)
        display.set_text_size(3)
        display.draw_string(self.time.weekday, _CENTRE, 178, 2)
        display.set_text_color(color)
        display.set_text_datum(Datum.MR)
        display.set_text_size(1)
        display.draw_string(self.time.hour_padded(), _CENTRE - 5, clock_y, 8)

        display.set_text_color(color)
        display.set_text_datum(Datum.ML)
        display.set_text_size(1)
        display.draw_string(self.time.minute_padded(), _CENTRE + 5, clock_y, 8)
        display.set_text_datum(Datum.MC)
        display.set_text_color(color)
        display.draw_string(":", _CENTRE, clock_y, 8)

    def _draw_weather_icon(self, condition: str, screen: int, x: int, y: int, scale: int) -> None:
        name = icon_name(condition)
        if name is None:
            log.warning("unknown weather icon: %s", condition)
            return
        if self._icon_loader is None:
            return
        data = self._icon_loader(name)
        if data:
            self.manager.select_screen(screen)
            self.manager.display.draw_jpg(x, y, data, scale)

    def _single_weather_deg(self, screen: int, background: int, text_color: int) -> None:
        self.manager.select_screen(screen)
        display = self.manager.display
        display.fill_screen(background)

        self._draw_degrees(self.model.format_current_temperature(0), _CENTRE, 100, 8, 1, 15, 8, text_color, background)

        display.fill_rect(0, 170, 240, 70, Color.BLACK)
        display.fill_rect(_CENTRE - 1, 170, 2, 240, Color.WHITE)

        display.set_text_color(Color.WHITE)
        display.set_text_size(2)
        display.draw_string("High", 80, 190, 1)
        self._draw_degrees(self.model.format_today_high(0), 80, 210, 1, 2, 4, 2, Color.WHITE, Color.BLACK)
        display.draw_string("Low", 160, 190, 1)
        self._draw_degrees(self.model.format_today_low(0), 160, 210, 1, 2, 4, 2, Color.WHITE, Color.BLACK)

    def _weather_text(self, screen: int, background: int, text_color: int) -> None:
        self.manager.select_screen(screen)
        display = self.manager.display
        lines = wrap_description(self.model.current_text)

        display.fill_screen(background)
        display.set_text_color(text_color)
        display.set_text_size(3)
        display.set_text_datum(Datum.MC)
        city = self.model.city_name.split(",", 1)[0]
        display.draw_string(city, _CENTRE, 80, 2)
        display.set_text_size(2)
        display.set_text_font(1)
        for offset, line in zip((120, 140, 160, 180), lines):
            display.draw_string(line, _CENTRE, offset)

    def _three_day_weather(self, screen: int) -> None:
        self.manager.select_screen(screen)
        display = self.manager.display

        display.set_text_datum(Datum.MC)
        display.fill_screen(Color.WHITE)
        display.set_text_size(2)

        display.fill_rect(78, 0, 3, 240, Color.BLACK)
        display.fill_rect(157, 0, 3, 240, Color.BLACK)

        display.fill_rect(0, 170, 240, 70, Color.BLACK)
        display.set_text_color(Color.WHITE)
        display.draw_string("Next 3 Days", _CENTRE, 191, 1)

        for day in range(FORECAST_DAYS):
            x_offset = (_CENTRE - 75) + day * 75
            temperature = ""
            display.set_text_color(Color.WHITE)
            if self.mode == MODE_HIGHS:
                temperature = self.model.format_day_high(day, 0)
                if temperature:
                    display.draw_string("Highs", _CENTRE, 215, 1)
            elif self.mode == MODE_LOWS:
                temperature = self.model.format_day_low(day, 0)
                if temperature:
                    display.draw_string("Lows", _CENTRE, 215, 1)
            self._draw_weather_icon(self.model.day_icon(day), screen, x_offset - 30, 47, 4)
            display.set_text_color(Color.BLACK)
            if temperature:
                self._draw_degrees(temperature, x_offset, _CENTRE, 2, 2, 4, 2, Color.BLACK, Color.WHITE)

            moment = datetime.fromtimestamp(self.time.unix_epoch + _SECONDS_PER_DAY * (day + 1), timezone.utc)
            day_name = WEEKDAY_NAMES[moment.weekday()][:3].upper()
            display.draw_string(day_name, x_offset, 150, 2)

    def _draw_degrees(
        self,
        number: str,
        x: int,
        y: int,
        font: int,
        size: int,
        outer_radius: int,
        inner_radius: int,
        text_color: int,
        background_color: int,
    ) -> int:
        """Draw a temperature followed by a degree ring; returns the width used."""
        display = self.manager.display
        display.set_text_color(text_color)
        display.set_text_font(font)
        display.set_text_size(size)
        display.set_text_datum(Datum.MC)

        text_width = display.text_width(number)
        font_height = display.font_height(font)
        offset = math.ceil(font_height * 0.15)
        circle_x = text_width // 2 + x + offset
        circle_y = y - font_height // 2 + font_height // 10

        display.draw_string(number, x, y, font)
        display.fill_circle(circle_x, circle_y, outer_radius, text_color)
        display.fill_circle(circle_x, circle_y, inner_radius, background_color)
        return text_width + offset