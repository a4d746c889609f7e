"""Current conditions and a short forecast for the weather widget."""

from __future__ import annotations

from collections.abc import Iterable

from infoorbs.utils import format_float

# Marker for a forecast value that has not been received yet.
NO_VALUE = -1024.0
FORECAST_DAYS = 3


class WeatherData:
    """Weather values; assigning a different value marks the data as changed."""

    def __init__(self) -> None:
        self.changed = False
        self._city_name = ""
        self._current_text = ""
        self._current_icon = ""
        self._current_temperature = 0.0
        self._today_high = 0.0
        self._today_low = 0.0
        self._days_icons = [""] * FORECAST_DAYS
        self._days_highs = [NO_VALUE] * FORECAST_DAYS
        self._days_lows = [NO_VALUE] * FORECAST_DAYS

    def _set(self, attr: str, value: object) -> None:
        if getattr(self, attr) != value:
            setattr(self, attr, value)
            self.changed = True

    def _set_day(self, values: list, num: int, value: object) -> None:
        if 0 <= num < FORECAST_DAYS and values[num] != value:
            values[num] = value
            self.changed = True

    @property
    def city_name(self) -> str:
        return self._city_name

    @city_name.setter
    def city_name(self, value: str) -> None:
        self._set("_city_name", value)

    @property
    def current_text(self) -> str:
        """Text description of the weather."""
        return self._current_text

    @current_text.setter
    def current_text(self, value: str) -> None:
        self._set("_current_text", value)

    @property
    def current_icon(self) -> str:
        """Name of the icon for the current conditions."""
        return self._current_icon

    @current_icon.setter
    def current_icon(self, value: str) -> None:
        self._set("_current_icon", value)

    @property
    def current_temperature(self) -> float:
        return self._current_temperature

    @current_temperature.setter
    def current_temperature(self, value: float) -> None:
        self._set("_current_temperature", float(value))

    @property
    def today_high(self) -> float:
        return self._today_high

    @today_high.setter
    def today_high(self, value: float) -> None:
        self._set("_today_high", float(value))

    @property
    def today_low(self) -> float:
        return self._today_low

    @today_low.setter
    def today_low(self, value: float) -> None:
        self._set("_today_low", float(value))

    def format_current_temperature(self, digits: int) -> str:
        return format_float(self._current_temperature, digits)

    def format_today_high(self, digits: int) -> str:
        return format_float(self._today_high, digits)

    def format_today_low(self, digits: int) -> str:
        return format_float(self._today_low, digits)

    @property
    def days_icons(self) -> tuple[str, ...]:
        return tuple(self._days_icons)

    @property
    def days_highs(self) -> tuple[float, ...]:
        return tuple(self._days_highs)

    @property
    def days_lows(self) -> tuple[float, ...]:
        return tuple(self._days_lows)

    def set_days_icons(self, icons: Iterable[str]) -> None:
        for num, icon in zip(range(FORECAST_DAYS), icons):
            self.set_day_icon(num, icon)

    def set_day_icon(self, num: int, icon: str) -> None:
        """Set the icon of forecast day num; days outside the forecast are ignored."""
        self._set_day(self._days_icons, num, icon)

    def day_icon(self, num: int) -> str:
        if not 0 <= num < FORECAST_DAYS:
            return ""
        return self._days_icons[num]

    def set_days_highs(self, highs: Iterable[float]) -> None:
        for num, high in zip(range(FORECAST_DAYS), highs):
            self.set_day_high(num, high)

    def set_day_high(self, num: int, high: float) -> None:
        self._set_day(self._days_highs, num, float(high))

    def day_high(self, num: int) -> float:
        if not 0 <= num < FORECAST_DAYS:
            return NO_VALUE
        return self._days_highs[num]

    def format_day_high(self, num: int, digits: int) -> str:
        """Formatted forecast high, or an empty string when there is none."""
        value = self.day_high(num)
        return "" if value == NO_VALUE else format_float(value, digits)

    def set_days_lows(self, lows: Iterable[float]) -> None:
        for num, low in zip(range(FORECAST_DAYS), lows):
            self.set_day_low(num, low)

    def set_day_low(self, num: int, low: float) -> None:
        self._set_day(self._days_lows, num, float(low))

    def day_low(self, num: int) -> float:
        if not 0 <= num < FORECAST_DAYS:
            return NO_VALUE
        return self._days_lows[num]

    def format_day_low(self, num: int, digits: int) -> str:
        """Formatted forecast low, or an empty string when there is none."""
        value = self.day_low(num)
        return "" if value == NO_VALUE else format_float(value, digits)