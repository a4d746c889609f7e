"""Quote data for the stock ticker widgets."""

from __future__ import annotations

from infoorbs.utils import format_float


class StockData:
    """Price data for one ticker; setting a different value marks it changed."""

    def __init__(self, symbol: str = "") -> None:
        # The symbol is an identifier, not data, so it never marks a change.
        self.symbol = symbol
        self._current_price = 0.0
        self._volume = 0.0
        self._price_change = 0.0
        self._percent_change = 0.0
        self.changed = False

    def _set(self, attr: str, value: float) -> None:
        value = float(value)
        if getattr(self, attr) != value:
            setattr(self, attr, value)
            self.changed = True

    @property
    def current_price(self) -> float:
        return self._current_price

    @current_price.setter
    def current_price(self, value: float) -> None:
        self._set("_current_price", value)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        self._set("_volume", value)

    @property
    def price_change(self) -> float:
        return self._price_change

    @price_change.setter
    def price_change(self, value: float) -> None:
        self._set("_price_change", value)

    @property
    def percent_change(self) -> float:
        """Relative change as a fraction (0.05 means five percent)."""
        return self._percent_change

    @percent_change.setter
    def percent_change(self, value: float) -> None:
        self._set("_percent_change", value)

    def format_current_price(self, digits: int) -> str:
        return format_float(self._current_price, digits)

    def format_volume(self, digits: int) -> str:
        return format_float(self._volume, digits)

    def format_price_change(self, digits: int) -> str:
        return format_float(self._price_change, digits)

    def format_percent_change(self, digits: int) -> str:
        """Relative change expressed in percent."""
        return format_float(self._percent_change * 100, digits)


class OnvistaStockData(StockData):
    """Ticker described as NAME@TYPE@ID@EXCHANGE.

    Missing trailing parts leave the corresponding fields empty; a value
    without any "@" is taken as the bare symbol.
    """

    def __init__(self, symbol: str = "") -> None:
        super().__init__()
        self.symbol_type = ""
        self.symbol_id = ""
        self.exchange_code = ""
        self._parse(symbol)

    def _parse(self, spec: str) -> None:
        idx1 = spec.find("@")
        if idx1 == -1:
            self.symbol = spec
            return
        self.symbol = spec[:idx1]
        idx2 = spec.find("@", idx1 + 1)
        if idx2 == -1:
            return
        self.symbol_type = spec[idx1 + 1 : idx2]
        idx3 = spec.find("@", idx2 + 1)
        if idx3 == -1:
            return
        self.symbol_id = spec[idx2 + 1 : idx3]
        self.exchange_code = spec[idx3 + 1 :]