"""Portfolio holdings for the portfolio widget."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from operator import attrgetter

from infoorbs.utils import format_float


def _ratio(numerator: float, denominator: float) -> float:
    """Floating division that yields inf or nan instead of raising."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
    return numerator / denominator


@dataclass
class ParqetHolding:
    """One position in a portfolio."""

    id: str = ""
    name: str = ""
    purchase_price: float = 0.0
    purchase_value: float = 0.0
    current_price: float = 0.0
    current_value: float = 0.0
    shares: float = 0.0
    currency: str = ""

    @property
    def percent_change(self) -> float:
        """Change of current value against purchase value, in percent."""
        return 100 * (_ratio(self.current_value, self.purchase_value) - 1)

    def format_purchase_price(self, digits: int) -> str:
        return format_float(self.purchase_price, digits)

    def format_purchase_value(self, digits: int) -> str:
        return format_float(self.purchase_value, digits)

    def format_current_price(self, digits: int) -> str:
        return format_float(self.current_price, digits)

    def format_current_value(self, digits: int) -> str:
        return format_float(self.current_value, digits)

    def format_shares(self, digits: int) -> str:
        return format_float(self.shares, digits)

    def format_percent_change(self, digits: int) -> str:
        return format_float(self.percent_change, digits)


class ParqetPortfolio:
    """A portfolio whose holdings are kept ordered by current value, largest first."""

    def __init__(self, portfolio_id: str = "") -> None:
        self.portfolio_id = portfolio_id
        self._holdings: list[ParqetHolding] = []

    def set_holdings(self, holdings: Iterable[ParqetHolding]) -> None:
        """Replace the holdings; equal values keep their given order."""
        self._holdings = sorted(holdings, key=attrgetter("current_value"), reverse=True)

    def __getitem__(self, index: int) -> ParqetHolding:
        return self._holdings[index]

    def __len__(self) -> int:
        return len(self._holdings)

    def __iter__(self) -> Iterator[ParqetHolding]:
        return iter(self._holdings)