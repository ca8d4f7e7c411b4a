"""Price formatting for display in chat messages."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from .config import CurrencyConfig


class PriceFormatter:
    """Turns a money amount into a display string such as ``$14.49``."""

    def __init__(self, symbol: str = "$", position: str = "prefix", decimals: int = 2) -> None:
        self.symbol = symbol
        self.position = position
        self.decimals = decimals
        self._quantum = Decimal(1).scaleb(-decimals)

    @classmethod
    def from_config(cls, currency: CurrencyConfig) -> PriceFormatter:
        return cls(symbol=currency.symbol, position=currency.position)

    def format(self, price: object) -> str | None:
        """Return the formatted price, or None when it cannot be formatted."""
        if price is None or isinstance(price, bool):
            return None
        try:
            amount = price if isinstance(price, Decimal) else Decimal(str(price))
            if not amount.is_finite():
                return None
            amount = amount.quantize(self._quantum, rounding=ROUND_HALF_UP)
        except (InvalidOperation, ValueError):
            return None

        number = f"{amount:,.{self.decimals}f}"
        if self.position == "suffix":
            return f"{number} {self.symbol}"
        return f"{self.symbol}{number}"
