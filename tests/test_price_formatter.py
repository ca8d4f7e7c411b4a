"""Tests for PriceFormatter."""
from __future__ import annotations

from decimal import Decimal

import pytest

from app.core.config import CurrencyConfig
from app.core.price_formatter import PriceFormatter


class TestPriceFormatter:
    def test_prefix_symbol(self, formatter: PriceFormatter) -> None:
        assert formatter.format(Decimal("14.49")) == "$14.49"

    def test_pads_to_two_decimals(self, formatter: PriceFormatter) -> None:
        assert formatter.format(Decimal("4.5")) == "$4.50"
        assert formatter.format(0) == "$0.00"

    def test_thousands_separator(self, formatter: PriceFormatter) -> None:
        assert formatter.format(Decimal("12345.6")) == "$12,345.60"

    def test_rounds_half_up(self, formatter: PriceFormatter) -> None:
        assert formatter.format(Decimal("1.005")) == "$1.01"

    def test_suffix_symbol(self) -> None:
        formatter = PriceFormatter(symbol="сум", position="suffix", decimals=0)

        assert formatter.format(Decimal("15000")) == "15,000 сум"

    def test_from_config(self) -> None:
        formatter = PriceFormatter.from_config(CurrencyConfig(symbol="€", position="suffix"))

        assert formatter.format(Decimal("3")) == "3.00 €"

    @pytest.mark.parametrize("value", [None, "abc", float("nan"), Decimal("Infinity"), True])
    def test_unformattable_values_return_none(
        self, formatter: PriceFormatter, value: object
    ) -> None:
        assert formatter.format(value) is None
