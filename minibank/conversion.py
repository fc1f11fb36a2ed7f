# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Currency Conversion Strategies

- An account delegates every foreign-currency withdrawal to exactly one
  strategy object; swapping the strategy changes the pricing policy without
  touching the account.
- Strategies are immutable after construction: replace, don't mutate.
- Results are unquantized Decimals; the account rounds when it books them.
"""

from decimal import Decimal
from typing import Mapping
import logging

from .currency import Currency
from .errors import RateUnavailable
from .money import as_decimal

logger = logging.getLogger(__name__)


class ConversionStrategy:
    """Converts an amount in `currency` into the account's own currency."""

    def convert(self, amount, currency: Currency) -> Decimal:
        raise NotImplementedError("ConversionStrategy subclasses must implement 'convert' method.")


class CurrentRateConversionStrategy(ConversionStrategy):
    """
    Rate-table lookup.

    A rate that is missing *or* falsy (0, None, empty) is treated as
    unavailable and raises RateUnavailable; a zero rate never yields a zero
    conversion.
    """

    def __init__(self, exchange_rates: Mapping[Currency, object]):
        self._rates = {
            Currency(currency): (as_decimal(rate) if rate else None)
            for currency, rate in dict(exchange_rates).items()
        }

    def __repr__(self) -> str:
        rates = ", ".join(f"{c.code}={r}" for c, r in self._rates.items())
        return f"CurrentRateConversionStrategy({rates})"

    def rate_for(self, currency: Currency) -> Decimal:
        rate = self._rates.get(currency)
        if not rate:
            logger.debug("No usable rate for %s", currency)
            raise RateUnavailable(currency)
        return rate

    def convert(self, amount, currency: Currency) -> Decimal:
        return as_decimal(amount) * self.rate_for(currency)


class FixedRateConversionStrategy(ConversionStrategy):
    """
    Single multiplier applied regardless of the currency argument.

    The currency is accepted for interface compatibility only; withdrawing
    100 UAH or 100 EUR costs the same.
    """

    def __init__(self, fixed_rate):
        self._fixed_rate = as_decimal(fixed_rate)

    def __repr__(self) -> str:
        return f"FixedRateConversionStrategy({self._fixed_rate})"

    @property
    def fixed_rate(self) -> Decimal:
        return self._fixed_rate

    def convert(self, amount, currency: Currency) -> Decimal:
        return as_decimal(amount) * self._fixed_rate
