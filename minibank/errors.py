# -*- coding: utf-8 -*-
"""
Custom Exception Classes for Banking Domain.

Purpose:
- Give callers a typed error for the one business failure of the model
  (a missing exchange rate), so tests can tell it apart from
  programming errors such as AttributeError or TypeError.
- Reject malformed monetary input early instead of letting a
  decimal.InvalidOperation leak out of arithmetic.
"""


class RateUnavailable(Exception):
    """
    Raised by a rate-table conversion strategy when no usable rate exists
    for the requested currency (missing entry, or a zero/empty rate).
    """

    def __init__(self, currency):
        self.currency = currency
        code = getattr(currency, "value", currency)
        super().__init__(f"Exchange rate not available for currency {code}")


class InvalidAmount(Exception):
    """
    Raised when a value cannot be used as money or as a rate:
    - Not a number (e.g. "abc", None).
    - Not finite (NaN, Infinity).
    """
    pass
