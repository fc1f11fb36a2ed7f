# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Enforces that all monetary values are handled with `Decimal`, not float,
  to avoid floating-point rounding errors in balance arithmetic.
- Provides helpers to normalize amounts and rates before use.
- Balances are kept exact; as_money is for display.
- Sign is never checked here: deposits may be negative and withdrawals may
  overdraw the account.
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN
from .errors import InvalidAmount

CENT = Decimal("0.01")


def as_decimal(value) -> Decimal:
    """
    Convert any numeric input to an unquantized Decimal.

    Why:
    - Going through str() keeps 1.1 as Decimal("1.1") instead of the
      binary float expansion.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmount(f"Not a numeric value: {value!r}")
    try:
        dec = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidAmount(f"Not a numeric value: {value!r}") from None
    if not dec.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {value!r}")
    return dec


def as_money(value) -> Decimal:
    """
    Normalize any input to Decimal with 2 fractional digits.

    Why:
    - Guarantees consistent 2dp (e.g., "950.00") in notification messages;
      balances themselves are booked unrounded.
    """
    return as_decimal(value).quantize(CENT, rounding=ROUND_HALF_EVEN)
