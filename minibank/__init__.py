# -*- coding: utf-8 -*-
"""
Core package of the pattern-driven bank account model.

Philosophy: This __init__ file sets the global `Decimal` context so every
balance, rate and converted amount shares the same precision and rounding.
Importing the package is enough; no caller ever builds a float balance.
"""
from decimal import getcontext, ROUND_HALF_EVEN

# Set the global context for Decimal operations for financial accuracy.
# Banker's rounding is used as it minimizes statistical bias.
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN

from .bank import Bank  # noqa: E402
from .bank_account import BankAccount  # noqa: E402
from .client import Client  # noqa: E402
from .conversion import (  # noqa: E402
    ConversionStrategy,
    CurrentRateConversionStrategy,
    FixedRateConversionStrategy,
)
from .currency import Currency  # noqa: E402
from .errors import InvalidAmount, RateUnavailable  # noqa: E402
from .notifications import (  # noqa: E402
    BalanceNotification,
    EmailNotification,
    PushNotification,
    SMSNotification,
)
from .observer import Observable, Observer  # noqa: E402

__all__ = [
    "Bank",
    "BankAccount",
    "BalanceNotification",
    "Client",
    "ConversionStrategy",
    "Currency",
    "CurrentRateConversionStrategy",
    "EmailNotification",
    "FixedRateConversionStrategy",
    "InvalidAmount",
    "Observable",
    "Observer",
    "PushNotification",
    "RateUnavailable",
    "SMSNotification",
]
