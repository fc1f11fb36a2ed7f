# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Bank Account - observable, strategy-driven

- Protect balance and strategy with an RLock (atomicity; no lost updates).
- Every balance change is followed by a notification to all attached
  observers, sent while the lock is still held so each observer sees the
  balance produced by the operation that triggered it.
- Foreign-currency withdrawals are priced by the current conversion strategy.
- Balances are booked exactly; rounding to cents happens only on display.
"""

from decimal import Decimal
from itertools import count
from threading import RLock
from typing import Optional
import logging

import minibank.config as cfg
from .client import Client
from .conversion import ConversionStrategy
from .currency import Currency
from .money import as_decimal
from .observer import Observable

logger = logging.getLogger(__name__)

_account_numbers = count(cfg.FIRST_ACCOUNT_NUMBER)
_numbers_lock = RLock()


def _next_account_number() -> int:
    with _numbers_lock:
        return next(_account_numbers)


def _check_strategy(strategy) -> ConversionStrategy:
    if not isinstance(strategy, ConversionStrategy):
        raise TypeError(f"Expected a ConversionStrategy, got {type(strategy).__name__}")
    return strategy


class BankAccount(Observable):
    def __init__(self, client: Client, currency: Currency, conversion_strategy: ConversionStrategy,
                 account_number: Optional[int] = None):
        super().__init__()
        self._account_number = _next_account_number() if account_number is None else account_number
        self._currency = Currency(currency)
        self._holder = client
        self._balance = Decimal("0")
        self._conversion_strategy = _check_strategy(conversion_strategy)
        self._lock = RLock()

    def __repr__(self) -> str:
        return f"BankAccount({self._account_number}, {self._currency.code}, balance={self._balance})"

    @property
    def account_number(self) -> int:
        return self._account_number

    @property
    def currency(self) -> Currency:
        return self._currency

    @property
    def balance(self) -> Decimal:
        with self._lock:
            return self._balance

    @property
    def holder(self) -> Client:
        return self._holder

    def _set_conversion_strategy(self, strategy: ConversionStrategy) -> None:
        strategy = _check_strategy(strategy)
        with self._lock:
            logger.debug("Account %s: strategy %r -> %r", self._account_number,
                         self._conversion_strategy, strategy)
            self._conversion_strategy = strategy

    # write-only: the active strategy can be replaced but not read back
    conversion_strategy = property(fset=_set_conversion_strategy,
                                   doc="Replace the active conversion strategy.")

    def deposit(self, amount) -> None:
        amt = as_decimal(amount)
        with self._lock:
            self._balance = self._balance + amt
            logger.debug("Account %s: deposit %s -> balance %s", self._account_number, amt, self._balance)
            self.notify()

    def withdraw(self, amount, currency: Currency) -> None:
        with self._lock:
            # RateUnavailable propagates before the balance is touched
            converted = as_decimal(self._conversion_strategy.convert(amount, currency))
            self._balance = self._balance - converted
            logger.debug("Account %s: withdraw %s %s (converted %s) -> balance %s",
                         self._account_number, amount, getattr(currency, "code", currency), converted, self._balance)
            self.notify()
