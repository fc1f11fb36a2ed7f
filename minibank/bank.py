# -*- coding: utf-8 -*-
from __future__ import annotations
"""
Bank Registry

- Owns the insertion-ordered list of open accounts.
- Bank.get_instance() returns the process-wide registry, created once
  behind a class-level lock. Components receive the bank as a parameter
  rather than reaching for the global; Bank() remains constructible so
  tests and embedders can inject an isolated registry.
"""

from threading import Lock, RLock
from typing import ClassVar, List, Optional, Tuple
import logging

from .bank_account import BankAccount
from .client import Client
from .conversion import ConversionStrategy
from .currency import Currency

logger = logging.getLogger(__name__)


class Bank:
    _instance: ClassVar[Optional["Bank"]] = None
    _instance_lock: ClassVar[Lock] = Lock()

    def __init__(self):
        self._accounts: List[BankAccount] = []
        self._lock = RLock()

    @classmethod
    def get_instance(cls) -> "Bank":
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls()
                    logger.debug("Created process-wide bank registry")
        return cls._instance

    def __repr__(self) -> str:
        return f"Bank(accounts={len(self)})"

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)

    def __contains__(self, account) -> bool:
        with self._lock:
            return any(a is account for a in self._accounts)

    @property
    def accounts(self) -> Tuple[BankAccount, ...]:
        with self._lock:
            return tuple(self._accounts)

    def create_account(self, client: Client, currency: Currency,
                       conversion_strategy: ConversionStrategy) -> BankAccount:
        account = BankAccount(client, currency, conversion_strategy)
        with self._lock:
            self._accounts.append(account)
        logger.info("Opened account %s for %s (%s)", account.account_number, client.full_name,
                    account.currency.code)
        return account

    def close_account(self, account: BankAccount) -> None:
        with self._lock:
            for i, a in enumerate(self._accounts):
                if a is account:
                    del self._accounts[i]
                    logger.info("Closed account %s", account.account_number)
                    return
