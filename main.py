# -*- coding: utf-8 -*-
"""
Bank Patterns Demo

Purpose:
- Demonstrates three object-oriented patterns on one bank account:
  1) Singleton: the process-wide Bank registry opens the account.
  2) Observer: SMS / Email / Push channels react to balance changes.
  3) Strategy: the conversion policy is swapped before a withdrawal.

Outputs:
- One notification line per attached observer per balance change.
- Diagnostics go through `logging` (stderr), never mixed with notifications.
"""


from __future__ import annotations

from typing import Optional
import logging

from minibank.bank import Bank
from minibank.bank_account import BankAccount
from minibank.client import Client
from minibank.conversion import CurrentRateConversionStrategy, FixedRateConversionStrategy
from minibank.currency import Currency
from minibank.logging_config import setup_logging
from minibank.notifications import EmailNotification, PushNotification, SMSNotification
import minibank.config as cfg

logger = logging.getLogger("minibank.demo")


def run_demo(bank: Optional[Bank] = None, stream=None) -> BankAccount:
    """Run the scenario and return the account it operated on."""
    bank = bank if bank is not None else Bank.get_instance()

    current_rate = CurrentRateConversionStrategy(cfg.DEFAULT_EXCHANGE_RATES)
    fixed_rate = FixedRateConversionStrategy(cfg.DEFAULT_FIXED_RATE)

    account = bank.create_account(Client("John", "Doe"), Currency.USD, current_rate)

    sms = SMSNotification(stream)
    email = EmailNotification(stream)
    push = PushNotification(stream)

    account.attach(sms)
    account.attach(email)
    account.attach(push)

    account.deposit(1000)

    account.detach(email)
    account.detach(push)

    logger.info("Switching account %s to %r", account.account_number, fixed_rate)
    account.conversion_strategy = fixed_rate
    account.withdraw(100, Currency.UAH)

    return account


def main() -> None:
    setup_logging()
    run_demo()


if __name__ == "__main__":
    main()
