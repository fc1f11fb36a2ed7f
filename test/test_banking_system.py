# -*- coding: utf-8 -*-
"""
Unit and Integration Tests for the Bank Account Model.

Educational purpose:
- Validates the account invariant: the balance only changes through
  deposit/withdraw, and every change notifies all attached observers.
- Validates the registry: one process-wide instance, identity-based close,
  and a consistent live list under concurrent open/close.
- Runs the end-to-end demo and checks the exact notification lines.
"""

import io
import unittest
from decimal import Decimal
from threading import Thread

from minibank.bank import Bank
from minibank.bank_account import BankAccount
from minibank.client import Client
from minibank.conversion import CurrentRateConversionStrategy, FixedRateConversionStrategy
from minibank.currency import Currency
from minibank.errors import InvalidAmount, RateUnavailable
from minibank.notifications import SMSNotification
from minibank.observer import Observer

from main import run_demo

RATES = {Currency.USD: 1.1, Currency.EUR: 0.9, Currency.UAH: 38}


class BalanceRecorder(Observer):
    def __init__(self):
        self.seen = []

    def update(self, subject):
        self.seen.append(subject.balance)


def _account(strategy=None) -> BankAccount:
    return BankAccount(Client("Jane", "Roe"), Currency.USD,
                       strategy or CurrentRateConversionStrategy(RATES))


class TestBankAccount(unittest.TestCase):
    def test_new_account_starts_at_zero(self):
        acc = _account()
        self.assertEqual(acc.balance, Decimal("0.00"))
        self.assertIs(acc.currency, Currency.USD)
        self.assertEqual(acc.holder, Client("Jane", "Roe"))

    def test_deposit_updates_balance_and_notifies_once(self):
        acc = _account()
        rec = BalanceRecorder()
        acc.attach(rec)
        acc.deposit(Decimal("150.50"))
        self.assertEqual(acc.balance, Decimal("150.50"))
        self.assertEqual(rec.seen, [Decimal("150.50")])
        acc.deposit(20)
        self.assertEqual(rec.seen, [Decimal("150.50"), Decimal("170.50")])

    def test_negative_deposit_is_permitted(self):
        acc = _account()
        acc.deposit(10)
        acc.deposit(-25)
        self.assertEqual(acc.balance, Decimal("-15.00"))

    def test_non_numeric_deposit_raises_and_does_not_notify(self):
        acc = _account()
        rec = BalanceRecorder()
        acc.attach(rec)
        with self.assertRaises(InvalidAmount):
            acc.deposit("ten")
        with self.assertRaises(InvalidAmount):
            acc.deposit(float("nan"))
        self.assertEqual(acc.balance, Decimal("0.00"))
        self.assertEqual(rec.seen, [])

    def test_withdraw_converts_with_current_strategy(self):
        """100 EUR at 0.9 costs 90.00 of the account currency."""
        acc = _account()
        rec = BalanceRecorder()
        acc.deposit(1000)
        acc.attach(rec)
        acc.withdraw(100, Currency.EUR)
        self.assertEqual(acc.balance, Decimal("910.00"))
        self.assertEqual(rec.seen, [Decimal("910.00")])

    def test_withdraw_allows_overdraft(self):
        acc = _account()
        acc.withdraw(10, Currency.UAH)
        self.assertEqual(acc.balance, Decimal("-380.00"))

    def test_sub_cent_amounts_are_booked_exactly(self):
        """Balances keep full precision; only the message rounds to cents."""
        acc = _account(CurrentRateConversionStrategy({Currency.UAH: "0.333"}))
        rec = BalanceRecorder()
        acc.attach(rec)
        acc.withdraw(1, Currency.UAH)
        self.assertEqual(acc.balance, Decimal("-0.333"))
        acc.deposit("0.004")
        self.assertEqual(acc.balance, Decimal("-0.329"))
        self.assertEqual(rec.seen, [Decimal("-0.333"), Decimal("-0.329")])

    def test_notification_rounds_exact_balance_for_display(self):
        acc = _account()
        out = io.StringIO()
        acc.attach(SMSNotification(out))
        acc.deposit("0.004")
        self.assertEqual(acc.balance, Decimal("0.004"))
        self.assertEqual(out.getvalue(),
                         "SMS notification: Your account balance has changed. Current balance: 0.00\n")

    def test_failed_conversion_leaves_balance_and_observers_untouched(self):
        acc = _account(CurrentRateConversionStrategy({Currency.USD: 1.1, Currency.UAH: 0}))
        acc.deposit(500)
        rec = BalanceRecorder()
        acc.attach(rec)
        with self.assertRaises(RateUnavailable):
            acc.withdraw(100, Currency.EUR)
        with self.assertRaises(RateUnavailable):
            acc.withdraw(100, Currency.UAH)
        self.assertEqual(acc.balance, Decimal("500.00"))
        self.assertEqual(rec.seen, [])

    def test_strategy_swap_changes_pricing(self):
        acc = _account()
        acc.deposit(1000)
        acc.conversion_strategy = FixedRateConversionStrategy("0.5")
        acc.withdraw(100, Currency.UAH)
        self.assertEqual(acc.balance, Decimal("950.00"))

    def test_conversion_strategy_is_write_only(self):
        acc = _account()
        with self.assertRaises(AttributeError):
            acc.conversion_strategy
        with self.assertRaises(TypeError):
            acc.conversion_strategy = 0.5

    def test_account_numbers_are_unique(self):
        numbers = {_account().account_number for _ in range(50)}
        self.assertEqual(len(numbers), 50)

    def test_explicit_account_number_is_kept(self):
        acc = BankAccount(Client("A", "B"), Currency.EUR, FixedRateConversionStrategy(1),
                          account_number=42)
        self.assertEqual(acc.account_number, 42)

    def test_concurrent_deposits_lose_no_updates(self):
        acc = _account()
        threads = [Thread(target=lambda: [acc.deposit("0.01") for _ in range(500)]) for _ in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        self.assertEqual(acc.balance, Decimal("40.00"))


class TestBankRegistry(unittest.TestCase):
    def test_get_instance_returns_same_registry(self):
        self.assertIs(Bank.get_instance(), Bank.get_instance())

    def test_create_then_close_restores_size(self):
        bank = Bank.get_instance()
        before = len(bank)
        acc = bank.create_account(Client("John", "Doe"), Currency.USD, FixedRateConversionStrategy(1))
        self.assertEqual(len(bank), before + 1)
        self.assertIn(acc, bank)
        bank.close_account(acc)
        self.assertEqual(len(bank), before)
        self.assertNotIn(acc, bank)

    def test_registry_keeps_insertion_order(self):
        bank = Bank()
        strategy = FixedRateConversionStrategy(1)
        a = bank.create_account(Client("A", "A"), Currency.USD, strategy)
        b = bank.create_account(Client("B", "B"), Currency.EUR, strategy)
        c = bank.create_account(Client("C", "C"), Currency.UAH, strategy)
        self.assertEqual(bank.accounts, (a, b, c))
        bank.close_account(b)
        self.assertEqual(bank.accounts, (a, c))

    def test_close_unknown_account_is_noop(self):
        bank = Bank()
        bank.create_account(Client("A", "A"), Currency.USD, FixedRateConversionStrategy(1))
        stranger = _account()
        bank.close_account(stranger)
        self.assertEqual(len(bank), 1)

    def test_concurrent_open_close_keeps_registry_consistent(self):
        bank = Bank()
        strategy = FixedRateConversionStrategy(1)

        def churn():
            for _ in range(200):
                acc = bank.create_account(Client("T", "T"), Currency.USD, strategy)
                bank.close_account(acc)

        threads = [Thread(target=churn) for _ in range(8)]
        for th in threads:
            th.start()
        for th in threads:
            th.join()
        self.assertEqual(len(bank), 0)


class TestDemoScenario(unittest.TestCase):
    def test_demo_output_and_final_state(self):
        bank = Bank()
        out = io.StringIO()
        acc = run_demo(bank=bank, stream=out)

        self.assertEqual(out.getvalue().splitlines(), [
            "SMS notification: Your account balance has changed. Current balance: 1000.00",
            "Email notification: Your account balance has changed. Current balance: 1000.00",
            "Push notification: Your account balance has changed. Current balance: 1000.00",
            "SMS notification: Your account balance has changed. Current balance: 950.00",
        ])
        self.assertEqual(acc.balance, Decimal("950.00"))
        self.assertEqual(bank.accounts, (acc,))
        self.assertEqual(acc.holder.full_name, "John Doe")


if __name__ == '__main__':
    unittest.main(verbosity=2)
