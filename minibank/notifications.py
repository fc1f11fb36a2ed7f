"""Balance-change notification channels (SMS, email, push)."""

import sys

from .config import NOTIFICATION_TEMPLATE
from .money import as_money
from .observer import Observer


class BalanceNotification(Observer):
    """Writes one line per update to `stream` (stdout when not given).

    The balance is shown rounded to cents; the account itself keeps it exact.
    """

    channel = "Generic"

    def __init__(self, stream=None):
        self._stream = stream

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"

    def format_message(self, account) -> str:
        return NOTIFICATION_TEMPLATE.format(channel=self.channel, balance=as_money(account.balance))

    def update(self, account) -> None:
        # resolve stdout lazily so redirect_stdout() is honoured
        print(self.format_message(account), file=self._stream or sys.stdout)


class SMSNotification(BalanceNotification):
    channel = "SMS"


class EmailNotification(BalanceNotification):
    channel = "Email"


class PushNotification(BalanceNotification):
    channel = "Push"
