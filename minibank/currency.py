"""Currency codes supported by accounts and conversion strategies."""

from enum import Enum


class Currency(str, Enum):
    USD = "usd"
    EUR = "eur"
    UAH = "uah"

    @property
    def code(self) -> str:
        return self.value.upper()
