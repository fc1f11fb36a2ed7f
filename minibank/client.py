"""Account holder value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Client:
    """Read-only first/last name pair referenced by an account."""

    first_name: str
    last_name: str

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
