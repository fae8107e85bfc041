"""Customer aggregate — the paying party of a checkout."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.exceptions import InsufficientBalanceError, ValidationError
from pos.domain.model.value_objects import Money


@dataclass
class Customer:
    """A customer with a spendable balance.

    Invariant: ``balance`` never goes below zero.  It changes only
    through ``pay()``.
    """

    name: str
    balance: Money

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Customer name is required")

    def can_afford(self, amount: Money) -> bool:
        return self.balance >= amount

    def pay(self, amount: Money) -> None:
        """Debit *amount* from the balance."""
        if not self.can_afford(amount):
            raise InsufficientBalanceError(self.balance, amount)
        self.balance = self.balance - amount
