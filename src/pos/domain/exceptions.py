"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.

Checkout rejections derive from CheckoutError.  Each one is raised at the
point of detection and aborts the whole checkout before anything is mutated.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CheckoutError(DomainException):
    """A checkout attempt was rejected."""


class EmptyCartError(CheckoutError):

    def __init__(self) -> None:
        super().__init__("Cart is empty")


class ExpiredProductError(CheckoutError):

    def __init__(self, product_name: str) -> None:
        self.product_name = product_name
        super().__init__(f"{product_name} is expired")


class InsufficientStockError(CheckoutError):
    """Requested quantity exceeds the stock currently on hand.

    Raised both when adding to a cart and when re-validating at checkout.
    """

    def __init__(self, product_name: str, requested: int, available: int) -> None:
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock for {product_name} "
            f"(need {requested}, have {available} available)"
        )


class InsufficientBalanceError(CheckoutError):

    def __init__(self, balance, total) -> None:
        self.balance = balance
        self.total = total
        super().__init__(
            f"Customer balance {balance} is insufficient for total {total}"
        )
