"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the application layer and the reporting sink
(console, tests) without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CartItemSpec:
    """Input: what the customer asked for (product name + quantity)."""

    product_name: str
    quantity: int


@dataclass(frozen=True)
class ShipmentNoticeDTO:
    """Output: the package that leaves the store."""

    lines: list[str]  # e.g. "2x Cheese    400g"
    total_weight: str  # one decimal place, e.g. "0.9kg"


@dataclass(frozen=True)
class ReceiptLineDTO:

    quantity: int
    product_name: str
    line_total: str  # formatted, e.g. "$200.00"


@dataclass(frozen=True)
class ReceiptDTO:
    """Output: a settled checkout as displayed to the user."""

    lines: list[ReceiptLineDTO]
    subtotal: str
    shipping: str
    total: str


@dataclass(frozen=True)
class BalanceDTO:

    customer_name: str
    balance: str
