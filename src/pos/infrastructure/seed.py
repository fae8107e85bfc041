"""Demo catalog and customer.

Built fresh on every call; nothing here is module-level state.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from pos.domain.model.customer import Customer
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Weight


def demo_catalog(now: datetime | None = None) -> list[Product]:
    if now is None:
        now = datetime.now(timezone.utc)
    tomorrow = now + timedelta(days=1)

    return [
        Product.expirable_shippable(
            "Cheese", Money.of("100"), 10, expires_at=tomorrow, weight=Weight.of("0.2")
        ),
        Product.expirable_shippable(
            "Biscuits", Money.of("150"), 5, expires_at=tomorrow, weight=Weight.of("0.7")
        ),
        Product.shippable("TV", Money.of("5000"), 3, weight=Weight.of("10.0")),
        Product.plain("Scratch Card", Money.of("50"), 100),
    ]


def demo_customer(name: str = "Ibrahim", balance: Money | None = None) -> Customer:
    return Customer(name=name, balance=balance if balance is not None else Money.of("1000"))
