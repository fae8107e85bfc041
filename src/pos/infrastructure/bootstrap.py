"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from decimal import Decimal

from pos.application.checkout import CheckoutHandler
from pos.application.reporting import CheckoutReporter
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.domain.service.shipping_calculator import ShippingCalculator
from pos.infrastructure.config import get_settings
from pos.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from pos.infrastructure.seed import demo_catalog, demo_customer


def product_repository() -> InMemoryProductRepository:
    return InMemoryProductRepository(demo_catalog())


def customer(
    name: str | None = None, balance: str | Decimal | None = None
) -> Customer:
    settings = get_settings()
    return demo_customer(
        name=name or settings.default_customer,
        balance=Money.of(balance if balance is not None else settings.default_balance),
    )


def shipping_calculator() -> ShippingCalculator:
    return ShippingCalculator(rate_per_kg=Money.of(get_settings().shipping_rate_per_kg))


def checkout_handler(reporter: CheckoutReporter) -> CheckoutHandler:
    return CheckoutHandler(reporter=reporter, shipping_calculator=shipping_calculator())
