"""Application service: Checkout use case.

Turns a cart into a settled purchase in one all-or-nothing step:

  VALIDATING -> PRICING -> SOLVENCY_CHECK -> SHIPPING_NOTICE
             -> SETTLING -> CLEARED

Every check (empty cart, expiry, stock, balance) runs before the first
mutation, so a rejected checkout leaves products, customer and cart
exactly as they were.  The order of the checks decides which error is
reported when several apply.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum

from pos.application.dto import (
    BalanceDTO,
    ReceiptDTO,
    ReceiptLineDTO,
    ShipmentNoticeDTO,
)
from pos.application.reporting import CheckoutReporter
from pos.domain.exceptions import (
    CheckoutError,
    EmptyCartError,
    ExpiredProductError,
    InsufficientBalanceError,
)
from pos.domain.model.cart import Cart
from pos.domain.model.customer import Customer
from pos.domain.model.value_objects import Money
from pos.domain.service.inventory_ledger import InventoryLedger
from pos.domain.service.shipping_calculator import Shipment, ShippingCalculator

logger = logging.getLogger(__name__)


class CheckoutStage(Enum):
    VALIDATING = "VALIDATING"
    PRICING = "PRICING"
    SOLVENCY_CHECK = "SOLVENCY_CHECK"
    SHIPPING_NOTICE = "SHIPPING_NOTICE"
    SETTLING = "SETTLING"
    CLEARED = "CLEARED"
    REJECTED = "REJECTED"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class CheckoutHandler:

    def __init__(
        self,
        reporter: CheckoutReporter,
        shipping_calculator: ShippingCalculator | None = None,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._reporter = reporter
        self._shipping = shipping_calculator or ShippingCalculator()
        self._clock = clock
        self.stage: CheckoutStage | None = None

    def handle(self, customer: Customer, cart: Cart) -> ReceiptDTO:
        """Validate, price, ship and settle the cart for *customer*.

        Raises a CheckoutError subclass (EmptyCartError,
        ExpiredProductError, InsufficientStockError,
        InsufficientBalanceError) without mutating anything.
        """
        try:
            ledger, shipment, subtotal, shipping = self._validate(cart)

            self._enter(CheckoutStage.PRICING)
            total = subtotal + shipping

            self._enter(CheckoutStage.SOLVENCY_CHECK)
            if not customer.can_afford(total):
                raise InsufficientBalanceError(customer.balance, total)
        except CheckoutError as exc:
            logger.info("Checkout rejected during %s: %s", self.stage.value, exc)
            self._enter(CheckoutStage.REJECTED)
            raise

        # --- Nothing has been mutated up to this point ------------------------

        self._enter(CheckoutStage.SHIPPING_NOTICE)
        if not shipment.is_empty():
            self._reporter.shipment_notice(
                ShipmentNoticeDTO(
                    lines=[line.description for line in shipment.lines],
                    total_weight=shipment.total_weight_display,
                )
            )

        receipt = ReceiptDTO(
            lines=[
                ReceiptLineDTO(
                    quantity=item.quantity.value,
                    product_name=item.product.name,
                    line_total=str(item.line_total),
                )
                for item in cart.items
            ],
            subtotal=str(subtotal),
            shipping=str(shipping),
            total=str(total),
        )
        self._reporter.receipt(receipt)

        self._enter(CheckoutStage.SETTLING)
        # Reporters ran in between; nothing may fail once stock is deducted.
        if not customer.can_afford(total):
            logger.info("Checkout rejected during %s: balance changed", self.stage.value)
            self._enter(CheckoutStage.REJECTED)
            raise InsufficientBalanceError(customer.balance, total)
        ledger.deduct()
        customer.pay(total)
        self._reporter.balance(
            BalanceDTO(customer_name=customer.name, balance=str(customer.balance))
        )

        cart.clear()
        self._enter(CheckoutStage.CLEARED)
        logger.info("Checkout settled for %s: total %s", customer.name, total)
        return receipt

    # --- Internal helpers -----------------------------------------------------

    def _validate(
        self, cart: Cart
    ) -> tuple[InventoryLedger, Shipment, Money, Money]:
        self._enter(CheckoutStage.VALIDATING)
        if cart.is_empty():
            raise EmptyCartError()

        now = self._clock()
        ledger = InventoryLedger()
        shipment = Shipment()
        subtotal = Money.zero()
        shipping = Money.zero()

        for item in cart.items:
            product = item.product

            if product.is_expired(now):
                raise ExpiredProductError(product.name)

            ledger.claim(item)
            subtotal = subtotal + item.line_total

            shippable = product.as_shippable()
            if shippable is not None:
                line = self._shipping.line_for(shippable, item.quantity)
                shipment.add(line)
                shipping = shipping + self._shipping.cost_of(line)

        return ledger, shipment, subtotal, shipping

    def _enter(self, stage: CheckoutStage) -> None:
        logger.debug("Checkout stage -> %s", stage.value)
        self.stage = stage
