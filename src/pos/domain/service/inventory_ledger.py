"""Domain service: Inventory Ledger.

Deducts purchased stock from products once a checkout has been approved.
Work is split in two phases so stock is never left partially deducted:

  Phase 1 — ``claim``: validate each line against live stock, in cart
            order, before anything is touched.
  Phase 2 — ``deduct``: reduce each product by its claimed quantities.

Claims are summed per product, so two lines for the same product cannot
each pass against the full stock.  Use one ledger per checkout attempt.
"""

from __future__ import annotations

import logging

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.cart import CartItem
from pos.domain.model.product import Product

logger = logging.getLogger(__name__)


class InventoryLedger:

    def __init__(self) -> None:
        self._lines: list[CartItem] = []
        self._claimed: dict[Product, int] = {}

    def claim(self, item: CartItem) -> None:
        """Validate one line, counting units claimed by earlier lines.

        Raises InsufficientStockError if the running total for the
        product exceeds its current stock.
        """
        product = item.product
        requested = self._claimed.get(product, 0) + item.quantity.value
        if requested > product.quantity:
            raise InsufficientStockError(product.name, requested, product.quantity)
        self._claimed[product] = requested
        self._lines.append(item)

    def claimed(self, product: Product) -> int:
        return self._claimed.get(product, 0)

    def deduct(self) -> None:
        """Permanently reduce stock for every claimed line, in cart order."""
        # Stock may not change between the two phases.
        for product, requested in self._claimed.items():
            if requested > product.quantity:
                raise ValidationError(
                    f"Stock for {product.name} changed after validation"
                )

        for item in self._lines:
            item.product.reduce_quantity(item.quantity.value)
            logger.debug(
                "Deducted %d x %s (remaining %d)",
                item.quantity.value,
                item.product.name,
                item.product.quantity,
            )
        self._lines.clear()
        self._claimed.clear()
