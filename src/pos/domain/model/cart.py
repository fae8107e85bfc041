"""Cart aggregate — an ordered list of reservations against the catalog.

Adding to the cart only *checks* stock; nothing is deducted until a
checkout succeeds.  Lines are kept in insertion order and are never
merged, even when the same product is added twice.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pos.domain.exceptions import InsufficientStockError
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money, Quantity


@dataclass(frozen=True)
class CartItem:
    """One (product, quantity) line of the cart."""

    product: Product
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:

    _items: list[CartItem] = field(default_factory=list)

    def add(self, product: Product, quantity: int) -> CartItem:
        """Append a line for *quantity* units of *product*.

        Raises InsufficientStockError if the product's stock cannot cover
        this line together with whatever the cart already holds of it.
        """
        qty = Quantity(quantity)
        requested = self.quantity_of(product) + qty.value
        if requested > product.quantity:
            raise InsufficientStockError(product.name, requested, product.quantity)

        item = CartItem(product=product, quantity=qty)
        self._items.append(item)
        return item

    @property
    def items(self) -> tuple[CartItem, ...]:
        return tuple(self._items)

    def quantity_of(self, product: Product) -> int:
        """Total units of *product* requested across all lines."""
        return sum(
            item.quantity.value for item in self._items if item.product is product
        )

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)
