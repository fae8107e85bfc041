"""Product aggregate.

A product carries two independent, optional capabilities:

- an expiry instant (perishable goods), and
- a shipping weight (goods that travel in a package).

Callers ask a product about its behaviour (``is_expired``,
``is_shippable``, ``as_shippable``) and never about its concrete kind, so
the checkout stays agnostic of which combination it is dealing with.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Protocol

from pos.domain.exceptions import ValidationError
from pos.domain.model.value_objects import Money, Weight


class Shippable(Protocol):
    """Anything that can be described on a shipment notice."""

    @property
    def name(self) -> str: ...

    @property
    def weight(self) -> Weight: ...


class ProductKind(Enum):
    PLAIN = "PLAIN"
    EXPIRABLE = "EXPIRABLE"
    SHIPPABLE = "SHIPPABLE"
    EXPIRABLE_SHIPPABLE = "EXPIRABLE_SHIPPABLE"


@dataclass(frozen=True)
class ShippingProfile:
    """Read-only shipping view of a product."""

    name: str
    weight: Weight


@dataclass(eq=False)
class Product:
    """A product in the catalog.

    Compared and hashed by identity: two cart lines that point at the same
    instance share one stock counter.
    """

    name: str
    price: Money
    quantity: int
    expires_at: datetime | None = None
    weight: Weight | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValidationError(
                f"Product quantity must be an integer, got {type(self.quantity).__name__}"
            )
        if self.quantity < 0:
            raise ValidationError("Product quantity cannot be negative")
        # Compared against an aware UTC clock at checkout.
        if self.expires_at is not None and self.expires_at.utcoffset() is None:
            raise ValidationError("Product expiry must be timezone-aware")

    # --- Factories ------------------------------------------------------------

    @classmethod
    def plain(cls, name: str, price: Money, quantity: int) -> Product:
        return cls(name=name, price=price, quantity=quantity)

    @classmethod
    def expirable(
        cls, name: str, price: Money, quantity: int, expires_at: datetime
    ) -> Product:
        return cls(name=name, price=price, quantity=quantity, expires_at=expires_at)

    @classmethod
    def shippable(cls, name: str, price: Money, quantity: int, weight: Weight) -> Product:
        return cls(name=name, price=price, quantity=quantity, weight=weight)

    @classmethod
    def expirable_shippable(
        cls,
        name: str,
        price: Money,
        quantity: int,
        expires_at: datetime,
        weight: Weight,
    ) -> Product:
        return cls(
            name=name,
            price=price,
            quantity=quantity,
            expires_at=expires_at,
            weight=weight,
        )

    # --- Capabilities ---------------------------------------------------------

    def is_expired(self, now: datetime | None = None) -> bool:
        """True only when an expiry is set and *now* is strictly past it."""
        if self.expires_at is None:
            return False
        if now is None:
            now = datetime.now(timezone.utc)
        return now > self.expires_at

    def is_shippable(self) -> bool:
        return self.weight is not None

    def as_shippable(self) -> Shippable | None:
        if self.weight is None:
            return None
        return ShippingProfile(name=self.name, weight=self.weight)

    @property
    def kind(self) -> ProductKind:
        if self.expires_at is not None and self.weight is not None:
            return ProductKind.EXPIRABLE_SHIPPABLE
        if self.expires_at is not None:
            return ProductKind.EXPIRABLE
        if self.weight is not None:
            return ProductKind.SHIPPABLE
        return ProductKind.PLAIN

    # --- Inventory ------------------------------------------------------------

    def reduce_quantity(self, amount: int) -> None:
        """Deduct purchased stock.

        Trusted operation with no bounds check: the caller has already
        verified that *amount* does not exceed the stock on hand.
        """
        self.quantity -= amount
