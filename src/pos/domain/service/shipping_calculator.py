"""Domain service: Shipping Calculator.

Shipping is charged at a flat rate per kilogram of line weight.  There is
no zone or distance model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from pos.domain.model.product import Shippable
from pos.domain.model.value_objects import Money, Quantity, Weight

DEFAULT_RATE_PER_KG = Money(Decimal("10"))


@dataclass(frozen=True)
class ShipmentLine:
    quantity: int
    name: str
    weight: Weight  # unit weight x quantity

    @property
    def description(self) -> str:
        return f"{self.quantity}x {self.name}    {self.weight.grams}g"


@dataclass
class Shipment:
    """All shippable lines of one checkout, in cart order."""

    lines: list[ShipmentLine] = field(default_factory=list)

    def add(self, line: ShipmentLine) -> None:
        self.lines.append(line)

    def is_empty(self) -> bool:
        return not self.lines

    @property
    def total_weight(self) -> Decimal:
        return sum((line.weight.kilograms for line in self.lines), Decimal("0"))

    @property
    def total_weight_display(self) -> str:
        return f"{self.total_weight:.1f}kg"


class ShippingCalculator:

    def __init__(self, rate_per_kg: Money = DEFAULT_RATE_PER_KG) -> None:
        self._rate_per_kg = rate_per_kg

    @property
    def rate_per_kg(self) -> Money:
        return self._rate_per_kg

    def line_for(self, shippable: Shippable, quantity: Quantity) -> ShipmentLine:
        return ShipmentLine(
            quantity=quantity.value,
            name=shippable.name,
            weight=shippable.weight * quantity.value,
        )

    def cost_of(self, line: ShipmentLine) -> Money:
        return self._rate_per_kg * line.weight.kilograms
