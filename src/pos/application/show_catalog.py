"""Application service: Show Catalog use case (query)."""

from __future__ import annotations

from dataclasses import dataclass

from pos.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class CatalogLineDTO:
    name: str
    kind: str
    price: str
    quantity: int
    expires_at: str  # "" when the product never expires
    weight: str  # "" when the product is not shippable


class ShowCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self) -> list[CatalogLineDTO]:
        return [
            CatalogLineDTO(
                name=p.name,
                kind=p.kind.value,
                price=str(p.price),
                quantity=p.quantity,
                expires_at=(
                    p.expires_at.strftime("%Y-%m-%d %H:%M UTC")
                    if p.expires_at is not None
                    else ""
                ),
                weight=str(p.weight) if p.weight is not None else "",
            )
            for p in self._product_repo.list_all()
        ]
