"""In-memory implementation of ProductRepository."""

from __future__ import annotations

from pos.domain.model.product import Product
from pos.domain.repository.product_repository import ProductRepository


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        for p in products or []:
            self.save(p)

    # --- ProductRepository interface ------------------------------------------

    def get_by_name(self, name: str) -> Product | None:
        return self._store.get(self._key(name))

    def list_all(self) -> list[Product]:
        return list(self._store.values())

    def save(self, product: Product) -> None:
        self._store[self._key(product.name)] = product

    @staticmethod
    def _key(name: str) -> str:
        return name.strip().lower()
