"""Abstract repository for Product aggregate.

Defined in the domain layer so the domain never depends on
infrastructure.  The catalog is held in memory only; nothing survives
the process.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pos.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> Product | None:
        """Return a product by name (case-insensitive), or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Add a product to the catalog, replacing one with the same name."""
