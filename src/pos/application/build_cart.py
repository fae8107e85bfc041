"""Application service: Build Cart use case.

Resolves product names against the catalog and adds each requested line
to a fresh cart.  Stock is checked per line as it is added.
"""

from __future__ import annotations

from pos.application.dto import CartItemSpec
from pos.domain.exceptions import EntityNotFoundError
from pos.domain.model.cart import Cart
from pos.domain.repository.product_repository import ProductRepository


class BuildCartHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, item_specs: list[CartItemSpec]) -> Cart:
        cart = Cart()
        for spec in item_specs:
            product = self._product_repo.get_by_name(spec.product_name)
            if product is None:
                raise EntityNotFoundError(
                    f"Product not found: '{spec.product_name}'"
                )
            cart.add(product, spec.quantity)
        return cart
