"""Unit tests for the Cart aggregate."""

import pytest

from pos.domain.exceptions import InsufficientStockError, ValidationError
from pos.domain.model.cart import Cart
from pos.domain.model.product import Product
from pos.domain.model.value_objects import Money


def _widget(quantity: int = 5) -> Product:
    return Product.plain("Widget", Money.of("10"), quantity)


class TestCartAdd:

    def test_add_appends_line(self):
        cart = Cart()
        cart.add(_widget(), 2)
        assert len(cart) == 1
        assert cart.items[0].quantity.value == 2

    def test_add_does_not_touch_stock(self):
        widget = _widget(5)
        Cart().add(widget, 5)
        assert widget.quantity == 5

    def test_add_more_than_stock_rejected(self):
        cart = Cart()
        with pytest.raises(InsufficientStockError, match="Widget"):
            cart.add(_widget(5), 6)
        assert cart.is_empty()

    def test_add_counts_lines_already_in_cart(self):
        widget = _widget(5)
        cart = Cart()
        cart.add(widget, 3)
        with pytest.raises(InsufficientStockError, match="need 6, have 5"):
            cart.add(widget, 3)
        assert len(cart) == 1

    def test_same_product_kept_as_separate_lines(self):
        widget = _widget(5)
        cart = Cart()
        cart.add(widget, 2)
        cart.add(widget, 3)
        assert [i.quantity.value for i in cart.items] == [2, 3]
        assert cart.quantity_of(widget) == 5

    def test_zero_quantity_rejected(self):
        with pytest.raises(ValidationError, match="must be positive"):
            Cart().add(_widget(), 0)


class TestCartView:

    def test_insertion_order_preserved(self):
        a = Product.plain("A", Money.of("1"), 9)
        b = Product.plain("B", Money.of("2"), 9)
        c = Product.plain("C", Money.of("3"), 9)
        cart = Cart()
        for p in (b, c, a):
            cart.add(p, 1)
        assert [i.product.name for i in cart.items] == ["B", "C", "A"]

    def test_items_is_read_only_snapshot(self):
        cart = Cart()
        cart.add(_widget(), 1)
        items = cart.items
        assert isinstance(items, tuple)
        cart.clear()
        assert len(items) == 1
        assert cart.is_empty()

    def test_line_total(self):
        cart = Cart()
        item = cart.add(_widget(), 3)
        assert item.line_total == Money.of("30")
