"""Tests for OrderCandidate and Order."""

from decimal import Decimal

import pytest
from ordering.order.order import Order, OrderCandidate, OrderStatus
from pydantic import ValidationError

from tests.builders import CartBuilder


class TestOrderCandidate:
    def test_carries_cart_and_total(self):
        cart = CartBuilder.a_cart().build()
        candidate = OrderCandidate(cart=cart, final_total=Decimal("90.00"))
        assert candidate.cart is cart
        assert candidate.final_total == Decimal("90.00")


class TestOrder:
    def test_default_status_is_processed(self):
        order = Order(id=123, cart=CartBuilder.a_cart().build(), total_final="100.00")
        assert order.status == OrderStatus.PROCESSED.value == "PROCESSED"

    def test_total_coerced_to_decimal(self):
        order = Order(id=123, cart=CartBuilder.a_cart().build(), total_final=100.0)
        assert order.total_final == Decimal("100.0")

    def test_integer_id_kept_as_int(self):
        order = Order(id=123, cart=CartBuilder.a_cart().build(), total_final="100.00")
        assert order.id == 123

    def test_other_statuses_pass_through(self):
        order = Order(id="ord-1", cart=CartBuilder.a_cart().build(), total_final="100.00", status="ON_HOLD")
        assert order.status == "ON_HOLD"

    def test_is_immutable(self):
        order = Order(id=123, cart=CartBuilder.a_cart().build(), total_final="100.00")
        with pytest.raises(ValidationError):
            order.status = "CANCELLED"
