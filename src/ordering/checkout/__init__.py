"""Checkout entry points."""

from ordering.checkout.service import CheckoutService, create_checkout_service

__all__ = ["CheckoutService", "create_checkout_service"]
