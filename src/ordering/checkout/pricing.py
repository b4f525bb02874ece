"""Checkout pricing: cart subtotal and loyalty discount."""

from decimal import Decimal

from identity.customer.tier import LoyaltyTier, discount_rate_for
from ordering.cart.cart import Cart


def apply_loyalty_discount(subtotal: Decimal, tier: LoyaltyTier) -> Decimal:
    """Take the tier's discount off the subtotal, once."""
    rate = discount_rate_for(tier)
    if not rate:
        return subtotal
    return subtotal * (Decimal("1") - rate)


def compute_final_total(cart: Cart) -> Decimal:
    """Amount to charge for ``cart``: subtotal less the customer's loyalty discount."""
    return apply_loyalty_discount(cart.subtotal(), cart.user.tier)
