"""Customer loyalty tiers and the discount each tier earns at checkout."""

from decimal import Decimal
from enum import Enum


class LoyaltyTier(Enum):
    """Enumeration of customer loyalty tiers."""

    STANDARD = "Standard"
    PREMIUM = "Premium"


# Fraction of the subtotal taken off at checkout. Must cover every LoyaltyTier.
DISCOUNT_RATES: dict[LoyaltyTier, Decimal] = {
    LoyaltyTier.STANDARD: Decimal("0"),
    LoyaltyTier.PREMIUM: Decimal("0.10"),
}


def discount_rate_for(tier: LoyaltyTier) -> Decimal:
    """Look up the discount rate for a loyalty tier."""
    try:
        return DISCOUNT_RATES[tier]
    except KeyError:
        raise ValueError(f"No discount rate configured for tier: {tier!r}") from None
