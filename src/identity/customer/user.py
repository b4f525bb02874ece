"""Checkout customer value object."""

from pydantic import BaseModel, ConfigDict

from identity.customer.tier import LoyaltyTier


class User(BaseModel):
    """Authenticated customer placing an order.

    Built by whoever authenticates the customer and only lives for one
    checkout. ``tier`` drives the loyalty discount.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    name: str
    email: str
    tier: LoyaltyTier = LoyaltyTier.STANDARD

    @property
    def is_premium(self) -> bool:
        return self.tier == LoyaltyTier.PREMIUM
