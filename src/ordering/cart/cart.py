"""Shopping cart value object: the unpersisted input to checkout.

A cart pairs the customer with the items they intend to buy. It is built
before checkout, read by the checkout service, and discarded afterwards;
nothing in the ordering flow mutates it.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from identity.customer.user import User
from ordering.cart.items import Item


class Cart(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: User
    items: tuple[Item, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.items

    def subtotal(self) -> Decimal:
        """Sum of item prices; zero for an empty cart."""
        return sum((item.price for item in self.items), Decimal("0"))
