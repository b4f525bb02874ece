"""Order records produced by checkout.

``OrderCandidate`` is what the checkout service hands to the repository
after a successful charge. ``Order`` is what the repository hands back: the
persisted record carrying the identifier and status the repository assigned.
"""

from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict

from ordering.cart.cart import Cart


class OrderStatus(Enum):
    PROCESSED = "PROCESSED"


class OrderCandidate(BaseModel):
    """Charged cart awaiting persistence."""

    model_config = ConfigDict(frozen=True)

    cart: Cart
    final_total: Decimal


class Order(BaseModel):
    """Persisted order.

    ``status`` is whatever the repository assigned. Checkout only ever asks
    for PROCESSED orders but passes other values through untouched.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    cart: Cart
    total_final: Decimal
    status: str = OrderStatus.PROCESSED.value
