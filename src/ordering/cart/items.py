"""Cart line item value object."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class Item(BaseModel):
    """A product placed in the cart, priced per unit."""

    model_config = ConfigDict(frozen=True)

    description: str
    price: Decimal
