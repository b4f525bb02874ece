"""Ordering context exceptions."""


class OrderingError(Exception):
    """Base class for ordering errors."""


class OrderNotFoundError(OrderingError):
    """Raised when an order id is not known to the repository."""

    def __init__(self, order_id: int | str) -> None:
        self.order_id = order_id
        super().__init__(f"Order {order_id!r} not found")
