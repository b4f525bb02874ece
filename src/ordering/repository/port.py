"""Order repository port (abstract interface).

The checkout service persists orders through this contract only, so the
in-memory adapter used in development and tests can be swapped for a real
store without touching checkout code.
"""

from abc import ABC, abstractmethod

from ordering.order.order import Order, OrderCandidate


class OrderRepository(ABC):
    """Abstract order persistence interface."""

    @abstractmethod
    async def save(self, candidate: OrderCandidate) -> Order:
        """Persist a charged cart and return the authoritative order.

        Implementations assign a unique identifier and a status.
        """
        ...
