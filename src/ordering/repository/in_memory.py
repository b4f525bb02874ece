"""In-memory order repository for development and testing."""

import asyncio

from ordering.exceptions import OrderNotFoundError
from ordering.order.order import Order, OrderCandidate, OrderStatus
from ordering.repository.port import OrderRepository


class InMemoryOrderRepository(OrderRepository):
    """Keeps orders in a dict keyed by sequential integer ids."""

    def __init__(self) -> None:
        self._orders: dict[int, Order] = {}
        self._next_id = 1
        self._lock = asyncio.Lock()

    async def save(self, candidate: OrderCandidate) -> Order:
        async with self._lock:
            order = Order(
                id=self._next_id,
                cart=candidate.cart,
                total_final=candidate.final_total,
                status=OrderStatus.PROCESSED.value,
            )
            self._orders[order.id] = order
            self._next_id += 1
        return order

    def get(self, order_id: int) -> Order:
        try:
            return self._orders[order_id]
        except KeyError:
            raise OrderNotFoundError(order_id) from None

    def list_orders(self) -> list[Order]:
        return list(self._orders.values())

    def reset(self) -> None:
        """Forget every stored order and restart ids at 1."""
        self._orders.clear()
        self._next_id = 1
