"""Order repository factory.

Provides get_order_repository() / set_order_repository() to swap
implementations. Defaults to InMemoryOrderRepository.
"""

from ordering.repository.in_memory import InMemoryOrderRepository
from ordering.repository.port import OrderRepository

_current_repository: OrderRepository | None = None


def get_order_repository() -> OrderRepository:
    """Return the current order repository. Defaults to InMemoryOrderRepository."""
    global _current_repository
    if _current_repository is None:
        _current_repository = InMemoryOrderRepository()
    return _current_repository


def set_order_repository(repository: OrderRepository) -> None:
    """Override the active order repository (useful for tests)."""
    global _current_repository
    _current_repository = repository


def reset_order_repository() -> None:
    """Reset to default repository."""
    global _current_repository
    _current_repository = None
