"""Payment gateway port (abstract interface).

Defines the contract that all payment gateway adapters must implement.
This enables swapping the FakeGateway used in development and tests for a
real processor without changing any checkout code.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class ChargeResult:
    """Result of a payment charge attempt.

    ``error`` is informational; callers branch on ``success`` only.
    """

    success: bool
    error: str | None = None
    transaction_id: str | None = None


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        """Authorize and capture ``amount`` against the instrument behind ``token``.

        A declined charge is reported through ``ChargeResult(success=False)``;
        exceptions are reserved for faults such as the gateway being unreachable.
        """
        ...
