"""Configurable fake payment gateway for development and testing.

This adapter simulates a real payment gateway without any external calls.
It can be configured at runtime to succeed or fail, making it useful for
automated tests with predictable outcomes and for development without real
gateway credentials.
"""

from decimal import Decimal
from uuid import uuid4

from payments.gateway.port import ChargeResult, PaymentGateway


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self) -> None:
        self.should_succeed: bool = True
        self.failure_reason: str = "Card declined"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Card declined") -> None:
        """Configure gateway behavior at runtime."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    async def charge(self, amount: Decimal, token: str) -> ChargeResult:
        self.calls.append({"method": "charge", "amount": amount, "token": token})

        if self.should_succeed:
            return ChargeResult(
                success=True,
                transaction_id=f"fake_txn_{uuid4().hex[:12]}",
            )
        return ChargeResult(success=False, error=self.failure_reason)
