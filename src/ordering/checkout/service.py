"""Checkout service: turns a cart and a payment token into a persisted order.

Flow (each step waits on the previous one):
    1. Price the cart: subtotal less the customer's loyalty discount.
    2. Charge the final total through the payment gateway.
    3a. Declined → return None. Nothing is persisted and nobody is notified.
    3b. Authorized → save the order, then email the confirmation.
    4. Return the order the repository persisted.

Collaborator faults are not translated or compensated: an exception raised by
the gateway, repository or notifier reaches the caller unchanged. Faults after
a successful charge are logged before they propagate.
"""

from decimal import Decimal

import structlog

from notifications.channel import get_notifier
from notifications.channel.email_port import Notifier
from notifications.templates.order_confirmation import OrderConfirmationTemplate
from ordering.cart.cart import Cart
from ordering.checkout.pricing import compute_final_total
from ordering.order.order import Order, OrderCandidate
from ordering.repository import get_order_repository
from ordering.repository.port import OrderRepository
from payments.gateway import get_gateway
from payments.gateway.port import PaymentGateway

logger = structlog.get_logger(__name__)


class CheckoutService:
    """Sequences charge → save → notify for a single cart."""

    def __init__(
        self,
        gateway: PaymentGateway,
        repository: OrderRepository,
        notifier: Notifier,
    ) -> None:
        self.gateway = gateway
        self.repository = repository
        self.notifier = notifier

    async def process_order(self, cart: Cart, payment_token: str) -> Order | None:
        """Charge the cart and, if authorized, persist the order and confirm by email.

        Returns the persisted order, or None when the gateway declines.
        """
        with structlog.contextvars.bound_contextvars(user_id=cart.user.id):
            final_total = compute_final_total(cart)

            logger.debug("Requesting charge", amount=str(final_total), items=len(cart.items))
            result = await self.gateway.charge(amount=final_total, token=payment_token)

            if not result.success:
                logger.info("Payment declined", amount=str(final_total), error=result.error)
                return None

            order = await self._save(cart, final_total)
            await self._send_confirmation(cart, order)
            return order

    async def _save(self, cart: Cart, final_total: Decimal) -> Order:
        try:
            order = await self.repository.save(OrderCandidate(cart=cart, final_total=final_total))
        except Exception:
            logger.exception("Order persistence failed after successful charge", amount=str(final_total))
            raise

        logger.info("Order persisted", order_id=order.id, total=str(order.total_final), status=order.status)
        return order

    async def _send_confirmation(self, cart: Cart, order: Order) -> None:
        message = OrderConfirmationTemplate.render(
            {
                "order_id": order.id,
                "total": order.total_final,
                "customer_name": cart.user.name,
            }
        )
        try:
            await self.notifier.send_email(
                to=cart.user.email,
                subject=message["subject"],
                body=message["body"],
            )
        except Exception:
            logger.exception("Order confirmation failed after successful charge", order_id=order.id)
            raise

        logger.info("Order confirmation sent", order_id=order.id)


def create_checkout_service(
    gateway: PaymentGateway | None = None,
    repository: OrderRepository | None = None,
    notifier: Notifier | None = None,
) -> CheckoutService:
    """Build a CheckoutService, filling unspecified collaborators from their registries."""
    return CheckoutService(
        gateway=gateway if gateway is not None else get_gateway(),
        repository=repository if repository is not None else get_order_repository(),
        notifier=notifier if notifier is not None else get_notifier(),
    )
