"""Order confirmation template: sent once an order is paid and persisted."""

from decimal import Decimal

SUBJECT = "Pagamento confirmado!"

_CENTS = Decimal("0.01")


def format_total(total: Decimal) -> str:
    """Two decimals when that is exact, otherwise every digit of the charged amount."""
    if total == total.quantize(_CENTS):
        return f"{total:.2f}"
    return str(total)


class OrderConfirmationTemplate:
    subject = SUBJECT

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        total = Decimal(str(context.get("total", "0")))
        customer_name = context.get("customer_name")
        greeting = f"Olá, {customer_name}!" if customer_name else "Olá!"
        return {
            "subject": SUBJECT,
            "body": (
                f"{greeting}\n\n"
                f"Seu pedido #{order_id} foi confirmado.\n\n"
                f"Total pago: R$ {format_total(total)}\n\n"
                "Obrigado pela sua compra!"
            ),
        }
