"""Email channel port: abstract interface for customer notifications."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Abstract interface for email dispatch adapters."""

    @abstractmethod
    async def send_email(self, to: str, subject: str, body: str) -> bool:
        """Send an email message.

        Returns:
            True when the message was accepted for delivery.
        """
        ...
